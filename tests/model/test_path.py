"""Tests for the Path value object."""

from dataclasses import FrozenInstanceError

import pytest

from routegraph.model.path import Path


def test_path_basic_creation():
    path = Path(("A", "B", "C"), 15)

    assert path.stops == ("A", "B", "C")
    assert path.weight == 15
    assert len(path) == 3
    assert path.source == "A"
    assert path.target == "C"
    assert path.hops == 2


def test_path_stores_stops_as_tuple():
    stops = ["A", "B"]
    path = Path(stops, 1)
    stops.append("C")

    assert path.stops == ("A", "B")


def test_single_stop_path():
    path = Path(["A"], 0)

    assert path.source == path.target == "A"
    assert path.hops == 0


def test_iter_and_getitem():
    path = Path([0, 2, 3], 4.5)

    assert list(path) == [0, 2, 3]
    assert path[0] == 0
    assert path[-1] == 3


@pytest.mark.parametrize("weight", [-1, -0.5])
def test_negative_weight_rejected(weight):
    with pytest.raises(ValueError, match=">= 0"):
        Path(["A", "B"], weight)


@pytest.mark.parametrize("weight", ["10", None, True])
def test_non_numeric_weight_rejected(weight):
    with pytest.raises(ValueError, match="must be a number"):
        Path(["A", "B"], weight)


def test_nan_weight_rejected():
    with pytest.raises(ValueError, match="NaN"):
        Path(["A", "B"], float("nan"))


def test_path_is_immutable():
    path = Path(["A", "B"], 1)

    with pytest.raises(FrozenInstanceError):
        path.weight = 2  # type: ignore[misc]


def test_with_weight_revalidates():
    path = Path(["A", "B"], 1)

    updated = path.with_weight(7)
    assert updated.weight == 7
    assert updated.stops == path.stops
    assert path.weight == 1

    with pytest.raises(ValueError):
        path.with_weight(-3)


def test_with_stops():
    path = Path(["A", "B"], 1)

    updated = path.with_stops(["A", "C"])
    assert updated.stops == ("A", "C")
    assert updated.weight == 1


def test_equality_hash_and_ordering():
    p1 = Path(["A", "B"], 1)
    p2 = Path(("A", "B"), 1)
    p3 = Path(["A", "C"], 3)

    assert p1 == p2
    assert hash(p1) == hash(p2)
    assert p1 != p3
    assert p1 < p3
    assert sorted([p3, p1]) == [p1, p3]
    assert p1.__lt__("not a path") is NotImplemented


def test_str_rendering():
    assert str(Path(["A", "B", "C"], 16)) == "A -> B -> C (weight: 16)"
