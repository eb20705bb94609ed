"""Path value object returned by shortest-path queries."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Generic, Iterable, Iterator, Tuple, TypeVar

from routegraph.algorithms.base import Cost, validate_cost

T = TypeVar("T")


@dataclass(frozen=True)
class Path(Generic[T]):
    """Ordered stops from a source to a target, plus the total edge weight.

    Stops are vertex labels or vertex indices depending on the query that
    produced the path. A path to the source itself has one stop and weight 0.

    Attributes:
        stops: Stops from source to target, inclusive.
        weight: Sum of the edge weights along ``stops``; never negative.
    """

    stops: Tuple[T, ...]
    weight: Cost

    def __post_init__(self) -> None:
        validate_cost(self.weight)
        # Accept any iterable of stops but always store a tuple
        object.__setattr__(self, "stops", tuple(self.stops))

    def __len__(self) -> int:
        """Return the number of stops."""
        return len(self.stops)

    def __iter__(self) -> Iterator[T]:
        return iter(self.stops)

    def __getitem__(self, idx: int) -> T:
        return self.stops[idx]

    def __lt__(self, other: Any) -> bool:
        """Order paths by weight."""
        if not isinstance(other, Path):
            return NotImplemented
        return self.weight < other.weight

    @property
    def source(self) -> T:
        """First stop of the path."""
        return self.stops[0]

    @property
    def target(self) -> T:
        """Last stop of the path."""
        return self.stops[-1]

    @property
    def hops(self) -> int:
        """Number of edges traversed."""
        return max(len(self.stops) - 1, 0)

    def with_weight(self, weight: Cost) -> Path[T]:
        """Return a copy with a different weight.

        Raises:
            ValueError: If ``weight`` is negative.
        """
        return replace(self, weight=weight)

    def with_stops(self, stops: Iterable[T]) -> Path[T]:
        """Return a copy with a different stop sequence."""
        return replace(self, stops=tuple(stops))

    def __str__(self) -> str:
        return f"{' -> '.join(str(stop) for stop in self.stops)} (weight: {self.weight})"
