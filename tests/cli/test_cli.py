"""Tests for the routegraph command-line interface."""

import logging

import pytest

from routegraph import cli
from routegraph.airline import Airline


def _scripted(lines):
    """Return a fake ``input`` that replays ``lines`` and then signals EOF."""
    remaining = list(lines)
    prompts = []

    def read(prompt: str) -> str:
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    read.prompts = prompts
    return read


def test_no_args_prints_help_and_exits_zero(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])

    assert exc_info.value.code == 0
    assert "usage: routegraph" in capsys.readouterr().out


def test_cities_lists_all_cities(capsys):
    cli.main(["cities"])
    out = capsys.readouterr().out

    assert out.startswith("Cities:\n")
    for city in Airline().cities:
        assert f" > {city}\n" in out


def test_route_prints_cheapest_flight(capsys):
    cli.main(["route", "New York", "  LA "])
    out = capsys.readouterr().out

    assert "Searching for most affordable flight..." in out
    assert "  From: new york" in out
    assert "  Cost: $145.00" in out
    assert "  Route: new york -> chicago -> san francisco -> la" in out


def test_route_without_connection(capsys):
    cli.main(["route", "la", "miami"])
    out = capsys.readouterr().out

    assert "there are no flights going from la to miami" in out


def test_route_unknown_city_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["route", "boston", "la"])

    assert exc_info.value.code == 2
    assert "boston" in capsys.readouterr().err


def test_route_same_city_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["route", "la", "LA"])

    assert exc_info.value.code == 2


class TestPromptCity:
    def test_reprompts_until_valid(self):
        read = _scripted(["boston", "  Chicago  "])
        errors = []

        city = cli.prompt_city("> ", "bad city", ["chicago", "la"], read, errors.append)

        assert city == "chicago"
        assert errors == ["bad city"]
        assert read.prompts == ["> ", "> "]

    def test_eof_propagates(self):
        with pytest.raises(EOFError):
            cli.prompt_city("> ", "bad", ["la"], _scripted(["x"]), lambda _: None)


class TestReserve:
    def test_destination_must_differ_from_origin(self):
        output = []
        read = _scripted(["new york", "new york", "la"])

        origin, destination, flight = cli._reserve(Airline(), read, output.append)

        assert (origin, destination) == ("new york", "la")
        assert flight.cost == 145
        assert any("cannot be the same as your origin" in line for line in output)
        assert output[0].startswith("Cities:")

    def test_main_reserve_flow(self, capsys, monkeypatch):
        monkeypatch.setattr("builtins.input", _scripted(["Miami", "san diego"]))

        cli.main(["reserve"])
        out = capsys.readouterr().out

        assert "[x]" not in out
        assert "  Route: miami -> dallas -> san diego" in out
        assert "  Cost: $140.00" in out

    def test_main_reserve_no_flights(self, capsys, monkeypatch):
        monkeypatch.setattr("builtins.input", _scripted(["la", "chicago"]))

        cli.main(["reserve"])

        assert "no flights going from la to chicago" in capsys.readouterr().out

    def test_main_reserve_eof_exits_nonzero(self, monkeypatch):
        monkeypatch.setattr("builtins.input", _scripted([]))

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["reserve"])

        assert exc_info.value.code == 1


def test_verbose_and_quiet_switch_levels(caplog):
    with caplog.at_level(logging.DEBUG, logger="routegraph"):
        cli.main(["--verbose", "route", "new york", "la"])
    assert any("Debug logging enabled" in r.message for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="routegraph"):
        cli.main(["--quiet", "route", "la", "miami"])
    assert not any(r.levelno == logging.INFO for r in caplog.records)
