"""Command-line interface for routegraph."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional, Sequence, Tuple

from routegraph.airline import Airline, Flight
from routegraph.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _normalize_city(raw: str) -> str:
    return raw.strip().lower()


def _format_cities(cities: Sequence[str]) -> str:
    lines = ["Cities:"]
    lines.extend(f" > {city}" for city in cities)
    return "\n".join(lines)


def _format_no_flight(origin: str, destination: str) -> str:
    return (
        f"> Currently, there are no flights going from {origin} to {destination}.\n"
        "  Please check again later or explore flights to other destinations."
    )


def _print_flight(flight: Optional[Flight], origin: str, destination: str) -> None:
    if flight is None:
        print(_format_no_flight(origin, destination))
        return
    print("Searching for most affordable flight...")
    print(flight.describe())


def prompt_city(
    prompt: str,
    error: str,
    choices: Sequence[str],
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> str:
    """Prompt until the user enters one of ``choices``.

    Input is stripped and lower-cased before matching.

    Args:
        prompt: Text shown before each read.
        error: Message shown after an invalid entry.
        choices: Accepted city names.
        read: Line reader (defaults to ``input``).
        write: Message writer (defaults to ``print``).

    Returns:
        The accepted city name.

    Raises:
        EOFError: If input ends before a valid city is entered.
    """
    read = read or input
    write = write or print
    city = _normalize_city(read(prompt))
    while city not in choices:
        logger.debug("Rejected city input: %r", city)
        write(error)
        city = _normalize_city(read(prompt))
    return city


def _reserve(
    airline: Airline,
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> Tuple[str, str, Optional[Flight]]:
    """Interactive flow: pick an origin and a distinct destination, then search."""
    write = write or print
    cities = list(airline.cities)
    write(_format_cities(cities))
    write("")
    origin = prompt_city(
        "[*] Origin: ", "[x] Please enter a valid city.", cities, read, write
    )
    remaining = [city for city in cities if city != origin]
    destination = prompt_city(
        "[*] Destination: ",
        "[x] Please enter a valid city. "
        "(Your destination cannot be the same as your origin.)",
        remaining,
        read,
        write,
    )
    write("")
    return origin, destination, airline.find_cheapest(origin, destination)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``routegraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="routegraph",
        description="Find the cheapest flight between two cities.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{cities,route,reserve}",
        help="Available commands",
    )

    subparsers.add_parser("cities", help="List the cities served")

    route_parser = subparsers.add_parser(
        "route", help="Show the cheapest flight between two cities"
    )
    route_parser.add_argument("origin", help="Departure city")
    route_parser.add_argument("destination", help="Arrival city")

    subparsers.add_parser(
        "reserve", help="Interactively choose an origin and destination"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    airline = Airline()

    if args.command == "cities":
        print(_format_cities(airline.cities))
    elif args.command == "route":
        origin = _normalize_city(args.origin)
        destination = _normalize_city(args.destination)
        if origin == destination:
            parser.error("origin and destination must be different cities")
        try:
            flight = airline.find_cheapest(origin, destination)
        except KeyError as exc:
            parser.error(exc.args[0])
        _print_flight(flight, origin, destination)
    elif args.command == "reserve":
        try:
            origin, destination, flight = _reserve(airline)
        except (EOFError, KeyboardInterrupt):
            print()
            logger.info("Reservation cancelled")
            raise SystemExit(1) from None
        _print_flight(flight, origin, destination)


if __name__ == "__main__":
    main()
