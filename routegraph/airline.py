"""Airline route network built on `LabeledGraph`.

`Airline` declares a set of cities and priced one-way routes, and answers
"cheapest way to fly from X to Y" queries with `Flight` records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from routegraph.algorithms.base import Cost, validate_cost
from routegraph.config import DISPLAY_CONFIG, DisplayConfig
from routegraph.graph.labeled_graph import LabeledGraph
from routegraph.logging import get_logger

logger = get_logger(__name__)

#: Cities served by the default network.
DEFAULT_CITIES: Tuple[str, ...] = (
    "new york",
    "chicago",
    "san francisco",
    "denver",
    "dallas",
    "miami",
    "san diego",
    "la",
)

#: One-way routes of the default network as (origin, destination, price).
DEFAULT_ROUTES: Tuple[Tuple[str, str, Cost], ...] = (
    ("new york", "chicago", 75),
    ("new york", "denver", 100),
    ("new york", "dallas", 125),
    ("new york", "miami", 90),
    ("chicago", "san francisco", 25),
    ("chicago", "denver", 20),
    ("denver", "san francisco", 75),
    ("denver", "la", 100),
    ("dallas", "la", 80),
    ("dallas", "san diego", 90),
    ("miami", "dallas", 50),
    ("san francisco", "la", 45),
    ("san diego", "la", 45),
)


@dataclass(frozen=True)
class Flight:
    """
    Cheapest itinerary between two cities.

    Attributes:
        origin: Departure city.
        destination: Arrival city.
        cost: Total price of the itinerary; never negative.
        route: Cities visited in order, origin and destination included.
    """

    origin: str
    destination: str
    cost: Cost
    route: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        validate_cost(self.cost, "cost")
        object.__setattr__(self, "route", tuple(self.route))

    def describe(self, config: DisplayConfig = DISPLAY_CONFIG) -> str:
        """Render the flight as a multi-line information block."""
        return (
            "> Flight Information:\n"
            f"  From: {self.origin}\n"
            f"  To: {self.destination}\n"
            f"  Cost: {config.format_cost(self.cost)}\n"
            f"  Route: {config.format_route(self.route)}"
        )


class Airline:
    """
    A route network over a fixed set of cities.

    Args:
        cities: City names; unique. Defaults to `DEFAULT_CITIES`.
        routes: ``(origin, destination, price)`` triples. Defaults to
            `DEFAULT_ROUTES`.

    Raises:
        ValueError: If cities are duplicated or a price is negative.
        KeyError: If a route names an unknown city.
    """

    def __init__(
        self,
        cities: Sequence[str] = DEFAULT_CITIES,
        routes: Iterable[Tuple[str, str, Cost]] = DEFAULT_ROUTES,
    ) -> None:
        self._cities = tuple(cities)
        self._graph: LabeledGraph[str] = LabeledGraph(len(self._cities), self._cities)
        self._graph.add_edges_from(routes)
        logger.debug(
            "Airline network ready: %d cities, %d routes",
            self._graph.size(),
            self._graph.edge_count,
        )

    @property
    def cities(self) -> Tuple[str, ...]:
        """Cities served, in declaration order."""
        return self._cities

    @property
    def graph(self) -> LabeledGraph[str]:
        """Underlying route graph."""
        return self._graph

    def find_cheapest(self, origin: str, destination: str) -> Optional[Flight]:
        """
        Find the cheapest itinerary from ``origin`` to ``destination``.

        Returns:
            A `Flight`, or ``None`` when no sequence of routes connects the cities.

        Raises:
            KeyError: If either city is not served.
        """
        path = self._graph.shortest_path(origin, destination)
        if path is None:
            logger.info("No route from %s to %s", origin, destination)
            return None
        logger.debug("Cheapest route %s -> %s: %s", origin, destination, path)
        return Flight(origin, destination, path.weight, path.stops)
