"""Configuration classes for routegraph components."""

from dataclasses import dataclass


@dataclass
class DisplayConfig:
    """Formatting settings for routes and costs shown to users."""

    # Separator placed between consecutive stops of a route
    route_separator: str = " -> "

    # Number of decimal places for costs
    cost_precision: int = 2

    # Prefix for monetary costs
    currency_symbol: str = "$"

    def format_cost(self, cost: float) -> str:
        """Render a cost with the configured symbol and precision."""
        return f"{self.currency_symbol}{cost:.{self.cost_precision}f}"

    def format_route(self, stops) -> str:
        """Join route stops with the configured separator."""
        return self.route_separator.join(str(stop) for stop in stops)


# Global configuration instance
DISPLAY_CONFIG = DisplayConfig()
