"""
Silk Road — Configuration
Route defaults and the visual scale handed to presenters.
"""

from dataclasses import dataclass


@dataclass
class RouteConfig:
    """Defaults for a Silk Road route."""

    # Route
    default_length: int = 10  # meters

    # Visual mapping (used by presenters only)
    pixels_per_meter: int = 20
    origin_x: int = 0
    robot_color: str = "blue"
    store_color: str = "green"

    def __post_init__(self):
        if self.default_length <= 0:
            raise ValueError(f"Route length must be positive: {self.default_length}")
        if self.pixels_per_meter <= 0:
            raise ValueError(f"Visual scale must be positive: {self.pixels_per_meter}")

    def to_pixels(self, location: int) -> int:
        """Map a route location to a horizontal pixel offset."""
        return self.origin_x + location * self.pixels_per_meter


# =============================================================================
# GLOBAL CONFIG INSTANCE
# =============================================================================

ROUTE = RouteConfig()
