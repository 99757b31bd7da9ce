"""
Silk Road — Robot Class
A mobile point entity that remembers where it started.
"""

from dataclasses import dataclass, field
import logging

from .rendering import Renderable, RenderSpec, ShapeKind
from ..config import RouteConfig

logger = logging.getLogger(__name__)


@dataclass
class Robot(Renderable):
    """
    A robot standing on one location of the route.

    The robot never signals failure: an out-of-range move is simply not
    applied, and it is up to the caller to decide what that means.
    """

    location: int
    initial_location: int = field(init=False)
    visible: bool = True

    def __post_init__(self):
        self.initial_location = self.location

    def move(self, meters: int, road_length: int) -> bool:
        """
        Move the robot a number of meters (positive or negative).

        Returns:
            True if the robot moved, False if the target was off the route.
        """
        new_location = self.location + meters
        if 0 <= new_location < road_length:
            self.location = new_location
            return True

        logger.debug(f"Robot at {self.location}: move of {meters} would leave the route, ignored")
        return False

    def reset_position(self):
        """Send the robot back to where it was placed."""
        self.location = self.initial_location

    def render_spec(self, config: RouteConfig) -> RenderSpec:
        return RenderSpec(
            kind=ShapeKind.CIRCLE,
            color=config.robot_color,
            location=self.location,
            pixel_x=config.to_pixels(self.location),
            visible=self.visible,
        )

    def get_status(self) -> dict:
        """Get current status as dictionary."""
        return {
            "location": self.location,
            "initial_location": self.initial_location,
            "visible": self.visible,
        }

    def __repr__(self) -> str:
        return f"Robot(at {self.location}, from {self.initial_location})"
