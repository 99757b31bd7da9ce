"""
Silk Road — Store Class
A stationary entity holding a stock of tenges.
"""

from dataclasses import dataclass, field

from .rendering import Renderable, RenderSpec, ShapeKind
from ..config import RouteConfig


@dataclass
class Store(Renderable):
    """
    A store at a fixed location on the route.

    Tracks the current stock and the stock it opened with, so it can be
    resupplied or reset at any time.
    """

    location: int
    tenges: int
    initial_tenges: int = field(init=False)
    visible: bool = True

    def __post_init__(self):
        self.initial_tenges = self.tenges

    def resupply(self):
        """Restock to the initial amount."""
        self.tenges = self.initial_tenges

    def reset(self):
        """Reset the store (same effect as resupply)."""
        self.resupply()

    def render_spec(self, config: RouteConfig) -> RenderSpec:
        return RenderSpec(
            kind=ShapeKind.RECTANGLE,
            color=config.store_color,
            location=self.location,
            pixel_x=config.to_pixels(self.location),
            visible=self.visible,
            tenges=self.tenges,
        )

    def get_status(self) -> dict:
        """Get current status as dictionary."""
        return {
            "location": self.location,
            "tenges": self.tenges,
            "initial_tenges": self.initial_tenges,
            "visible": self.visible,
        }

    def __repr__(self) -> str:
        return f"Store(at {self.location}: {self.tenges}/{self.initial_tenges} tenges)"
