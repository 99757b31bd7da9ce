"""
Silk Road — Rendering Capability
Entities describe how they should look; presenters do the drawing.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from ..config import RouteConfig


class ShapeKind(Enum):
    """Shape a presenter should use for an entity."""
    CIRCLE = auto()     # Robots
    RECTANGLE = auto()  # Stores


@dataclass(frozen=True)
class RenderSpec:
    """Everything a presenter needs to draw one entity."""
    kind: ShapeKind
    color: str
    location: int
    pixel_x: int
    visible: bool = True
    tenges: Optional[int] = None


class Renderable(ABC):
    """Capability exposed by anything that can be shown on the route."""

    @abstractmethod
    def render_spec(self, config: RouteConfig) -> RenderSpec:
        """Describe this entity for a presenter."""
        pass


class Presenter(ABC):
    """
    External collaborator that turns render specs into pixels.

    The route never draws anything itself; it hands the full picture to
    its presenter after each change while it is visible.
    """

    @abstractmethod
    def present(self, specs: List[RenderSpec]):
        """Show the given entities, replacing whatever was shown before."""
        pass

    @abstractmethod
    def clear(self):
        """Remove everything from the screen."""
        pass
