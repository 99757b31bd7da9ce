"""
Silk Road — Core Module
Contains the route coordinator, its entities and the rendering capability.
"""

from .robot import Robot
from .store import Store
from .route import SilkRoad, RouteCoordinator
from .rendering import Renderable, RenderSpec, Presenter, ShapeKind

# Generic name for a robot
Agent = Robot

__all__ = [
    # Entities
    "Robot",
    "Agent",
    "Store",

    # Route
    "SilkRoad",
    "RouteCoordinator",

    # Rendering
    "Renderable",
    "RenderSpec",
    "Presenter",
    "ShapeKind",
]
