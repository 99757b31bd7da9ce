"""
Silk Road — Route Simulator
Stores and robots placed, moved and reset along a bounded route.
"""

__version__ = "1.0.0"

from .config import ROUTE, RouteConfig

from .core import (
    Robot,
    Agent,
    Store,
    SilkRoad,
    RouteCoordinator,
    Renderable,
    RenderSpec,
    Presenter,
    ShapeKind,
)

from .session import Command, CommandResult, ScriptedSession

__all__ = [
    # Version info
    "__version__",

    # Config
    "ROUTE",
    "RouteConfig",

    # Core classes
    "Robot",
    "Agent",
    "Store",
    "SilkRoad",
    "RouteCoordinator",
    "Renderable",
    "RenderSpec",
    "Presenter",
    "ShapeKind",

    # Command surface
    "Command",
    "CommandResult",
    "ScriptedSession",
]
