"""
Silk Road — Route Coordinator
Owns the stores and robots on the route and enforces where they may go.
"""

from typing import List, Optional
import logging

from .robot import Robot
from .store import Store
from .rendering import Presenter, RenderSpec
from ..config import RouteConfig, ROUTE

logger = logging.getLogger(__name__)


class SilkRoad:
    """
    A bounded route [0, length) with stores and robots on it.

    Operations never raise for domain outcomes. Each mutating call
    overwrites a single status flag, readable through ok(), and also
    returns that same value.
    """

    def __init__(
        self,
        length: Optional[int] = None,
        config: RouteConfig = ROUTE,
        presenter: Optional[Presenter] = None,
    ):
        self.config = config
        self.length = config.default_length if length is None else length
        if self.length <= 0:
            raise ValueError(f"Route length must be positive: {self.length}")

        self.stores: List[Store] = []
        self.robots: List[Robot] = []

        self.visible = False
        self.presenter = presenter

        self._profit = 0
        self._ok = True

        logger.info(f"Silk Road created with length {self.length}")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _in_range(self, location: int) -> bool:
        return 0 <= location < self.length

    def _show_entities(self, visible: bool):
        for entity in [*self.stores, *self.robots]:
            entity.visible = visible

    def _done(self, ok: bool) -> bool:
        """Record the outcome of a mutating operation and refresh the view."""
        self._ok = ok
        if ok and self.visible and self.presenter is not None:
            self.presenter.present(self.render_specs())
        return ok

    def store_at(self, location: int) -> Optional[Store]:
        """First store at a location, if any."""
        for store in self.stores:
            if store.location == location:
                return store
        return None

    def robot_at(self, location: int) -> Optional[Robot]:
        """First robot at a location, if any."""
        for robot in self.robots:
            if robot.location == location:
                return robot
        return None

    # -------------------------------------------------------------------------
    # Stores
    # -------------------------------------------------------------------------

    def place_store(self, location: int, tenges: int) -> bool:
        """
        Place a store, if possible.

        Conditions:
        - the location is inside the route
        - there is no store at that location yet
        """
        if not self._in_range(location):
            logger.warning(f"Store rejected: location {location} outside route [0, {self.length})")
            return self._done(False)
        if self.store_at(location) is not None:
            logger.warning(f"Store rejected: location {location} already has a store")
            return self._done(False)

        self.stores.append(Store(location, tenges, visible=self.visible))
        logger.debug(f"Store placed at {location} with {tenges} tenges")
        return self._done(True)

    def remove_store(self, location: int) -> bool:
        """Remove every store at a location. Always succeeds."""
        before = len(self.stores)
        self.stores = [s for s in self.stores if s.location != location]
        logger.debug(f"Removed {before - len(self.stores)} store(s) at {location}")
        return self._done(True)

    def resupply_stores(self) -> bool:
        """Restock every store to its initial tenges."""
        for store in self.stores:
            store.resupply()
        return self._done(True)

    # -------------------------------------------------------------------------
    # Robots
    # -------------------------------------------------------------------------

    def place_robot(self, location: int) -> bool:
        """
        Place a robot, if possible.

        Conditions:
        - the location is inside the route
        - there is no robot at that location yet
        """
        if not self._in_range(location):
            logger.warning(f"Robot rejected: location {location} outside route [0, {self.length})")
            return self._done(False)
        if self.robot_at(location) is not None:
            logger.warning(f"Robot rejected: location {location} already has a robot")
            return self._done(False)

        self.robots.append(Robot(location, visible=self.visible))
        logger.debug(f"Robot placed at {location}")
        return self._done(True)

    def remove_robot(self, location: int) -> bool:
        """Remove every robot at a location. Always succeeds."""
        before = len(self.robots)
        self.robots = [r for r in self.robots if r.location != location]
        logger.debug(f"Removed {before - len(self.robots)} robot(s) at {location}")
        return self._done(True)

    def move_robot(self, location: int, meters: int) -> bool:
        """
        Move the robot standing at a location.

        Succeeds whenever a robot is found there. A move that would leave
        the route is not applied, but the operation still reports success.
        """
        robot = self.robot_at(location)
        if robot is None:
            logger.warning(f"Move rejected: no robot at {location}")
            return self._done(False)

        robot.move(meters, self.length)
        return self._done(True)

    def return_robots(self) -> bool:
        """Send every robot back to its initial location."""
        for robot in self.robots:
            robot.reset_position()
        return self._done(True)

    # -------------------------------------------------------------------------
    # Whole-route operations
    # -------------------------------------------------------------------------

    def reboot(self) -> bool:
        """
        Restart the route:
        - reset every store
        - return every robot to its initial location
        - reset profit
        """
        for store in self.stores:
            store.reset()
        for robot in self.robots:
            robot.reset_position()
        self._profit = 0

        logger.info("Silk Road rebooted")
        return self._done(True)

    def finish(self) -> bool:
        """
        Finish the simulation:
        - clear all stores and robots
        - reset profit
        - hide the route
        """
        self.stores.clear()
        self.robots.clear()
        self._profit = 0
        self.visible = False
        if self.presenter is not None:
            self.presenter.clear()

        logger.info("Silk Road finished")
        return self._done(True)

    def make_visible(self) -> bool:
        """Show the route and everything on it."""
        self.visible = True
        self._show_entities(True)
        return self._done(True)

    def make_invisible(self) -> bool:
        """Hide the route and everything on it."""
        self.visible = False
        self._show_entities(False)
        if self.presenter is not None:
            self.presenter.clear()
        return self._done(True)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def profit(self) -> int:
        return self._profit

    def store_count(self) -> int:
        return len(self.stores)

    def robot_count(self) -> int:
        return len(self.robots)

    def ok(self) -> bool:
        """Whether the last mutating operation succeeded."""
        return self._ok

    def render_specs(self) -> List[RenderSpec]:
        """Render specs for every store, then every robot."""
        return ([s.render_spec(self.config) for s in self.stores] +
                [r.render_spec(self.config) for r in self.robots])

    def get_status(self) -> dict:
        """Get current route status as dictionary."""
        return {
            "length": self.length,
            "visible": self.visible,
            "profit": self._profit,
            "ok": self._ok,
            "stores": [s.get_status() for s in self.stores],
            "robots": [r.get_status() for r in self.robots],
        }

    # Generic vocabulary: agents are robots
    place_agent = place_robot
    remove_agent = remove_robot
    move_agent = move_robot
    return_agents = return_robots
    agent_count = robot_count
    last_operation_succeeded = ok

    def __repr__(self) -> str:
        return f"SilkRoad(length={self.length}, stores={len(self.stores)}, robots={len(self.robots)})"


RouteCoordinator = SilkRoad
