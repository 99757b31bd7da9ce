"""
Tests for the route entities:
- Robot movement and reset
- Store resupply and reset
- Configuration and render specs
"""

import pytest
from silk_road.config import RouteConfig, ROUTE
from silk_road.core.robot import Robot
from silk_road.core.store import Store
from silk_road.core.rendering import ShapeKind


# =============================================================================
# ROBOT TESTS
# =============================================================================

class TestRobot:
    """Tests for the mobile robot."""

    def test_initialization(self):
        """Test a robot remembers where it was placed."""
        robot = Robot(4)
        assert robot.location == 4
        assert robot.initial_location == 4
        assert robot.visible is True

    def test_move_inside_route(self):
        """Test moves that stay on the route are applied."""
        robot = Robot(2)
        assert robot.move(5, 10) is True
        assert robot.location == 7

        assert robot.move(-7, 10) is True
        assert robot.location == 0

    def test_move_outside_route_ignored(self):
        """Test moves past either end leave the robot in place."""
        robot = Robot(2)

        assert robot.move(8, 10) is False
        assert robot.location == 2

        assert robot.move(-3, 10) is False
        assert robot.location == 2

    def test_move_to_last_location(self):
        """Test the last valid location is length - 1."""
        robot = Robot(0)
        assert robot.move(9, 10) is True
        assert robot.location == 9

    def test_reset_position(self):
        """Test reset returns to the initial location, not the previous one."""
        robot = Robot(3)
        robot.move(2, 10)
        robot.move(1, 10)

        robot.reset_position()
        assert robot.location == 3
        assert robot.initial_location == 3

    def test_status(self):
        """Test status dictionary."""
        robot = Robot(1)
        robot.move(2, 10)
        assert robot.get_status() == {"location": 3, "initial_location": 1, "visible": True}


# =============================================================================
# STORE TESTS
# =============================================================================

class TestStore:
    """Tests for the stationary store."""

    def test_initialization(self):
        """Test store setup."""
        store = Store(5, 80)
        assert store.location == 5
        assert store.tenges == 80
        assert store.initial_tenges == 80

    def test_resupply(self):
        """Test resupply restores the initial stock."""
        store = Store(5, 80)
        store.tenges = 12

        store.resupply()
        assert store.tenges == 80

    def test_reset_matches_resupply(self):
        """Test reset has the same effect as resupply."""
        store = Store(5, 80)
        store.tenges = 0

        store.reset()
        assert store.tenges == 80
        assert store.initial_tenges == 80

    def test_repr(self):
        assert repr(Store(2, 10)) == "Store(at 2: 10/10 tenges)"


# =============================================================================
# CONFIG AND RENDERING TESTS
# =============================================================================

class TestRouteConfig:
    """Tests for route configuration."""

    def test_defaults(self):
        """Test the default configuration."""
        assert ROUTE.default_length == 10
        assert ROUTE.pixels_per_meter == 20
        assert ROUTE.robot_color == "blue"
        assert ROUTE.store_color == "green"

    def test_reject_bad_length(self):
        with pytest.raises(ValueError):
            RouteConfig(default_length=0)

    def test_reject_bad_scale(self):
        with pytest.raises(ValueError):
            RouteConfig(pixels_per_meter=-1)

    def test_to_pixels(self):
        """Test location to pixel mapping."""
        config = RouteConfig(pixels_per_meter=10, origin_x=30)
        assert config.to_pixels(0) == 30
        assert config.to_pixels(4) == 70


class TestRenderSpecs:
    """Tests for the render specs entities hand to presenters."""

    def test_robot_spec(self):
        spec = Robot(3).render_spec(ROUTE)
        assert spec.kind == ShapeKind.CIRCLE
        assert spec.color == "blue"
        assert spec.location == 3
        assert spec.pixel_x == 60
        assert spec.tenges is None

    def test_store_spec(self):
        spec = Store(2, 40).render_spec(RouteConfig(store_color="red"))
        assert spec.kind == ShapeKind.RECTANGLE
        assert spec.color == "red"
        assert spec.pixel_x == 40
        assert spec.tenges == 40

    def test_spec_follows_movement(self):
        """Test the render spec reflects the current location."""
        robot = Robot(0)
        robot.move(5, 10)
        assert robot.render_spec(ROUTE).pixel_x == 100
