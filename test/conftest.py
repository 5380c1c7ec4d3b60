"""Shared test fixtures."""

import pytest

from diffdrive_profile.bezier import BezierCurve
from diffdrive_profile.vector import Vector2


@pytest.fixture
def straight_curve():
    """Ten meter straight line along +x."""
    return BezierCurve([Vector2(0.0, 0.0), Vector2(10.0, 0.0)])


@pytest.fixture
def left_turn_curve():
    """Quadratic curve bending left (counter-clockwise)."""
    return BezierCurve([Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(1.0, 1.0)])


@pytest.fixture
def right_turn_curve():
    """Mirror image of left_turn_curve, bending right."""
    return BezierCurve([Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(1.0, -1.0)])


@pytest.fixture
def arch_curve():
    """Cubic arch bending right (convex control polygon)."""
    return BezierCurve(
        [Vector2(0.0, 0.0), Vector2(1.0, 2.0), Vector2(3.0, 3.0), Vector2(4.0, 0.0)]
    )
