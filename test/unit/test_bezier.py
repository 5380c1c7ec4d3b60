"""BezierCurve unit tests."""

import math

import numpy as np
import pytest

from diffdrive_profile.bezier import BezierCurve
from diffdrive_profile.integrator import GaussLegendreIntegrator
from diffdrive_profile.vector import Vector2


def polyline_length(curve, samples=20001):
    """Arc length estimated from a dense polyline through the curve."""
    points = np.array([[p.x, p.y] for p in (curve.evaluate(t) for t in np.linspace(0.0, 1.0, samples))])
    return float(np.sum(np.linalg.norm(np.diff(points, axis=0), axis=1)))


class TestConstruction:
    def test_caches_coordinates(self, arch_curve):
        np.testing.assert_array_equal(arch_curve.control_points_x, [0.0, 1.0, 3.0, 4.0])
        np.testing.assert_array_equal(arch_curve.control_points_y, [0.0, 2.0, 3.0, 0.0])

    def test_too_few_control_points(self):
        with pytest.raises(ValueError):
            BezierCurve([Vector2(0.0, 0.0)])

    def test_too_many_control_points(self):
        with pytest.raises(ValueError):
            BezierCurve([Vector2(float(i), 0.0) for i in range(8)])

    def test_seven_control_points_allowed(self):
        curve = BezierCurve([Vector2(float(i), float(i % 2)) for i in range(7)])
        assert len(curve.control_points) == 7

    def test_constructor_builds_table_eagerly(self, arch_curve):
        assert arch_curve._lookup_table is not None

    def test_derivative_builds_table_lazily(self, arch_curve):
        derivative = arch_curve.derivative()
        assert derivative._lookup_table is None
        table = derivative.lookup_table()
        assert derivative._lookup_table is table
        assert derivative.lookup_table() is table

    def test_constructor_has_no_unvalidated_mode(self):
        with pytest.raises(TypeError):
            BezierCurve([Vector2(0.0, 0.0)], top_level=False)

    def test_derivative_chain_ends_below_validation_limit(self):
        curve = BezierCurve([Vector2(0.0, 0.0), Vector2(2.0, 1.0)])
        derivative = curve.derivative()
        assert derivative.control_points == (Vector2(2.0, 1.0),)
        assert derivative._lookup_table is None
        assert derivative.derivative() is None

    def test_repr_lists_control_points(self, left_turn_curve):
        text = repr(left_turn_curve)
        assert text.startswith("BezierCurve(")
        assert "(1.0000, 1.0000)" in text

    def test_custom_integrator_is_passed_to_derivatives(self):
        integrator = GaussLegendreIntegrator(order=8)
        curve = BezierCurve([Vector2(0.0, 0.0), Vector2(1.0, 1.0), Vector2(2.0, 0.0)], integrator)
        assert curve.derivative().integrator is integrator


class TestEvaluate:
    def test_endpoints_are_exact(self, arch_curve):
        assert arch_curve.evaluate(0.0) == Vector2(0.0, 0.0)
        assert arch_curve.evaluate(1.0) == Vector2(4.0, 0.0)

    def test_endpoints_are_exact_for_irregular_points(self):
        points = [Vector2(0.1, -2.7), Vector2(3.3, 1.9), Vector2(-4.2, 0.6), Vector2(7.7, 8.1), Vector2(2.2, -0.3)]
        curve = BezierCurve(points)
        assert curve.evaluate(0.0) == points[0]
        assert curve.evaluate(1.0) == points[-1]

    def test_quadratic_midpoint(self, left_turn_curve):
        point = left_turn_curve.evaluate(0.5)
        assert point.x == pytest.approx(0.75)
        assert point.y == pytest.approx(0.25)

    def test_does_not_mutate_control_points(self, arch_curve):
        arch_curve.evaluate(0.3)
        arch_curve.evaluate(0.7)
        np.testing.assert_array_equal(arch_curve.control_points_x, [0.0, 1.0, 3.0, 4.0])
        np.testing.assert_array_equal(arch_curve.control_points_y, [0.0, 2.0, 3.0, 0.0])


class TestDerivative:
    def test_control_points(self, arch_curve):
        derivative = arch_curve.derivative()
        assert derivative.control_points == (Vector2(3.0, 6.0), Vector2(6.0, 3.0), Vector2(3.0, -9.0))

    def test_is_cached(self, arch_curve):
        assert arch_curve.derivative() is arch_curve.derivative()

    def test_chain_terminates(self, straight_curve):
        first = straight_curve.derivative()
        assert first.control_points == (Vector2(10.0, 0.0),)
        assert first.derivative() is None

    @pytest.mark.parametrize("t", [0.1, 0.35, 0.5, 0.8, 0.95])
    def test_matches_finite_difference(self, arch_curve, t):
        h = 1e-6
        ahead = arch_curve.evaluate(t + h)
        behind = arch_curve.evaluate(t - h)
        expected_x = (ahead.x - behind.x) / (2 * h)
        expected_y = (ahead.y - behind.y) / (2 * h)

        actual = arch_curve.derivative().evaluate(t)
        assert actual.x == pytest.approx(expected_x, rel=1e-6, abs=1e-6)
        assert actual.y == pytest.approx(expected_y, rel=1e-6, abs=1e-6)


class TestArcLength:
    def test_straight_line(self, straight_curve):
        assert straight_curve.total_arc_length() == pytest.approx(10.0)
        assert straight_curve.get_total_arc_length() == pytest.approx(10.0)
        assert straight_curve.speed(0.3) == pytest.approx(10.0)

    def test_matches_polyline(self, arch_curve):
        assert arch_curve.get_total_arc_length() == pytest.approx(polyline_length(arch_curve), rel=1e-6)

    def test_arc_length_between_adds_up(self, arch_curve):
        first = arch_curve.arc_length_between(0.0, 0.4)
        second = arch_curve.arc_length_between(0.4, 1.0)
        assert first + second == pytest.approx(arch_curve.total_arc_length(), rel=1e-6)

    def test_table_is_monotonic(self, arch_curve):
        lengths = [arch_curve.length_at_parameter(t) for t in np.linspace(0.0, 1.0, 57)]
        assert all(a <= b for a, b in zip(lengths, lengths[1:]))

    def test_table_total_matches_integral(self, arch_curve):
        assert arch_curve.lookup_table().total_length == pytest.approx(arch_curve.total_arc_length(), rel=1e-6)

    @pytest.mark.parametrize("t", [0.0, 0.013, 0.25, 0.5, 0.77, 1.0])
    def test_parameter_length_round_trip(self, arch_curve, t):
        assert arch_curve.parameter_at_length(arch_curve.length_at_parameter(t)) == pytest.approx(t, abs=1e-9)

    def test_point_at_arc_length(self, straight_curve):
        point = straight_curve.get_point_at_arc_length(2.5)
        assert point.x == pytest.approx(2.5)
        assert point.y == pytest.approx(0.0)

    def test_point_at_arc_length_clamps(self, straight_curve):
        assert straight_curve.get_point_at_arc_length(-1.0) == Vector2(0.0, 0.0)
        assert straight_curve.get_point_at_arc_length(50.0) == Vector2(10.0, 0.0)


class TestCurvature:
    def test_two_point_curve_is_straight(self, straight_curve):
        for t in (0.0, 0.5, 1.0):
            assert straight_curve.curvature_at_parameter(t) == 0.0

    def test_collinear_control_points_are_straight(self):
        curve = BezierCurve([Vector2(0.0, 0.0), Vector2(2.0, 2.0), Vector2(5.0, 5.0), Vector2(6.0, 6.0)])
        for t in np.linspace(0.0, 1.0, 11):
            assert curve.curvature_at_parameter(t) == pytest.approx(0.0, abs=1e-12)

    def test_left_turn_is_positive(self, left_turn_curve):
        assert left_turn_curve.curvature_at_parameter(0.0) == pytest.approx(0.5)
        for t in np.linspace(0.0, 1.0, 11):
            assert left_turn_curve.curvature_at_parameter(t) > 0.0

    def test_right_turn_is_negative(self, left_turn_curve, right_turn_curve):
        for t in np.linspace(0.0, 1.0, 11):
            assert right_turn_curve.curvature_at_parameter(t) == pytest.approx(
                -left_turn_curve.curvature_at_parameter(t)
            )

    def test_arch_turns_right_throughout(self, arch_curve):
        for t in np.linspace(0.0, 1.0, 21):
            assert arch_curve.curvature_at_parameter(t) < 0.0

    def test_inflection_changes_sign(self):
        curve = BezierCurve([Vector2(0.0, 0.0), Vector2(1.0, 1.0), Vector2(2.0, -1.0), Vector2(3.0, 0.0)])
        assert curve.curvature_at_parameter(0.1) < 0.0
        assert curve.curvature_at_parameter(0.9) > 0.0
        assert curve.curvature_at_parameter(0.5) == pytest.approx(0.0, abs=1e-12)

    def test_vanishing_derivative_returns_zero(self):
        curve = BezierCurve([Vector2(0.0, 0.0), Vector2(0.0, 0.0), Vector2(1.0, 1.0)])
        curvature = curve.curvature_at_parameter(0.0)
        assert curvature == 0.0
        assert not math.isnan(curvature)

    def test_curvature_at_arc_length(self, left_turn_curve):
        assert left_turn_curve.get_curvature_at_arc_length(0.0) == pytest.approx(0.5)
        mid = left_turn_curve.length_at_parameter(0.5)
        assert left_turn_curve.get_curvature_at_arc_length(mid) == pytest.approx(
            left_turn_curve.curvature_at_parameter(0.5), rel=1e-6
        )
