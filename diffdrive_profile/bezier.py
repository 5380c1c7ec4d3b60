"""Bezier curve evaluation, differentiation and arc-length parameterization.

A Bezier curve of n control points P[0..n-1] is a polynomial of degree n - 1
in the parameter t in [0, 1]. This module provides:
- Position evaluation with de Casteljau's algorithm
- The derivative curve, itself a Bezier curve of n - 1 control points:
      D[i] = (P[i+1] - P[i]) * (n - 1)
- Speed (|dP/dt|) and arc length by numerical integration of the speed
- Signed curvature from the first and second derivative curves:
      kappa = (x'y'' - y'x'') / (x'² + y'²)^(3/2)
- Arc-length indexed queries through an ArcLengthLookupTable

Derivative curves are built on first use and cached. Only the top-level path
curve builds its lookup table at construction; derivative curves build theirs
lazily if ever queried by arc length.
"""

import logging
from typing import Optional, Sequence

import numpy as np
import numpy.typing as npt

from .config import MAX_CONTROL_POINTS, MIN_CONTROL_POINTS, SPEED_EPSILON
from .curve import Curve
from .integrator import GaussLegendreIntegrator, integrate
from .lookup_table import ArcLengthLookupTable
from .vector import Vector2


class BezierCurve(Curve):
    """Polynomial path curve defined by 2 to 7 control points.

    The control points never change after construction; the derivative curve
    and the lookup table are cached on first computation and never invalidated.

    Attributes:
        control_points: Control points, in order.
        control_points_x: X coordinates of the control points.
        control_points_y: Y coordinates of the control points.
    """

    def __init__(
        self,
        control_points: Sequence[Vector2],
        integrator: Optional[GaussLegendreIntegrator] = None,
    ):
        """Initialize a path curve and build its arc-length lookup table.

        Args:
            control_points: Between MIN_CONTROL_POINTS and MAX_CONTROL_POINTS
                control points, in order.
            integrator: Quadrature used for arc length. Default: module-level
                Gauss-Legendre integrator.

        Raises:
            ValueError: If there are too few or too many control points.
        """
        if not MIN_CONTROL_POINTS <= len(control_points) <= MAX_CONTROL_POINTS:
            raise ValueError(
                f"Bezier curve needs {MIN_CONTROL_POINTS} to {MAX_CONTROL_POINTS} "
                f"control points, got {len(control_points)}"
            )

        self._setup(control_points, integrator)
        self._lookup_table = ArcLengthLookupTable(self.arc_length_between)

    @classmethod
    def _derivative_curve(
        cls, control_points: Sequence[Vector2], integrator: Optional[GaussLegendreIntegrator]
    ) -> "BezierCurve":
        """Unvalidated curve whose lookup table is built only on first use."""
        curve = cls.__new__(cls)
        curve._setup(control_points, integrator)
        return curve

    def _setup(
        self, control_points: Sequence[Vector2], integrator: Optional[GaussLegendreIntegrator]
    ) -> None:
        self.control_points: tuple[Vector2, ...] = tuple(control_points)
        self.integrator = integrator
        self.control_points_x: npt.NDArray[np.float64] = np.array(
            [p.x for p in self.control_points], dtype=np.float64
        )
        self.control_points_y: npt.NDArray[np.float64] = np.array(
            [p.y for p in self.control_points], dtype=np.float64
        )

        # Lazy caches
        self._derivative: Optional[BezierCurve] = None
        self._derivative_computed: bool = False
        self._lookup_table: Optional[ArcLengthLookupTable] = None

    # ------------------------------------------------------------------
    # Evaluation and differentiation
    # ------------------------------------------------------------------

    def evaluate(self, t: float) -> Vector2:
        """Evaluate the curve position at parameter t using de Casteljau's algorithm.

        Args:
            t: Curve parameter in [0, 1].

        Returns:
            Point on the curve. Exactly the first control point at t = 0 and
            exactly the last at t = 1.
        """
        x = self.control_points_x.copy()
        y = self.control_points_y.copy()
        mt = 1.0 - t

        for k in range(len(x), 1, -1):
            x[: k - 1] = x[: k - 1] * mt + x[1:k] * t
            y[: k - 1] = y[: k - 1] * mt + y[1:k] * t

        return Vector2(float(x[0]), float(y[0]))

    def derivative(self) -> Optional["BezierCurve"]:
        """Derivative curve dP/dt, computed on first call and cached.

        Returns:
            Bezier curve with one control point fewer, or None for a curve with
            a single control point (the end of the derivative chain).
        """
        if not self._derivative_computed:
            self._derivative = self._calculate_derivative()
            self._derivative_computed = True
            logging.debug(f"Calculated derivative of {len(self.control_points)}-point curve")
        return self._derivative

    def _calculate_derivative(self) -> Optional["BezierCurve"]:
        count = len(self.control_points)
        if count <= 1:
            return None

        degree = count - 1
        points = [
            self.control_points[i + 1].subtract(self.control_points[i]).scale(degree)
            for i in range(degree)
        ]
        return BezierCurve._derivative_curve(points, self.integrator)

    # ------------------------------------------------------------------
    # Speed and arc length
    # ------------------------------------------------------------------

    def speed(self, t: float) -> float:
        """Rate of arc length with respect to the parameter, |dP/dt| at t."""
        d1 = self.derivative()
        if d1 is None:
            return 0.0
        return d1.evaluate(t).magnitude

    def arc_length_between(self, lower: float, upper: float) -> float:
        """Arc length between two curve parameters, by integrating the speed."""
        if self.integrator is not None:
            return self.integrator.integrate(self.speed, lower, upper)
        return integrate(self.speed, lower, upper)

    def total_arc_length(self) -> float:
        """Arc length of the whole curve, integrated over [0, 1]."""
        return self.arc_length_between(0.0, 1.0)

    def lookup_table(self) -> ArcLengthLookupTable:
        """Parameter to arc length table, built on first call for derivative curves."""
        if self._lookup_table is None:
            self._lookup_table = ArcLengthLookupTable(self.arc_length_between)
            logging.debug(f"Built arc-length table for {len(self.control_points)}-point curve")
        return self._lookup_table

    def length_at_parameter(self, t: float) -> float:
        """Arc length from the start of the curve to parameter t."""
        return self.lookup_table().length_at(t)

    def parameter_at_length(self, arc_length: float) -> float:
        """Curve parameter at a distance along the curve."""
        return self.lookup_table().parameter_at(arc_length)

    # ------------------------------------------------------------------
    # Curvature
    # ------------------------------------------------------------------

    def curvature_at_parameter(self, t: float) -> float:
        """Signed curvature at parameter t.

        Positive curvature turns left, negative turns right. Curves with fewer
        than three control points are straight and have zero curvature.
        Where the first derivative vanishes (cusps, coincident control points)
        curvature is undefined and 0 is returned.

        Args:
            t: Curve parameter in [0, 1].

        Returns:
            Curvature (1/m).
        """
        d1_curve = self.derivative()
        d2_curve = d1_curve.derivative() if d1_curve is not None else None
        if d1_curve is None or d2_curve is None:
            return 0.0

        d1 = d1_curve.evaluate(t)
        d2 = d2_curve.evaluate(t)

        speed_squared = d1.x**2 + d1.y**2
        if speed_squared < SPEED_EPSILON:
            logging.debug(f"Curvature undefined at t={t:.4f} (zero derivative), using 0")
            return 0.0

        return (d1.x * d2.y - d1.y * d2.x) / speed_squared**1.5

    # ------------------------------------------------------------------
    # Curve interface (arc-length indexed)
    # ------------------------------------------------------------------

    def get_total_arc_length(self) -> float:
        # Same samples as parameter_at_length, so the end of the curve maps to t = 1
        return self.lookup_table().total_length

    def get_curvature_at_arc_length(self, arc_length: float) -> float:
        return self.curvature_at_parameter(self.parameter_at_length(arc_length))

    def get_point_at_arc_length(self, arc_length: float) -> Vector2:
        return self.evaluate(self.parameter_at_length(arc_length))

    def __repr__(self) -> str:
        points = " | ".join(str(p) for p in self.control_points)
        return f"BezierCurve({points})"
