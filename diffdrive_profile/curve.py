"""Arc-length indexed curve interface.

Path synthesis only ever asks a curve three things, all indexed by distance
along the curve rather than by its internal parameter. Any curve type that
answers them can be placed in a PathSegment.
"""

import math
from abc import ABC, abstractmethod

from .vector import Vector2


class Curve(ABC):
    """A planar curve queried by arc length."""

    @abstractmethod
    def get_total_arc_length(self) -> float:
        """Length of the whole curve (meters)."""

    @abstractmethod
    def get_curvature_at_arc_length(self, arc_length: float) -> float:
        """Signed curvature (1/m) at a distance along the curve.

        Positive curvature turns left, negative turns right.
        """

    @abstractmethod
    def get_point_at_arc_length(self, arc_length: float) -> Vector2:
        """Point on the curve at a distance along it."""


class CircularArc(Curve):
    """Arc of a circle with constant signed curvature.

    Attributes:
        radius: Signed turn radius (m). Positive turns left (counter-clockwise).
        sweep_angle: Angle swept by the arc (rad), > 0.
        start: Start point of the arc.
        heading: Direction of travel at the start (rad from +x axis).
    """

    def __init__(
        self,
        radius: float,
        sweep_angle: float,
        start: Vector2 = Vector2(0.0, 0.0),
        heading: float = 0.0,
    ):
        """Initialize the arc.

        Args:
            radius: Signed turn radius (m), nonzero.
            sweep_angle: Angle swept by the arc (rad), > 0.
            start: Start point of the arc. Default: origin.
            heading: Direction of travel at the start (rad). Default: 0 (+x).

        Raises:
            ValueError: If radius is zero or sweep_angle is not positive.
        """
        if radius == 0.0:
            raise ValueError("Arc radius must be nonzero")
        if not sweep_angle > 0.0:
            raise ValueError(f"Arc sweep angle must be positive, got {sweep_angle}")

        self.radius = radius
        self.sweep_angle = sweep_angle
        self.start = start
        self.heading = heading

    def get_total_arc_length(self) -> float:
        return abs(self.radius) * self.sweep_angle

    def get_curvature_at_arc_length(self, arc_length: float) -> float:
        return 1.0 / self.radius

    def get_point_at_arc_length(self, arc_length: float) -> Vector2:
        s = min(max(arc_length, 0.0), self.get_total_arc_length())

        # Center sits one radius to the left of the start heading (right if radius < 0)
        center_x = self.start.x - self.radius * math.sin(self.heading)
        center_y = self.start.y + self.radius * math.cos(self.heading)

        theta = self.heading + s / self.radius
        return Vector2(
            center_x + self.radius * math.sin(theta),
            center_y - self.radius * math.cos(theta),
        )

    def __repr__(self) -> str:
        return (
            f"CircularArc(radius={self.radius}, sweep_angle={self.sweep_angle}, "
            f"start={self.start}, heading={self.heading})"
        )
