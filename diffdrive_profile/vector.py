"""Immutable 2D vector used for control points and curve samples."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """A point or direction in the plane.

    Attributes:
        x: X coordinate (m)
        y: Y coordinate (m)
    """

    x: float
    y: float

    @property
    def magnitude(self) -> float:
        """Euclidean length sqrt(x² + y²)."""
        return math.hypot(self.x, self.y)

    def subtract(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    def __str__(self) -> str:
        return f"({self.x:.4f}, {self.y:.4f})"
