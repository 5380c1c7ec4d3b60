"""Time-domain motion profiles along a path.

A motion profile commands the centerline position (distance along the path),
velocity and acceleration as functions of elapsed time. Path synthesis only
depends on the MotionProfile interface; the two profiles here cover the common
cases of constant speed and trapezoidal accelerate/cruise/decelerate motion.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .config import PROFILE_TIME_TOLERANCE


@dataclass(frozen=True)
class MotionState:
    """Commanded centerline state at one instant.

    Attributes:
        position: Distance along the path (m)
        velocity: Velocity along the path (m/s)
        acceleration: Acceleration along the path (m/s²)
    """

    position: float
    velocity: float
    acceleration: float


class MotionProfile(ABC):
    """Commanded centerline motion as a function of time."""

    @abstractmethod
    def duration(self) -> float:
        """Total time of the profile (seconds)."""

    @abstractmethod
    def state_by_time(self, t: float) -> Optional[MotionState]:
        """State at elapsed time t, or None when t is outside the profile."""

    def _clamp_time(self, t: float) -> Optional[float]:
        if t < 0.0 or t > self.duration() + PROFILE_TIME_TOLERANCE:
            return None
        return min(t, self.duration())


class ConstantVelocityProfile(MotionProfile):
    """Travel a fixed distance at constant velocity, with no ramps."""

    def __init__(self, distance: float, velocity: float):
        """Initialize the profile.

        Args:
            distance: Distance to travel (m), > 0.
            velocity: Travel velocity (m/s), > 0.

        Raises:
            ValueError: If distance or velocity is not positive.
        """
        if not distance > 0.0:
            raise ValueError(f"Profile distance must be positive, got {distance}")
        if not velocity > 0.0:
            raise ValueError(f"Profile velocity must be positive, got {velocity}")

        self.distance = distance
        self.velocity = velocity

    def duration(self) -> float:
        return self.distance / self.velocity

    def state_by_time(self, t: float) -> Optional[MotionState]:
        clamped = self._clamp_time(t)
        if clamped is None:
            return None
        return MotionState(min(self.velocity * clamped, self.distance), self.velocity, 0.0)


class TrapezoidalMotionProfile(MotionProfile):
    """Accelerate, cruise and decelerate over a fixed distance.

    Uses a single global trapezoid starting and ending at rest. When the
    distance is too short to reach max_velocity the cruise phase vanishes and
    the profile becomes triangular.

    Attributes:
        distance: Distance to travel (m)
        max_velocity: Cruise velocity (m/s)
        max_acceleration: Acceleration and deceleration magnitude (m/s²)
        peak_velocity: Highest velocity actually reached (m/s)
        t_accel: Duration of the acceleration (and deceleration) phase (s)
        t_cruise: Duration of the cruise phase (s)
    """

    def __init__(self, distance: float, max_velocity: float, max_acceleration: float):
        """Initialize the profile.

        Args:
            distance: Distance to travel (m), > 0.
            max_velocity: Cruise velocity (m/s), > 0.
            max_acceleration: Acceleration magnitude (m/s²), > 0.

        Raises:
            ValueError: If any argument is not positive.
        """
        if not distance > 0.0:
            raise ValueError(f"Profile distance must be positive, got {distance}")
        if not (max_velocity > 0.0 and max_acceleration > 0.0):
            raise ValueError(
                f"max_velocity and max_acceleration must be > 0, "
                f"got {max_velocity} and {max_acceleration}"
            )

        self.distance = distance
        self.max_velocity = max_velocity
        self.max_acceleration = max_acceleration

        t_accel = max_velocity / max_acceleration
        s_accel = 0.5 * max_acceleration * t_accel**2

        if 2.0 * s_accel >= distance:
            # Triangular profile (no cruise)
            self.t_accel = math.sqrt(distance / max_acceleration)
            self.peak_velocity = max_acceleration * self.t_accel
            self.t_cruise = 0.0
        else:
            self.t_accel = t_accel
            self.peak_velocity = max_velocity
            self.t_cruise = (distance - 2.0 * s_accel) / max_velocity

    def duration(self) -> float:
        return 2.0 * self.t_accel + self.t_cruise

    def state_by_time(self, t: float) -> Optional[MotionState]:
        clamped = self._clamp_time(t)
        if clamped is None:
            return None

        a = self.max_acceleration
        s_accel = 0.5 * a * self.t_accel**2

        if clamped < self.t_accel:
            return MotionState(0.5 * a * clamped**2, a * clamped, a)

        if clamped < self.t_accel + self.t_cruise:
            cruise_time = clamped - self.t_accel
            return MotionState(s_accel + self.peak_velocity * cruise_time, self.peak_velocity, 0.0)

        # Deceleration phase, measured back from the end
        remaining = self.duration() - clamped
        position = self.distance - 0.5 * a * remaining**2
        return MotionState(min(position, self.distance), a * remaining, -a)
