"""Wheel trajectory synthesis for a differential-drive vehicle.

A Path combines an ordered list of curve segments with a motion profile along
their combined length. Sampling the profile at a fixed cadence and applying
the differential-drive model at each sample's curvature yields independent
left and right wheel trajectories.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Sequence

from .config import ARC_LENGTH_RELATIVE_TOLERANCE, ARC_LENGTH_TOLERANCE
from .curve import Curve
from .model import wheel_scale_factors
from .motion import MotionProfile


def _end_slack(segment_length: float) -> float:
    """Distance a position may overrun a segment and still be placed on it."""
    return max(ARC_LENGTH_TOLERANCE, ARC_LENGTH_RELATIVE_TOLERANCE * segment_length)


@dataclass(frozen=True)
class PathSegment:
    """One curve of a path, in path order."""

    curve: Curve


@dataclass(frozen=True)
class TrajectoryPoint:
    """One wheel sample.

    Attributes:
        position: Distance travelled by the wheel (m)
        velocity: Wheel velocity (m/s)
        acceleration: Wheel acceleration (m/s²)
        duration: Time until the next sample (s)
    """

    position: float
    velocity: float
    acceleration: float
    duration: float


@dataclass
class TrajectoryHolder:
    """Left and right wheel trajectories, index-aligned by sample time."""

    left: List[TrajectoryPoint] = field(default_factory=list)
    right: List[TrajectoryPoint] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.left)


class Path:
    """Ordered curve segments traversed according to a motion profile.

    Attributes:
        profile: Centerline motion along the whole path.
        segments: Curve segments in traversal order.
    """

    def __init__(self, profile: MotionProfile, segments: Sequence[PathSegment]):
        """Initialize the path.

        Args:
            profile: Centerline motion along the combined length of the segments.
            segments: At least one segment, in traversal order.

        Raises:
            ValueError: If no segments are given.
        """
        if not segments:
            raise ValueError("Path needs at least one segment")

        self.profile = profile
        self.segments: tuple[PathSegment, ...] = tuple(segments)

    def total_arc_length(self) -> float:
        """Combined length of all segments (m)."""
        return sum(segment.curve.get_total_arc_length() for segment in self.segments)

    def get_trajectory_points(self, track_width: float, sample_interval: float) -> TrajectoryHolder:
        """Sample the profile and derive left and right wheel trajectories.

        The first sample of each wheel is at rest at position 0. Each following
        sample advances the wheels by the centerline distance since the previous
        sample, scaled by the wheel's travel ratio at the current curvature.

        Output is truncated, never padded: if the profile stops producing states
        or the commanded position runs past the last segment, both wheels stop
        at the last complete sample, so the result may hold fewer than
        floor(duration / sample_interval) points.

        Args:
            track_width: Distance between the wheels (m), > 0.
            sample_interval: Time between samples (s), > 0. Also stored as each
                point's duration.

        Returns:
            TrajectoryHolder with equal-length left and right lists.

        Raises:
            ValueError: If track_width or sample_interval is not positive (or is NaN).
        """
        if not track_width > 0.0:
            raise ValueError(f"Track width must be positive, got {track_width}")
        if not sample_interval > 0.0:
            raise ValueError(f"Sample interval must be positive, got {sample_interval}")

        holder = TrajectoryHolder()

        duration = self.profile.duration()
        point_count = math.floor(duration / sample_interval)
        if point_count <= 0:
            logging.debug(f"Profile duration {duration:.3f}s shorter than one sample, no points")
            return holder

        start = TrajectoryPoint(0.0, 0.0, 0.0, sample_interval)
        holder.left.append(start)
        holder.right.append(start)
        if point_count == 1:
            return holder

        step = duration / (point_count - 1)

        segment_index = 0
        segment_start = 0.0
        segment_length = self.segments[0].curve.get_total_arc_length()
        previous_position = 0.0

        for i in range(1, point_count):
            state = self.profile.state_by_time(i * step)
            if state is None:
                logging.debug(f"Profile ended at sample {i}/{point_count}, truncating")
                break

            # Advance the segment cursor until the position falls within it
            local_position = state.position - segment_start
            exhausted = False
            while local_position > segment_length + _end_slack(segment_length):
                if segment_index + 1 >= len(self.segments):
                    exhausted = True
                    break
                segment_index += 1
                segment_start += segment_length
                segment_length = self.segments[segment_index].curve.get_total_arc_length()
                local_position = state.position - segment_start

            if exhausted:
                logging.debug(f"Ran out of path segments at sample {i}/{point_count}, truncating")
                break

            curve = self.segments[segment_index].curve
            curvature = curve.get_curvature_at_arc_length(local_position)
            d_arc = state.position - previous_position

            left_k, right_k = wheel_scale_factors(curvature, track_width)
            holder.left.append(
                TrajectoryPoint(
                    holder.left[-1].position + d_arc * left_k,
                    state.velocity * left_k,
                    state.acceleration * left_k,
                    sample_interval,
                )
            )
            holder.right.append(
                TrajectoryPoint(
                    holder.right[-1].position + d_arc * right_k,
                    state.velocity * right_k,
                    state.acceleration * right_k,
                    sample_interval,
                )
            )

            previous_position = state.position

        return holder
