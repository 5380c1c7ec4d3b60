#!/usr/bin/env python3
"""
Command-line demo for the wheel profile generator.

Builds a single Bezier curve path from control points given on the command
line, drives it with a trapezoidal motion profile, and reports the resulting
left and right wheel trajectories.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .bezier import BezierCurve
from .config import (
    DEFAULT_MAX_ACCELERATION,
    DEFAULT_MAX_VELOCITY,
    DEFAULT_SAMPLE_INTERVAL,
    DEFAULT_TRACK_WIDTH,
    TERM_BLUE,
    TERM_ORANGE,
    TERM_RESET,
)
from .motion import TrapezoidalMotionProfile
from .path import Path, PathSegment, TrajectoryHolder
from .vector import Vector2


class ReportFormatter(logging.Formatter):
    """Formats the demo's log output as a plain report.

    INFO lines are the report itself and print bare. WARNING and ERROR print
    as a highlighted "LEVEL: message" line. DEBUG lines, shown only with
    --verbose, carry a millisecond timestamp and the emitting module so cache
    builds and truncation reasons can be traced.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno == logging.INFO:
            return message
        if record.levelno == logging.DEBUG:
            timestamp = self.formatTime(record, "%H:%M:%S")
            return f"{timestamp}.{int(record.msecs):03d} [{record.module}] {message}"
        return f"{TERM_ORANGE}{record.levelname}: {message}{TERM_RESET}"


def setup_logging(verbose: bool = False) -> None:
    """Route log output through a single ReportFormatter handler.

    Replaces any handlers already on the root logger, so running the demo
    more than once in a process does not duplicate the report.

    Args:
        verbose: If True, also show the library's DEBUG messages.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(ReportFormatter())
    logger = logging.getLogger()
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def parse_points(spec: str) -> List[Vector2]:
    """Parse control points from a string such as "0,0 1,0 1,1".

    Args:
        spec: Whitespace-separated x,y pairs.

    Returns:
        Parsed control points, in order.

    Raises:
        ValueError: If a pair is malformed or not numeric.
    """
    points = []
    for pair in spec.split():
        if pair.count(",") != 1:
            raise ValueError(f"Invalid control point '{pair}', expected x,y")
        x_str, y_str = pair.split(",")
        points.append(Vector2(float(x_str), float(y_str)))
    return points


def report(holder: TrajectoryHolder, track_width: float) -> None:
    """Log a summary of the synthesized wheel trajectories."""
    if not holder.left:
        logging.warning("No trajectory points produced (profile shorter than one sample)")
        return

    left_end = holder.left[-1]
    right_end = holder.right[-1]
    peak_left = max(abs(p.velocity) for p in holder.left)
    peak_right = max(abs(p.velocity) for p in holder.right)

    logging.info(f"{TERM_BLUE}Wheel trajectories (track width {track_width:.3f}m){TERM_RESET}")
    logging.info(f"  Samples:        {len(holder)}")
    logging.info(
        f"  Left distance:  {TERM_ORANGE}{left_end.position:.3f}m{TERM_RESET}  "
        f"peak {peak_left:.3f}m/s"
    )
    logging.info(
        f"  Right distance: {TERM_ORANGE}{right_end.position:.3f}m{TERM_RESET}  "
        f"peak {peak_right:.3f}m/s"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the demo.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Generate left/right wheel trajectories along a Bezier path",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Quarter turn to the left with default vehicle parameters
  python -m diffdrive_profile --points "0,0 1,0 1,1"

  # S-curve with a wider vehicle, sampled at 50 Hz
  python -m diffdrive_profile --points "0,0 2,0 0,2 2,2" --track-width 0.8 --interval 0.02
        """,
    )
    parser.add_argument(
        "--points",
        type=str,
        required=True,
        help='Control points as whitespace-separated x,y pairs (2 to 7), e.g. "0,0 1,0 1,1"',
    )
    parser.add_argument(
        "--track-width",
        type=float,
        default=DEFAULT_TRACK_WIDTH,
        help=f"Distance between wheels in meters (default: {DEFAULT_TRACK_WIDTH})",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=DEFAULT_SAMPLE_INTERVAL,
        help=f"Sample interval in seconds (default: {DEFAULT_SAMPLE_INTERVAL})",
    )
    parser.add_argument(
        "--max-velocity",
        type=float,
        default=DEFAULT_MAX_VELOCITY,
        help=f"Cruise velocity in m/s (default: {DEFAULT_MAX_VELOCITY})",
    )
    parser.add_argument(
        "--max-acceleration",
        type=float,
        default=DEFAULT_MAX_ACCELERATION,
        help=f"Acceleration in m/s² (default: {DEFAULT_MAX_ACCELERATION})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging with timestamps"
    )
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        curve = BezierCurve(parse_points(args.points))
        length = curve.get_total_arc_length()
        logging.info(f"{TERM_BLUE}Path: {curve!r}{TERM_RESET}")
        logging.info(f"  Arc length: {length:.3f}m")

        profile = TrapezoidalMotionProfile(length, args.max_velocity, args.max_acceleration)
        logging.info(f"  Profile duration: {profile.duration():.3f}s")

        path = Path(profile, [PathSegment(curve)])
        holder = path.get_trajectory_points(args.track_width, args.interval)
    except ValueError as e:
        logging.error(f"Error: {e}")
        return 1

    report(holder, args.track_width)
    return 0


if __name__ == "__main__":
    sys.exit(main())
