"""
Differential drive kinematic model.

This module converts centerline motion along a curved path into motion of the
individual wheels. For a path of signed curvature kappa the vehicle turns about
a center at signed radius r = 1/kappa, and each wheel follows a concentric arc:
    r_left  = |r - W/2|
    r_right = |r + W/2|

where W is the track width. Over the same angular sweep, each wheel travels
r_wheel / |r| times the centerline distance, so positions, velocities and
accelerations all scale by that ratio.
"""

from .config import CURVATURE_EPSILON


def wheel_scale_factors(curvature: float, track_width: float) -> tuple[float, float]:
    """
    Compute the left and right wheel travel ratios for a given path curvature.

    Positive curvature is a left turn, which puts the left wheel on the inside
    (ratio < 1) and the right wheel on the outside (ratio > 1). Negative
    curvature mirrors this. When the turn radius is smaller than half the track
    width, the inner wheel runs backwards relative to the turn; its ratio is
    still reported as a magnitude.

    Args:
        curvature: Signed path curvature (1/m)
        track_width: Distance between the wheels (m)

    Returns:
        tuple[float, float]: (left_k, right_k) wheel travel ratios. Both 1.0
                            when |curvature| < CURVATURE_EPSILON (straight line)

    Example:
        >>> wheel_scale_factors(0.5, 1.0)
        (0.75, 1.25)
    """
    if abs(curvature) < CURVATURE_EPSILON:
        return 1.0, 1.0

    r = 1.0 / curvature
    left_radius = abs(r - track_width / 2.0)
    right_radius = abs(r + track_width / 2.0)
    r = abs(r)

    return left_radius / r, right_radius / r


def wheel_velocities(velocity: float, curvature: float, track_width: float) -> tuple[float, float]:
    """
    Compute wheel velocities from centerline velocity and path curvature.

    Args:
        velocity: Centerline velocity along the path (m/s)
        curvature: Signed path curvature (1/m)
        track_width: Distance between the wheels (m)

    Returns:
        tuple[float, float]: (v_left, v_right) wheel velocities in m/s
    """
    left_k, right_k = wheel_scale_factors(curvature, track_width)
    return velocity * left_k, velocity * right_k
