"""Configuration parameters for the wheel profile generator.

This module centralizes all configuration parameters including:
- Curve construction limits
- Numerical integration and lookup table resolution
- Numerical tolerances for the trajectory synthesis
- Default vehicle and sampling parameters
- Terminal output colors

All parameters are documented with their purpose, valid ranges, and tuning rationale.
"""

# ============================================================================
# Curve Construction Limits
# ============================================================================

MIN_CONTROL_POINTS = 2
"""Minimum number of control points for a path curve.
A single point has no tangent, so it cannot describe motion."""

MAX_CONTROL_POINTS = 7
"""Maximum number of control points for a path curve (degree 6).
Practical path curves use 2-7 points; higher degrees are not supported."""


# ============================================================================
# Numerical Integration and Arc-Length Lookup
# ============================================================================

QUADRATURE_ORDER = 16
"""Number of Gauss-Legendre nodes used for every definite integral.

Tuning rationale:
- The arc-length integrand of a degree-6 curve is the square root of a
  degree-10 polynomial, which is smooth but not polynomial
- 16 nodes integrate it to well below 1e-9 relative error on each
  lookup table sub-interval
- Only used on short sub-intervals, so higher orders buy nothing measurable
"""

LOOKUP_TABLE_SAMPLES = 100
"""Number of parameter sub-intervals sampled by the arc-length lookup table.

The table stores LOOKUP_TABLE_SAMPLES + 1 (parameter, length) pairs over [0, 1].

Tuning rationale:
- 100 intervals keeps linear interpolation error under 1 mm for paths of a few meters
- Table is built once per curve, so construction cost is paid only at authoring time
"""


# ============================================================================
# Numerical Tolerances
# ============================================================================

CURVATURE_EPSILON = 1e-20
"""Curvature magnitude below which a path is treated as straight (1/m).

Guards the turn radius computation r = 1/curvature against division by zero."""

SPEED_EPSILON = 1e-12
"""Squared first-derivative magnitude below which curvature is undefined.

Coincident control points or cusps make the curvature formula 0/0. Below this
threshold curvature is reported as 0 (straight line) instead of NaN."""

ARC_LENGTH_TOLERANCE = 1e-9
"""Slack (meters) allowed past the end of a segment before moving to the next.

Absorbs floating-point round-off when the commanded position lands exactly on
a segment boundary, most notably the very end of the path."""

ARC_LENGTH_RELATIVE_TOLERANCE = 1e-3
"""Slack past the end of a segment, as a fraction of the segment's length.

A profile sized with the single-integral BezierCurve.total_arc_length() can end
slightly beyond the lookup table's total on sharply bent curves (observed up to
~1e-4 relative). The effective slack is the larger of this and ARC_LENGTH_TOLERANCE.
Positions inside the slack are clamped to the end of the segment."""

PROFILE_TIME_TOLERANCE = 1e-9
"""Slack (seconds) past a motion profile's duration that still yields a state.

Sample times are computed as i * step and may overshoot the duration by a few ulps."""


# ============================================================================
# Vehicle and Sampling Defaults
# ============================================================================

DEFAULT_TRACK_WIDTH = 0.5
"""Distance between left and right wheel contact points (meters)."""

DEFAULT_SAMPLE_INTERVAL = 0.01
"""Time between trajectory samples (seconds).
Matches a 100 Hz motion controller loop."""

DEFAULT_MAX_VELOCITY = 2.0
"""Cruise velocity of the reference trapezoidal profile (m/s)."""

DEFAULT_MAX_ACCELERATION = 1.0
"""Acceleration and deceleration of the reference trapezoidal profile (m/s²)."""


# ============================================================================
# Terminal Output
# ============================================================================

TERM_ORANGE = "\033[38;2;247;72;35m"
"""Terminal color code for highlighted values (RGB: 247, 72, 35)."""

TERM_BLUE = "\033[38;2;35;116;247m"
"""Terminal color code for section headings (RGB: 35, 116, 247)."""

TERM_RESET = "\033[0m"
"""Terminal color reset code."""
