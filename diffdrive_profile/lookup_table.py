"""Arc-length lookup table for parametric curves.

A curve is evaluated by its parameter t in [0, 1], but trajectories are
commanded by distance travelled. The table samples the cumulative arc length
at evenly spaced parameters and answers both directions by linear
interpolation between the two samples bracketing the query.
"""

from typing import Callable

import numpy as np
import numpy.typing as npt

from .config import LOOKUP_TABLE_SAMPLES


class ArcLengthLookupTable:
    """Sampled mapping between curve parameter and cumulative arc length.

    Attributes:
        parameters: Sampled parameters, evenly spaced over [0, 1].
        lengths: Cumulative arc length at each sampled parameter.
            Non-decreasing, starting at 0.
    """

    def __init__(
        self,
        arc_length_between: Callable[[float, float], float],
        samples: int = LOOKUP_TABLE_SAMPLES,
    ):
        """Build the table.

        Args:
            arc_length_between: Function returning the arc length between two
                parameters, e.g. BezierCurve.arc_length_between.
            samples: Number of parameter sub-intervals (must be >= 1).

        Raises:
            ValueError: If samples is less than 1.
        """
        if samples < 1:
            raise ValueError(f"Lookup table needs at least 1 sample interval, got {samples}")

        self.parameters: npt.NDArray[np.float64] = np.linspace(0.0, 1.0, samples + 1)
        self.lengths: npt.NDArray[np.float64] = np.zeros_like(self.parameters)

        # Accumulate piecewise so the sequence can never decrease
        for i in range(1, len(self.parameters)):
            piece = arc_length_between(self.parameters[i - 1], self.parameters[i])
            self.lengths[i] = self.lengths[i - 1] + max(piece, 0.0)

    @property
    def total_length(self) -> float:
        """Arc length of the whole curve, as sampled."""
        return float(self.lengths[-1])

    def length_at(self, parameter: float) -> float:
        """Cumulative arc length at a curve parameter.

        Args:
            parameter: Curve parameter. Values outside [0, 1] are clamped.

        Returns:
            Arc length from the start of the curve (meters). 0 for a
            zero-length curve.
        """
        if self.total_length <= 0.0:
            return 0.0
        return float(np.interp(parameter, self.parameters, self.lengths))

    def parameter_at(self, length: float) -> float:
        """Curve parameter at which the cumulative arc length equals length.

        Args:
            length: Arc length from the start of the curve (meters). Values
                below 0 or beyond the total length are clamped.

        Returns:
            Curve parameter in [0, 1]. 0 for a zero-length curve.
        """
        total = self.total_length
        if total <= 0.0:
            return 0.0
        if length <= 0.0:
            return 0.0
        if length >= total:
            return 1.0

        # First sample with cumulative length >= length brackets the query from above
        upper = int(np.searchsorted(self.lengths, length, side="left"))
        lower = upper - 1

        span = self.lengths[upper] - self.lengths[lower]
        if span <= 0.0:
            return float(self.parameters[upper])

        fraction = (length - self.lengths[lower]) / span
        t = self.parameters[lower] + fraction * (self.parameters[upper] - self.parameters[lower])
        return float(t)
