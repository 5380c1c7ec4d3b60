"""Fixed-order Gauss-Legendre quadrature.

Arc length has no closed form for Bezier curves of degree two and higher, so
it is computed by numerically integrating the curve speed. A fixed node count
is accurate enough because the lookup table only integrates over short
sub-intervals of the parameter domain.
"""

from typing import Callable

import numpy as np

from .config import QUADRATURE_ORDER


class GaussLegendreIntegrator:
    """Definite integral of a scalar function using Gauss-Legendre nodes.

    The nodes and weights are computed once for the interval [-1, 1] and
    affinely mapped onto each requested interval.

    Attributes:
        order: Number of quadrature nodes.
        nodes: Node positions on [-1, 1].
        weights: Node weights on [-1, 1].
    """

    def __init__(self, order: int = QUADRATURE_ORDER):
        """Initialize the integrator.

        Args:
            order: Number of quadrature nodes (must be >= 1). A rule with n
                nodes integrates polynomials up to degree 2n - 1 exactly.

        Raises:
            ValueError: If order is less than 1.
        """
        if order < 1:
            raise ValueError(f"Quadrature order must be at least 1, got {order}")

        self.order = order
        self.nodes, self.weights = np.polynomial.legendre.leggauss(order)

    def integrate(self, f: Callable[[float], float], lower: float, upper: float) -> float:
        """Integrate f over [lower, upper].

        Args:
            f: Scalar function of one variable.
            lower: Lower integration bound.
            upper: Upper integration bound. May be below lower, in which case
                the result is negated.

        Returns:
            Approximate value of the definite integral.
        """
        if upper == lower:
            return 0.0

        half_width = 0.5 * (upper - lower)
        midpoint = 0.5 * (upper + lower)

        values = np.array([f(midpoint + half_width * node) for node in self.nodes])
        return float(half_width * np.dot(self.weights, values))


_DEFAULT_INTEGRATOR = GaussLegendreIntegrator()


def integrate(f: Callable[[float], float], lower: float, upper: float) -> float:
    """Integrate f over [lower, upper] with the default quadrature order."""
    return _DEFAULT_INTEGRATOR.integrate(f, lower, upper)
