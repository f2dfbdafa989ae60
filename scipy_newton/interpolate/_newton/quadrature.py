import numpy as np
from numpy.polynomial import polynomial as P
from scipy import integrate


def integrate_power(coefficients, lower, upper):
    """Definite integral of ``sum c_i x**i`` over ``[lower, upper]``.

    Each monomial is integrated with the power rule, giving
    ``sum c_i (upper**(i + 1) - lower**(i + 1)) / (i + 1)``. The result is
    signed, swapping the bounds flips its sign.
    """
    coefficients = np.asarray(coefficients, dtype=float)
    power = np.arange(1, len(coefficients) + 1, dtype=float)
    area = coefficients * (upper**power - lower**power) / power
    return float(np.sum(area))


def trapezoid(x, y):
    """Trapezoidal rule over the raw samples, in the order given.

    Fewer than two samples enclose no area and give zero.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if len(x) < 2:
        return 0.0
    return float(integrate.trapezoid(y, x))


def evaluate_power(coefficients, x):
    """Evaluate ``sum c_i x**i`` at scalar or array `x`."""
    return P.polyval(x, np.asarray(coefficients, dtype=float))
