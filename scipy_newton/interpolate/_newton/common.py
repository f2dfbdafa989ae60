from collections import namedtuple
import numpy as np


# Largest configurable number of samples. Expanding n samples holds the
# 2**(n - 1) subset products and sizes in memory at once, about 32 MB here.
MAX_CAPACITY = 22

# Default ceiling on the number of samples. The last expansion enumerates
# 2**(n - 1) subsets, so this bounds both memory and run time.
MAX_SAMPLES = 20

# The grid used for curve reconstruction always spans the normalized
# coordinate, independent of the sampled x-range.
GRID_DOMAIN = (0.0, 1.0)


Sample = namedtuple("Sample", ["x", "y"])
Sample.__doc__ = """A single observed point ``y = f(x)``."""


class SampleCapacityError(ValueError):
    """Raised when more samples are given than the subset enumeration supports."""
    pass


def check_max_samples(max_samples):
    """Validate a configured sample ceiling and return it as int."""
    if isinstance(max_samples, bool) or not isinstance(max_samples, (int, np.integer)):
        raise TypeError("`max_samples` must be an integer.")
    max_samples = int(max_samples)
    if max_samples < 1:
        raise ValueError("`max_samples` must be positive.")
    if max_samples > MAX_CAPACITY:
        raise ValueError(f"`max_samples` must not exceed {MAX_CAPACITY}, the "
                         "largest subset enumeration that fits in memory.")
    return max_samples


def check_capacity(n, max_samples=MAX_SAMPLES):
    """Ensure that `n` samples can be expanded."""
    if n > max_samples:
        raise SampleCapacityError(
            f"Got {n} samples, but at most {max_samples} are supported. "
            f"Expanding the Newton basis enumerates 2**(n - 1) subsets; "
            f"raise `max_samples` (up to {MAX_CAPACITY}) if this is intended.")


def check_samples(x, y, check_distinct=True):
    """Helper function for checking sample coordinates.

    Parameters
    ----------
    x, y : array_like, shape (n,)
        Sample coordinates in insertion order.
    check_distinct : bool, optional
        Whether to reject repeated x-values. Default is True.

    Returns
    -------
    x, y : ndarray, shape (n,)
        Float copies of the coordinates.
    """
    x = np.array(x, dtype=float)
    y = np.array(y, dtype=float)

    if x.ndim != 1:
        raise ValueError("`x` must be 1-dimensional.")
    if y.ndim != 1:
        raise ValueError("`y` must be 1-dimensional.")

    if x.shape != y.shape:
        raise ValueError("`x` and `y` must be of same shape.")

    if not np.isfinite(x).all():
        raise ValueError("All components of `x` must be finite.")
    if not np.isfinite(y).all():
        raise ValueError("All components of `y` must be finite.")

    if check_distinct and len(np.unique(x)) != len(x):
        raise ValueError("`x` values must be pairwise distinct.")

    return x, y


def split_samples(samples):
    """Split a sequence of ``(x, y)`` pairs into two coordinate lists."""
    x = []
    y = []
    for sample in samples:
        try:
            xi, yi = sample
        except (TypeError, ValueError) as exp:
            raise ValueError(
                f"Every sample must be an (x, y) pair, got {sample!r}.") from exp
        x.append(xi)
        y.append(yi)
    return x, y
