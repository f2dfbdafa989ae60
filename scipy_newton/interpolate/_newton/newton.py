from warnings import warn
import numpy as np
from .common import (
    GRID_DOMAIN, MAX_SAMPLES, Sample,
    check_capacity, check_max_samples, check_samples, split_samples,
)
from .divided import divided_differences
from .expansion import power_coefficients
from .quadrature import evaluate_power, integrate_power, trapezoid


class NewtonPolynomial:
    """Newton interpolating polynomial of a fixed set of samples.

    The polynomial is computed in full on construction and never changes
    afterwards; all arrays are read-only. Loading new samples means building
    a new instance, see `InterpolationEngine`.

    Parameters
    ----------
    x, y : array_like, shape (n,)
        Sample positions and values in insertion order. The x-values must be
        pairwise distinct. Integration bounds are taken from the first and the
        last sample, so pass them in ascending order for a conventional area.
    max_samples : int, optional
        Largest number of samples accepted, at most `MAX_CAPACITY`. Default is
        `MAX_SAMPLES`.
    check_distinct : bool, optional
        Whether to reject repeated x-values and non-finite coefficients.
        If False, a division by zero propagates into the coefficients as inf
        or nan and only a `RuntimeWarning` is emitted. Default is True.

    Attributes
    ----------
    n : int
        Number of samples.
    samples : tuple of Sample
        Stored copy of the samples.
    x, y : ndarray, shape (n,)
        Sample coordinates.
    divided_differences : ndarray, shape (n,)
        Coefficients of the Newton basis.
    coefficients : ndarray, shape (n,)
        Power-basis coefficients, ``coefficients[i]`` multiplies ``x**i``.
    """
    def __init__(self, x=(), y=(), max_samples=MAX_SAMPLES, check_distinct=True):
        self.max_samples = check_max_samples(max_samples)
        self.check_distinct = bool(check_distinct)

        x, y = check_samples(x, y, check_distinct=self.check_distinct)
        check_capacity(len(x), self.max_samples)

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            fdd = divided_differences(x, y)
            coefficients = power_coefficients(x, fdd, self.max_samples)

        if not np.isfinite(coefficients).all():
            if self.check_distinct:
                raise ValueError("The interpolating polynomial has non-finite "
                                 "coefficients.")
            warn("The interpolating polynomial has non-finite coefficients, "
                 "check for repeated x-values.", RuntimeWarning)

        for array in (x, y, fdd, coefficients):
            array.flags.writeable = False

        self.n = len(x)
        self.x = x
        self.y = y
        self.samples = tuple(Sample(float(xi), float(yi)) for xi, yi in zip(x, y))
        self.divided_differences = fdd
        self.coefficients = coefficients

    @classmethod
    def from_samples(cls, samples, **options):
        """Build the polynomial from a sequence of ``(x, y)`` pairs."""
        x, y = split_samples(samples)
        return cls(x, y, **options)

    def __len__(self):
        return self.n

    @property
    def degree(self):
        """Degree of the polynomial, ``n - 1``; -1 without samples."""
        return self.n - 1

    def polynomial(self, report=False):
        """Return the power-basis coefficients, optionally printing them."""
        if report:
            print("Degree, Coefficients")
            for i, c in enumerate(self.coefficients):
                print(f"{i:6d}, {c:.8f}")
        return self.coefficients

    def integral(self, report=False):
        """Integrate the polynomial from the first to the last sample.

        The bounds follow insertion order, not the numeric range of `x`.
        """
        if self.n == 0:
            raise ValueError("Cannot integrate without samples.")
        area = integrate_power(self.coefficients, self.x[0], self.x[-1])
        if report:
            print(f"area under the curve: {area:.8f}")
        return area

    def quadrature(self, report=False):
        """Trapezoidal area of the raw samples.

        Independent of the polynomial and thus a cross-check of `integral`.
        """
        area = trapezoid(self.x, self.y)
        if report:
            print(f"area under the curve: {area:.8f}")
        return area

    def evaluate(self, x):
        """Evaluate the polynomial at scalar or array `x`."""
        if self.n == 0:
            return np.zeros_like(np.asarray(x, dtype=float))
        return evaluate_power(self.coefficients, x)

    def __call__(self, x):
        return self.evaluate(x)

    def evaluate_grid(self, step_count):
        """Lazily evaluate the polynomial on a uniform grid.

        The grid always covers `GRID_DOMAIN`, the normalized coordinate
        ``[0, 1]``, whatever the range of the samples. Starting at 0.0 the
        position is advanced by ``1 / step_count``, so ``step_count + 1``
        pairs are produced and the last position equals 1.0 up to the
        accumulated rounding.

        Parameters
        ----------
        step_count : int
            Number of intervals, must be positive.

        Returns
        -------
        pairs : iterator of (float, float)
            Grid positions and polynomial values.
        """
        if isinstance(step_count, bool) or not isinstance(step_count, (int, np.integer)):
            raise TypeError("`step_count` must be an integer.")
        if step_count < 1:
            raise ValueError("`step_count` must be positive.")
        return self._grid(int(step_count))

    def _grid(self, step_count):
        lower, upper = GRID_DOMAIN
        step = (upper - lower) / step_count
        x = lower
        for _ in range(step_count + 1):
            yield x, float(self.evaluate(x))
            x += step


class InterpolationEngine:
    """Holder of the current Newton polynomial of a data set.

    Every load replaces the held `NewtonPolynomial` by a freshly computed one,
    so the coefficients are either empty or consistent with the samples.
    Instances are not meant to be mutated from several threads; readers that
    need a stable view should keep a reference to `state`.

    Parameters
    ----------
    samples : sequence of (x, y) or array_like, optional
        Initial samples as pairs. If `y` is given, `samples` is taken as the
        sequence of x-values instead.
    y : array_like, optional
        Sample values, parallel to `samples`.
    max_samples : int, optional
        Largest number of samples accepted. Default is `MAX_SAMPLES`.
    check_distinct : bool, optional
        See `NewtonPolynomial`. Default is True.
    """
    def __init__(self, samples=None, y=None, *, max_samples=MAX_SAMPLES,
                 check_distinct=True):
        self.max_samples = check_max_samples(max_samples)
        self.check_distinct = bool(check_distinct)
        self.clear()

        if samples is not None:
            if y is None:
                self.load(samples)
            else:
                self.load_xy(samples, y)
        elif y is not None:
            raise ValueError("`y` was given without x-values.")

    def _options(self):
        return dict(max_samples=self.max_samples,
                    check_distinct=self.check_distinct)

    def load(self, samples):
        """Replace the samples by a sequence of ``(x, y)`` pairs.

        Returns the stored copy of the samples.
        """
        self.state = NewtonPolynomial.from_samples(samples, **self._options())
        return self.state.samples

    def load_xy(self, x, y):
        """Replace the samples by two parallel coordinate sequences.

        Returns the stored copy of the samples.
        """
        self.state = NewtonPolynomial(x, y, **self._options())
        return self.state.samples

    def clear(self):
        """Drop samples and coefficients."""
        self.state = NewtonPolynomial(**self._options())

    def __len__(self):
        return len(self.state)

    @property
    def samples(self):
        return self.state.samples

    @property
    def coefficients(self):
        return self.state.coefficients

    @property
    def divided_differences(self):
        return self.state.divided_differences

    def polynomial(self, report=False):
        return self.state.polynomial(report=report)

    def integral(self, report=False):
        return self.state.integral(report=report)

    def quadrature(self, report=False):
        return self.state.quadrature(report=report)

    def evaluate(self, x):
        return self.state.evaluate(x)

    def evaluate_grid(self, step_count):
        return self.state.evaluate_grid(step_count)
