from itertools import product
import numpy as np
from numpy.testing import assert_, assert_allclose, assert_equal
import pytest
from scipy.interpolate import lagrange
from scipy_newton.interpolate import InterpolationEngine, NewtonPolynomial, Sample


# free energy estimates on the normalized coupling parameter
x_free_energy = np.linspace(0, 1, num=11)
y_free_energy = np.array([
    51.49866347, 23.92508775, 10.35390700, 2.58426990, -2.18351656,
    -5.41745387, -7.62452181, -9.25455804, -10.45592989, -11.39244138,
    -12.12433704,
])

parabola = [(0, 0), (1, 1), (2, 4)]


def test_parabola():
    engine = InterpolationEngine(parabola)
    assert_allclose(engine.polynomial(), [0, 0, 1], atol=1e-12)
    assert_allclose(engine.integral(), 8 / 3, rtol=1e-12)
    assert_allclose(engine.quadrature(), 3.0, rtol=1e-12)


def test_load():
    engine = InterpolationEngine()
    assert_equal(len(engine), 0)
    assert_equal(engine.coefficients.shape, (0,))

    samples = engine.load(parabola)
    assert_equal(samples, tuple(Sample(float(x), float(y)) for x, y in parabola))
    assert_(all(isinstance(sample, Sample) for sample in samples))

    samples_xy = engine.load_xy([0, 1, 2], [0, 1, 4])
    assert_equal(samples_xy, samples)

    engine.clear()
    assert_equal(len(engine), 0)
    assert_equal(engine.samples, ())
    assert_equal(engine.coefficients.shape, (0,))


def test_stored_copy():
    x = np.array([0.0, 1.0, 2.0])
    y = x**2
    engine = InterpolationEngine(x, y)
    x[0] = 5.0
    y[:] = 0.0
    assert_equal(engine.samples[0], Sample(0.0, 0.0))
    assert_allclose(engine.coefficients, [0, 0, 1], atol=1e-12)

    # snapshots are read-only
    with pytest.raises(ValueError):
        engine.coefficients[0] = 1.0


parameters_exact_fit = product(
    [2, 3, 5, 8], # number of samples
    [np.sin, np.exp, lambda x: 1 / (1 + x**2)], # sampled function
    [False, True], # shuffle samples
)
@pytest.mark.parametrize("n, fun, shuffle", parameters_exact_fit)
def test_exact_fit(n, fun, shuffle):
    x = np.linspace(-1, 2, num=n)
    if shuffle:
        x = np.random.default_rng(n).permutation(x)
    y = fun(x)

    engine = InterpolationEngine(x, y)
    p = engine.polynomial()
    assert_equal(p.shape, (n,))
    assert_equal(engine.state.degree, n - 1)
    assert_allclose(engine.evaluate(x), y, rtol=1e-6, atol=1e-10)

    # the interpolating polynomial does not depend on the node order
    reference = lagrange(np.sort(x), fun(np.sort(x)))
    x_eval = np.linspace(-1, 2, num=17)
    assert_allclose(engine.evaluate(x_eval), reference(x_eval), rtol=1e-6, atol=1e-8)


def test_single_sample():
    engine = InterpolationEngine([(0.5, 3.0)])
    assert_equal(engine.polynomial(), [3.0])
    assert_equal(engine.state.degree, 0)
    assert_equal(engine.integral(), 0.0)
    assert_equal(engine.quadrature(), 0.0)


def test_empty():
    engine = InterpolationEngine()
    with pytest.raises(ValueError) as excinfo:
        engine.integral()
    assert "Cannot integrate without samples." in str(excinfo.value)
    assert_equal(engine.quadrature(), 0.0)
    assert_equal(engine.evaluate(0.5), 0.0)


@pytest.mark.parametrize("sign", [1, -1])
def test_quadrature_bias(sign):
    # the trapezoidal rule overestimates convex and underestimates concave
    # curves; for x^2 the error is sum h^3 / 12 * f'' = 1 / 3
    engine = InterpolationEngine([0, 1, 2], sign * np.array([0, 1, 4]))
    integral = engine.integral()
    quadrature = engine.quadrature()
    assert_allclose(integral, sign * 8 / 3, rtol=1e-12)
    assert_allclose(quadrature - integral, sign / 3, rtol=1e-10)


def test_quadrature_linear():
    x = np.array([0.0, 0.5, 1.5, 3.0])
    engine = InterpolationEngine(x, 2 * x + 1)
    assert_allclose(engine.integral(), 12.0, rtol=1e-10)
    assert_allclose(engine.quadrature(), engine.integral(), rtol=1e-10)


def test_quadrature_samples():
    engine = InterpolationEngine(x_free_energy, y_free_energy)
    expected = sum(
        0.5 * (y_free_energy[k + 1] + y_free_energy[k])
        * (x_free_energy[k + 1] - x_free_energy[k])
        for k in range(len(x_free_energy) - 1)
    )
    assert_allclose(engine.quadrature(), expected, rtol=1e-12)


def test_free_energy():
    engine = InterpolationEngine(x_free_energy, y_free_energy)
    assert_equal(len(engine.polynomial()), 11)
    assert_allclose(engine.evaluate(x_free_energy), y_free_energy, rtol=1e-6, atol=1e-5)

    reference = lagrange(x_free_energy, y_free_energy).integ()
    assert_allclose(engine.integral(), reference(1.0) - reference(0.0), rtol=1e-5, atol=1e-6)


def test_insertion_order():
    # bounds are the first and the last sample as loaded
    engine = InterpolationEngine(parabola[::-1])
    assert_allclose(engine.polynomial(), [0, 0, 1], atol=1e-12)
    assert_allclose(engine.integral(), -8 / 3, rtol=1e-12)
    assert_allclose(engine.quadrature(), -3.0, rtol=1e-12)


def test_reload():
    engine = InterpolationEngine(x_free_energy, y_free_energy)
    assert_equal(len(engine.coefficients), 11)

    engine.load(parabola)
    assert_equal(len(engine.coefficients), 3)
    assert_equal(len(engine.divided_differences), 3)
    assert_allclose(engine.coefficients, [0, 0, 1], atol=1e-12)

    # snapshots taken before a reload stay intact
    state = engine.state
    engine.load_xy([0, 1], [1, 3])
    assert_allclose(state.coefficients, [0, 0, 1], atol=1e-12)
    assert_allclose(engine.coefficients, [1, 2], atol=1e-12)


def test_idempotence():
    engine = InterpolationEngine(x_free_energy, y_free_energy)
    p = engine.polynomial().copy()
    integral = engine.integral()
    quadrature = engine.quadrature()
    for _ in range(3):
        assert_equal(engine.polynomial(), p)
        assert_equal(engine.integral(), integral)
        assert_equal(engine.quadrature(), quadrature)
    assert_equal(list(engine.evaluate_grid(5)), list(engine.evaluate_grid(5)))


def test_evaluate_grid():
    engine = InterpolationEngine(parabola)
    grid = list(engine.evaluate_grid(10))
    assert_equal(len(grid), 11)
    x, y = np.array(grid).T
    assert_equal(x[0], 0.0)
    assert_allclose(x[-1], 1.0, rtol=1e-12)
    assert_allclose(np.diff(x), 0.1, rtol=1e-10)
    assert_allclose(y, x**2, atol=1e-12)


def test_evaluate_grid_domain():
    # the grid covers [0, 1] even if the samples do not
    engine = InterpolationEngine([(10, 1), (20, 3)])
    x, y = np.array(list(engine.evaluate_grid(4))).T
    assert_allclose(x, [0, 0.25, 0.5, 0.75, 1.0])
    assert_allclose(y, 0.2 * x - 1, atol=1e-12)


def test_evaluate_grid_lazy():
    engine = InterpolationEngine(parabola)
    grid = engine.evaluate_grid(1000)
    assert_equal(next(grid), (0.0, 0.0))


def test_report(capsys):
    engine = InterpolationEngine(parabola)
    engine.polynomial(report=True)
    engine.integral(report=True)
    engine.quadrature(report=True)
    captured = capsys.readouterr()
    assert_equal(captured.out.splitlines(), [
        "Degree, Coefficients",
        "     0, 0.00000000",
        "     1, 0.00000000",
        "     2, 1.00000000",
        "area under the curve: 2.66666667",
        "area under the curve: 3.00000000",
    ])

    # no report by default
    engine.integral()
    assert_equal(capsys.readouterr().out, "")


def test_newton_polynomial():
    p = NewtonPolynomial.from_samples(parabola)
    assert_equal(len(p), 3)
    assert_allclose(p(1.5), 2.25)
    assert_allclose(p.divided_differences, [0, 1, 1])
    assert_equal(p.x, [0, 1, 2])
    assert_equal(p.y, [0, 1, 4])


def test_no_samples():
    p = NewtonPolynomial()
    assert_equal(len(p), 0)
    assert_equal(p.degree, -1)
    assert_equal(p.samples, ())
    assert_equal(p.divided_differences.shape, (0,))
    assert_equal(p.coefficients.shape, (0,))

    engine = InterpolationEngine()
    assert_equal(engine.load([]), ())
    engine.load(parabola)
    engine.clear()
    assert_equal(len(engine), 0)
    assert_equal(engine.polynomial().shape, (0,))
    assert_equal(list(engine.evaluate_grid(2)), [(0.0, 0.0), (0.5, 0.0), (1.0, 0.0)])


def test_check_distinct_flag():
    engine = InterpolationEngine(check_distinct=0)
    assert engine.check_distinct is False
    assert engine.state.check_distinct is False
