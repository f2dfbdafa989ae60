"""Newton interpolating polynomials for area estimates."""
from .common import (
    Sample, SampleCapacityError, MAX_SAMPLES, MAX_CAPACITY, GRID_DOMAIN,
)
from .divided import divided_differences, divided_difference_table
from .expansion import expand_product, power_coefficients
from .quadrature import integrate_power, trapezoid
from .newton import NewtonPolynomial, InterpolationEngine
from .export import format_pair, write_grid
