from ._newton import (
    Sample,
    SampleCapacityError,
    MAX_SAMPLES,
    MAX_CAPACITY,
    GRID_DOMAIN,
    divided_differences,
    divided_difference_table,
    expand_product,
    power_coefficients,
    integrate_power,
    trapezoid,
    NewtonPolynomial,
    InterpolationEngine,
    format_pair,
    write_grid,
)
