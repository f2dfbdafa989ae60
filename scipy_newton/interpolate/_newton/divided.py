import numpy as np


def divided_difference_table(x, y):
    """Compute the table of forward divided differences.

    Column ``s`` holds the differences of level ``s``, i.e.,
    ``table[t, s] = f[x_t, ..., x_{t+s}]``. Entries below the anti-diagonal
    are left zero.

    Parameters
    ----------
    x : array_like, shape (n,)
        Sample positions, in the order the polynomial is built.
    y : array_like, shape (n,)
        Sample values ``y = f(x)``.

    Returns
    -------
    table : ndarray, shape (n, n)
        Divided differences of all levels.

    Notes
    -----
    Repeated x-values lead to a division by zero, which is not trapped here
    and shows up as inf or nan in the table.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    n = len(y)
    table = np.zeros((n, n))
    if n == 0:
        return table
    # the first column is y
    table[:, 0] = y

    with np.errstate(divide="ignore", invalid="ignore"):
        for s in range(1, n):
            t = np.arange(n - s)
            table[t, s] = (table[t + 1, s - 1] - table[t, s - 1]) / (x[t + s] - x[t])

    return table


def divided_differences(x, y):
    """Newton coefficients ``[y_0, f[x_0, x_1], ..., f[x_0, ..., x_{n-1}]]``."""
    table = divided_difference_table(x, y)
    if len(table) == 0:
        return np.zeros(0)
    return table[0].copy()
