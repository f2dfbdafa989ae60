import numpy as np
from .common import MAX_SAMPLES, MAX_CAPACITY, SampleCapacityError, check_capacity


def expand_product(roots):
    """Expand ``(x - r_0) (x - r_1) ... (x - r_{k-1})`` into monomials.

    All ``2**k`` subsets of the roots are enumerated, the subset with
    bit pattern ``i`` contributing the product of ``-r_j`` over the bits set
    in ``i``. Each contribution is accumulated into the slot given by the
    number of set bits, since a subset of size ``m`` multiplies ``x**(k - m)``.

    Parameters
    ----------
    roots : array_like, shape (k,)
        Roots of the product.

    Returns
    -------
    term : ndarray, shape (k + 1,)
        Coefficients in descending powers, ``term[m]`` belongs to
        ``x**(k - m)``. ``term[0]`` is always one.
    """
    roots = np.asarray(roots, dtype=float)
    k = len(roots)
    if k >= MAX_CAPACITY:
        raise SampleCapacityError(
            f"Cannot enumerate subsets of {k} roots, at most "
            f"{MAX_CAPACITY - 1} are supported.")

    # entry i describes the subset encoded by the bits of i
    products = np.ones(1)
    sizes = np.zeros(1, dtype=np.int64)
    for root in roots:
        # subsets with the new bit set are the previous ones times -root
        products = np.concatenate((products, -root * products))
        sizes = np.concatenate((sizes, sizes + 1))

    return np.bincount(sizes, weights=products, minlength=k + 1)


def power_coefficients(x, fdd, max_samples=MAX_SAMPLES):
    """Assemble the power-basis coefficients of a Newton polynomial.

    The polynomial

        P(x) = d_0 + d_1 (x - x_0) + ... + d_{n-1} (x - x_0) ... (x - x_{n-2})

    is rewritten as ``sum c_i x**i`` by expanding every basis product with
    `expand_product` and adding it, scaled by its divided difference, into the
    coefficients of matching power.

    Parameters
    ----------
    x : array_like, shape (n,)
        Sample positions.
    fdd : array_like, shape (n,)
        Forward divided differences ``d_k``, see `divided_differences`.
    max_samples : int, optional
        Largest supported ``n``. Default is `MAX_SAMPLES`.

    Returns
    -------
    coefficients : ndarray, shape (n,)
        ``coefficients[i]`` multiplies ``x**i``.
    """
    x = np.asarray(x, dtype=float)
    fdd = np.asarray(fdd, dtype=float)
    n = len(fdd)
    check_capacity(n, max_samples)

    coefficients = np.zeros(n)
    term = np.ones(1)
    for s in range(n):
        # term is stored with descending powers, the coefficients ascending
        coefficients[:len(term)] += fdd[s] * term[::-1]
        if s + 1 < n:
            term = expand_product(x[:s + 1])

    return coefficients
