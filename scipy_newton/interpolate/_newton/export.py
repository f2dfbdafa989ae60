import os
from warnings import warn


def format_pair(x, y):
    """Format one grid point as ``"<x>, <y>"`` with 4 and 8 decimals."""
    return f"{x:.4f}, {y:.8f}"


def write_grid(source, sink, step_count):
    """Write the polynomial evaluated on the unit grid to `sink`.

    Parameters
    ----------
    source : InterpolationEngine or NewtonPolynomial
        Anything providing ``evaluate_grid(step_count)``.
    sink : str, os.PathLike or file-like
        Output file, truncated if it exists, or an open text stream. Streams
        are written to but not closed.
    step_count : int
        Number of grid intervals, see ``evaluate_grid``.

    Returns
    -------
    success : bool
        False if the file could not be opened, True otherwise.
    """
    pairs = source.evaluate_grid(step_count)

    if hasattr(sink, "write"):
        _write_pairs(sink, pairs)
        return True

    try:
        stream = open(os.fspath(sink), "w")
    except OSError as exp:
        warn(f"File {sink} cannot be opened: {exp}", RuntimeWarning)
        return False

    with stream:
        _write_pairs(stream, pairs)
    return True


def _write_pairs(stream, pairs):
    for x, y in pairs:
        stream.write(format_pair(x, y) + "\n")
