"""Numeric helpers."""


def lerp(x0: float, y0: float, x1: float, y1: float, x: float) -> float:
    """Linear interpolation through ``(x0, y0)`` and ``(x1, y1)`` evaluated at ``x``.

    Values of ``x`` outside ``[x0, x1]`` extrapolate along the same line.
    """
    if x1 == x0:
        raise ValueError("Interpolation endpoints must differ")
    return (y0 * (x1 - x) + y1 * (x - x0)) / (x1 - x0)
