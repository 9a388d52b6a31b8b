import math

from .base import TAU, closed_form, flat, polyline, rect_outline, regular_polygon


@closed_form("line", "basic")
def line(i, n):
    if n < 2:
        return (0.0, 0.0, 0.0)
    return (2.0 * i / (n - 1) - 1.0, 0.0, 0.0)


@closed_form("circle", "basic")
def circle(i, n):
    a = TAU * i / n
    return (math.cos(a), 0.0, math.sin(a))


@closed_form("square", "basic")
def square(i, n):
    """Filled grid, ceil(sqrt(n)) columns, spanning [-1, 1] on X."""
    cols = math.ceil(math.sqrt(n))
    rows = math.ceil(n / cols)
    spacing = 2.0 / (cols - 1) if cols > 1 else 0.0
    row, col = divmod(i, cols)
    return (
        col * spacing - (cols - 1) * spacing / 2.0,
        0.0,
        row * spacing - (rows - 1) * spacing / 2.0,
    )


_TRIANGLE = regular_polygon(3)
_RECTANGLE = rect_outline(-1.0, -0.5, 1.0, 0.5)
_PENTAGON = regular_polygon(5)
_HEXAGON = regular_polygon(6)


@closed_form("triangle", "basic")
def triangle(i, n):
    return flat(*polyline(_TRIANGLE, i / n, closed=True))


@closed_form("rectangle", "basic")
def rectangle(i, n):
    return flat(*polyline(_RECTANGLE, i / n, closed=True))


@closed_form("pentagon", "basic")
def pentagon(i, n):
    return flat(*polyline(_PENTAGON, i / n, closed=True))


@closed_form("hexagon", "basic")
def hexagon(i, n):
    return flat(*polyline(_HEXAGON, i / n, closed=True))
