import math

from .base import TAU, arc_points, closed_form, ellipse, flat, lerp, polyline, segmented


def _stroke(a, b):
    return lambda t: flat(*lerp(a, b, t))


@closed_form("number_0", "glyphs")
def number_0(i, n):
    return flat(*ellipse(i / n, 0.0, 0.0, 0.55, 1.0))


segmented("number_1", "glyphs", [
    (0.7, _stroke((0.1, -1.0), (0.1, 1.0))),
    (0.85, _stroke((0.1, 1.0), (-0.3, 0.65))),
    (1.0, _stroke((-0.3, -1.0), (0.5, -1.0))),
])

segmented("number_2", "glyphs", [
    (0.45, lambda t: flat(*ellipse(t, 0.0, 0.45, 0.5, 0.5, math.radians(160), math.radians(-30)))),
    (0.75, _stroke((0.5 * math.cos(math.radians(-30)), 0.45 + 0.5 * math.sin(math.radians(-30))), (-0.55, -1.0))),
    (1.0, _stroke((-0.55, -1.0), (0.6, -1.0))),
])

segmented("letter_a", "glyphs", [
    (0.35, _stroke((-0.6, -1.0), (0.0, 1.0))),
    (0.7, _stroke((0.0, 1.0), (0.6, -1.0))),
    (1.0, _stroke((-0.3, -0.1), (0.3, -0.1))),
])

segmented("letter_i", "glyphs", [
    (0.6, _stroke((0.0, -1.0), (0.0, 1.0))),
    (0.8, _stroke((-0.35, 1.0), (0.35, 1.0))),
    (1.0, _stroke((-0.35, -1.0), (0.35, -1.0))),
])


def _small_heart(t):
    a = TAU * t
    u = 16 * math.sin(a) ** 3
    v = 13 * math.cos(a) - 5 * math.cos(2 * a) - 2 * math.cos(3 * a) - math.cos(4 * a)
    return flat(0.03 * u, 0.03 * v)


_U = [(0.85, 0.5)] + arc_points(1.1, -0.2, 0.25, math.pi, TAU) + [(1.35, 0.5)]

# "I <3 U"
segmented("letter_love", "glyphs", [
    (0.25, _stroke((-1.1, -0.5), (-1.1, 0.5))),
    (0.65, _small_heart),
    (1.0, lambda t: flat(*polyline(_U, t))),
])
