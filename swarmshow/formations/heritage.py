"""
Indian heritage formations: tricolor flag, Ashoka Chakra, peacock, lotus,
elephant and Taj Mahal.
"""

import math

from .base import (TAU, arc_points, disk, ellipse, flat, lerp, polyline, rect_fill, rect_outline,
                   ring, segmented, spokes)

# 3:2 flag, three equal bands
FLAG_HALF_WIDTH = 1.0
BAND_HEIGHT = 4.0 * FLAG_HALF_WIDTH / 9.0
CHAKRA_SPOKES = 24


def _band(center_v, rows):
    half = BAND_HEIGHT * 0.4
    return lambda t: flat(*rect_fill(t, -FLAG_HALF_WIDTH, center_v - half, FLAG_HALF_WIDTH, center_v + half, rows))


def _white_band(t):
    # two rows, leaving the centre row to the chakra
    u, v = rect_fill(t, -FLAG_HALF_WIDTH, -0.36, FLAG_HALF_WIDTH, 0.36, 2)
    return flat(u, v)


# bands follow the tricolor color mode: thirds of the swarm by index
segmented("indian_flag", "heritage", [
    (1 / 3, _band(BAND_HEIGHT, 3)),
    (0.55, _white_band),
    (2 / 3, lambda t: flat(*ring(t, 0.0, 0.0, 0.14))),
    (1.0, _band(-BAND_HEIGHT, 3)),
])

segmented("ashoka_chakra", "heritage", [
    (0.4, lambda t: flat(*ring(t, 0.0, 0.0, 1.0))),
    (0.5, lambda t: flat(*ring(t, 0.0, 0.0, 0.15))),
    (1.0, lambda t: flat(*spokes(t, CHAKRA_SPOKES, 0.15, 1.0))),
])


def _peacock_tail(t):
    # fan of nine feathers over the upper half plane, each ending in an eye
    feathers = 9
    k = min(int(t * feathers), feathers - 1)
    along = t * feathers - k
    a = math.radians(15 + 150 * k / (feathers - 1))
    if along < 0.7:
        r = 0.3 + 0.55 * along / 0.7
        return flat(r * math.cos(a), -0.4 + r * math.sin(a))
    u, v = ring((along - 0.7) / 0.3, 0.92 * math.cos(a), -0.4 + 0.92 * math.sin(a), 0.08)
    return flat(u, v)


segmented("peacock", "heritage", [
    (0.15, lambda t: flat(*ellipse(t, 0.0, -0.45, 0.15, 0.28))),
    (0.25, lambda t: flat(*polyline([(0.0, -0.2), (0.05, 0.05), (0.02, 0.2), (0.1, 0.25)], t))),
    (1.0, _peacock_tail),
])


LOTUS_PETALS = 8


def _lotus_petal(t):
    k = min(int(t * LOTUS_PETALS), LOTUS_PETALS - 1)
    s = t * LOTUS_PETALS - k
    radial = 0.6 + 0.4 * math.cos(TAU * s)
    side = 0.15 * math.sin(TAU * s)
    a = TAU * k / LOTUS_PETALS
    u = radial * math.cos(a) - side * math.sin(a)
    v = radial * math.sin(a) + side * math.cos(a)
    # petals curl up away from the centre
    return flat(u, v, 0.15 * (radial - 0.2))


segmented("lotus", "heritage", [
    (0.2, lambda t: flat(*ring(t, 0.0, 0.0, 0.2))),
    (1.0, _lotus_petal),
])


def _leg(u):
    return lambda t: flat(*lerp((u, -0.25), (u, -0.8), t))


segmented("elephant", "heritage", [
    (0.4, lambda t: flat(*ellipse(t, 0.0, 0.1, 0.7, 0.4))),
    (0.55, lambda t: flat(*ring(t, 0.75, 0.3, 0.25))),
    (0.67, lambda t: flat(0.95 + 0.12 * math.sin(math.pi * t), 0.2 - 0.75 * t)),
    (0.7525, _leg(-0.5)),
    (0.835, _leg(-0.25)),
    (0.9175, _leg(0.2)),
    (1.0, _leg(0.45)),
])


_TAJ_DOME = [(-0.3, 0.2)] + arc_points(0.0, 0.25, 0.32, math.radians(170), math.radians(10)) + [(0.3, 0.2)]

segmented("taj_mahal", "heritage", [
    (0.2, lambda t: flat(*polyline(rect_outline(-1.0, -0.8, 1.0, -0.6), t, closed=True))),
    (0.45, lambda t: flat(*polyline(rect_outline(-0.5, -0.6, 0.5, 0.2), t, closed=True))),
    (0.65, lambda t: flat(*polyline(_TAJ_DOME, t))),
    (0.7, lambda t: flat(*lerp((0.0, 0.57), (0.0, 0.8), t))),
    (0.8, lambda t: flat(*lerp((-0.85, -0.6), (-0.85, 0.5), t))),
    (0.9, lambda t: flat(*lerp((0.85, -0.6), (0.85, 0.5), t))),
    (0.95, lambda t: flat(*disk(t, -0.35, 0.3, 0.12, turns=2))),
    (1.0, lambda t: flat(*disk(t, 0.35, 0.3, 0.12, turns=2))),
])
