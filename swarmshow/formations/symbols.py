import math

from .base import TAU, closed_form, ellipse, flat, lerp, polyline, ring, segmented


@closed_form("heart", "symbols")
def heart(i, n):
    t = TAU * i / n
    x = 0.5 * math.sin(t) ** 3
    z = 0.5 * (13 * math.cos(t) - 5 * math.cos(2 * t) - 2 * math.cos(3 * t) - math.cos(4 * t)) / 16
    return (x, 0.0, -z)


_STAR = [
    (r * math.cos(math.pi / 2 + k * math.pi / 5), r * math.sin(math.pi / 2 + k * math.pi / 5))
    for k, r in zip(range(10), [1.0, 0.4] * 5)
]
_DIAMOND = [(0.0, 1.0), (0.65, 0.0), (0.0, -1.0), (-0.65, 0.0)]


@closed_form("star", "symbols")
def star(i, n):
    return flat(*polyline(_STAR, i / n, closed=True))


@closed_form("diamond", "symbols")
def diamond(i, n):
    return flat(*polyline(_DIAMOND, i / n, closed=True))


@closed_form("infinity", "symbols")
def infinity(i, n):
    """Lemniscate of Bernoulli."""
    t = TAU * i / n
    d = 1.0 + math.sin(t) ** 2
    return flat(math.cos(t) / d, math.sin(t) * math.cos(t) / d)


segmented("arrow", "symbols", [
    (0.5, lambda t: flat(*lerp((0.0, -1.0), (0.0, 0.4), t))),
    (0.75, lambda t: flat(*lerp((0.0, 1.0), (-0.45, 0.4), t))),
    (1.0, lambda t: flat(*lerp((0.0, 1.0), (0.45, 0.4), t))),
])

segmented("cross", "symbols", [
    (0.5, lambda t: flat(*lerp((0.0, -1.0), (0.0, 1.0), t))),
    (1.0, lambda t: flat(*lerp((-1.0, 0.0), (1.0, 0.0), t))),
])

segmented("smiley", "symbols", [
    (0.6, lambda t: flat(*ring(t, 0.0, 0.0, 1.0))),
    (0.7, lambda t: flat(*ring(t, -0.35, 0.35, 0.12))),
    (0.8, lambda t: flat(*ring(t, 0.35, 0.35, 0.12))),
    (1.0, lambda t: flat(*ellipse(t, 0.0, -0.05, 0.55, 0.55, math.radians(200), math.radians(340)))),
])

segmented("peace", "symbols", [
    (0.6, lambda t: flat(*ring(t, 0.0, 0.0, 1.0))),
    (0.8, lambda t: flat(*lerp((0.0, 1.0), (0.0, -1.0), t))),
    (0.9, lambda t: flat(*lerp((0.0, 0.0), (-math.sqrt(0.5), -math.sqrt(0.5)), t))),
    (1.0, lambda t: flat(*lerp((0.0, 0.0), (math.sqrt(0.5), -math.sqrt(0.5)), t))),
])
