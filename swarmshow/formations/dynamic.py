"""
Parametric curves and solid/layered 3D shapes.
"""

import math

from .base import GOLDEN_TURN, TAU, closed_form, flat, polyline, rect_outline, segmented


@closed_form("spiral", "dynamic")
def spiral(i, n):
    t = i / n
    a = 3 * TAU * t
    return (t * math.cos(a), 0.0, t * math.sin(a))


@closed_form("helix", "dynamic")
def helix(i, n):
    t = i / n
    a = 3 * TAU * t
    return (0.5 * math.cos(a), 2.0 * t - 1.0, 0.5 * math.sin(a))


@closed_form("wave", "dynamic")
def wave(i, n):
    t = i / n
    return (2.0 * t - 1.0, 0.3 * math.sin(3 * TAU * t), 0.0)


@closed_form("figure8", "dynamic")
def figure8(i, n):
    """Upright lemniscate of Gerono."""
    t = TAU * i / n
    return flat(0.5 * math.sin(2 * t), math.sin(t))


@closed_form("sphere", "dynamic")
def sphere(i, n):
    # golden-angle spiral: even density, no clustering at the poles
    phi = math.acos(1 - 2 * i / n)
    theta = GOLDEN_TURN * i
    return (math.sin(phi) * math.cos(theta), math.sin(phi) * math.sin(theta), math.cos(phi))


@closed_form("cylinder", "dynamic")
def cylinder(i, n):
    """Stacked rings; about four times as many points per ring as rings."""
    rings = max(1, int(round(math.sqrt(n / 4))))
    per_ring = math.ceil(n / rings)
    k, j = divmod(i, per_ring)
    y = 2.0 * k / (rings - 1) - 1.0 if rings > 1 else 0.0
    a = TAU * j / per_ring
    return (0.5 * math.cos(a), y, 0.5 * math.sin(a))


@closed_form("cone", "dynamic")
def cone(i, n):
    t = i / n
    a = 8 * TAU * t
    r = 0.7 * (1.0 - t)
    return (r * math.cos(a), 2.0 * t - 1.0, r * math.sin(a))


# five square layers, share of the swarm proportional to layer area (5², 4², ... 1²)
PYRAMID_LAYERS = 5
_PYRAMID_WEIGHTS = [(PYRAMID_LAYERS - k) ** 2 for k in range(PYRAMID_LAYERS)]


def _pyramid_layer(k):
    half = (PYRAMID_LAYERS - k) / PYRAMID_LAYERS
    height = -1.0 + 0.45 * k
    square = rect_outline(-half, -half, half, half)
    return lambda t: flat(*polyline(square, t, closed=True), height)


segmented("pyramid", "dynamic", [
    (sum(_PYRAMID_WEIGHTS[:k + 1]) / sum(_PYRAMID_WEIGHTS), _pyramid_layer(k))
    for k in range(PYRAMID_LAYERS)
])


DNA_RUNGS = 10
DNA_TURNS = 2.5


def _strand(phase):
    def place(t):
        a = TAU * DNA_TURNS * t + phase
        return (0.4 * math.cos(a), 2.0 * t - 1.0, 0.4 * math.sin(a))
    return place


def _rungs(t):
    k = min(int(t * DNA_RUNGS), DNA_RUNGS - 1)
    along = t * DNA_RUNGS - k
    level = (k + 0.5) / DNA_RUNGS
    a = TAU * DNA_TURNS * level
    # straight bar between the two strands at this height
    x0, z0 = 0.4 * math.cos(a), 0.4 * math.sin(a)
    return (x0 - 2 * x0 * along, 2.0 * level - 1.0, z0 - 2 * z0 * along)


segmented("dna", "dynamic", [
    (0.4, _strand(0.0)),
    (0.8, _strand(math.pi)),
    (1.0, _rungs),
])
