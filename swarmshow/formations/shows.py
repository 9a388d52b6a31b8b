import math

from .base import TAU, closed_form, disk, ellipse, flat, jitter, orb, polyline, ring, segmented, stochastic, wrap

_BURSTS = [
    ((-0.5, 0.4, 0.0), 0.35),
    ((0.45, 0.6, -0.2), 0.4),
    ((0.0, -0.1, 0.3), 0.3),
    ((-0.6, -0.5, -0.3), 0.25),
    ((0.6, -0.4, 0.2), 0.3),
]


@stochastic("fireworks", "shows")
def fireworks(i, n, rng):
    center, radius = _BURSTS[i % len(_BURSTS)]
    k = i // len(_BURSTS)
    count = math.ceil(n / len(_BURSTS))
    r = radius * (0.6 + 0.4 * rng.random())
    return orb(k / count, *center, r, turns=count) + jitter(rng, 0.03)


_TREE_STAR = [
    (r * math.cos(math.pi / 2 + k * math.pi / 5), r * math.sin(math.pi / 2 + k * math.pi / 5))
    for k, r in zip(range(10), [0.12, 0.05] * 5)
]


def _tier(r, y0, y1):
    return lambda t: wrap(t, r, 0.0, y0, y1, turns=5)


def _tree_star(t):
    u, v = polyline(_TREE_STAR, t, closed=True)
    return (u, 1.05 + v, 0.0)


segmented("christmas_tree", "shows", [
    (0.30, _tier(0.8, -0.6, 0.0)),
    (0.58, _tier(0.6, -0.2, 0.45)),
    (0.85, _tier(0.4, 0.25, 0.9)),
    (0.95, lambda t: wrap(t, 0.1, 0.1, -1.0, -0.6, turns=3)),
    (1.0, _tree_star),
])


SNOWFLAKE_ARMS = 6


@closed_form("snowflake", "shows")
def snowflake(i, n):
    t = i / n
    k = min(int(t * SNOWFLAKE_ARMS), SNOWFLAKE_ARMS - 1)
    s = t * SNOWFLAKE_ARMS - k
    a = math.pi / 2 + TAU * k / SNOWFLAKE_ARMS
    if s < 0.6:
        r, off = s / 0.6, 0.0
    else:
        # side branches leave the spoke at 60 % of its length
        side = 1.0 if s < 0.8 else -1.0
        along = (s - 0.6) / 0.2 if s < 0.8 else (s - 0.8) / 0.2
        r = 0.6 + 0.25 * along * math.cos(math.pi / 4)
        off = side * 0.25 * along * math.sin(math.pi / 4)
    return flat(r * math.cos(a) - off * math.sin(a), r * math.sin(a) + off * math.cos(a))


_RINGS = [(-0.9, 0.2), (0.0, 0.2), (0.9, 0.2), (-0.45, -0.2), (0.45, -0.2)]

def _ring_at(cx, cy):
    return lambda t: flat(*ring(t, cx, cy, 0.4))


segmented("olympic_rings", "shows", [
    ((k + 1) / len(_RINGS), _ring_at(cx, cy)) for k, (cx, cy) in enumerate(_RINGS)
])


CROWN_PEAKS = 8
CROWN_RADIUS = 0.7


def _crown_band(t):
    # two stacked rings
    y = -0.5 if t < 0.5 else -0.35
    a = TAU * ((t * 2.0) % 1.0)
    return (CROWN_RADIUS * math.cos(a), y, CROWN_RADIUS * math.sin(a))


def _crown_peaks(t):
    k = min(int(t * CROWN_PEAKS), CROWN_PEAKS - 1)
    w = t * CROWN_PEAKS - k
    height = 0.9 if k % 2 == 0 else 0.45
    a = TAU * t
    return (CROWN_RADIUS * math.cos(a), -0.35 + height * (1.0 - abs(2.0 * w - 1.0)), CROWN_RADIUS * math.sin(a))


segmented("crown", "shows", [
    (0.4, _crown_band),
    (1.0, _crown_peaks),
])


def _trophy_cup(t):
    y = 0.1 + 0.9 * t
    r = 0.15 + 0.45 * math.sqrt(t)
    a = TAU * 6 * t
    return (r * math.cos(a), y, r * math.sin(a))


def _trophy_handles(t):
    if t < 0.5:
        x, y = ellipse(t * 2.0, -0.6, 0.6, 0.22, 0.22, math.pi / 2, 3 * math.pi / 2)
    else:
        x, y = ellipse(t * 2.0 - 1.0, 0.6, 0.6, 0.22, 0.22, math.pi / 2, -math.pi / 2)
    return (x, y, 0.0)


def _trophy_base(t):
    u, v = disk(t, 0.0, 0.0, 0.45)
    return (u, -0.7, v)


segmented("trophy", "shows", [
    (0.45, _trophy_cup),
    (0.65, _trophy_handles),
    (0.8, lambda t: wrap(t, 0.06, 0.06, 0.1, -0.6, turns=3)),
    (1.0, _trophy_base),
])
