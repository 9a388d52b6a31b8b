import math

from .base import TAU, closed_form, disk, ellipse, flat, jitter, lerp, orb, ring, segmented, spokes, wrap


@closed_form("butterfly", "nature")
def butterfly(i, n):
    """Temple H. Fay's butterfly curve, normalized to roughly unit size."""
    t = 12 * math.pi * i / n
    r = math.exp(math.cos(t)) - 2 * math.cos(4 * t) - math.sin(t / 12) ** 5
    return flat(math.sin(t) * r / 4.5, math.cos(t) * r / 4.5)


def _gull_wing(side):
    def place(t):
        return flat(side * (0.1 + 0.9 * t), 0.35 * t + 0.2 * math.sin(math.pi * t))
    return place


segmented("bird", "nature", [
    (0.3, lambda t: flat(*ellipse(t, 0.0, 0.0, 0.12, 0.35))),
    (0.6, _gull_wing(-1.0)),
    (0.9, _gull_wing(1.0)),
    (1.0, lambda t: flat(*lerp((0.0, -0.35), (0.0, -0.6), t))),
])


def _eagle_wing(side):
    def place(t):
        # serrated trailing edge, tips raised
        v = 0.15 + 0.25 * t - 0.15 * abs(math.sin(5 * math.pi * t))
        return flat(side * (0.1 + 0.9 * t), v, 0.2 * t)
    return place


def _eagle_tail(t):
    a = -math.pi / 2 + (t - 0.5) * math.pi / 3
    return flat(0.3 * math.cos(a), -0.3 + 0.3 * math.sin(a))


segmented("eagle", "nature", [
    (0.2, lambda t: flat(*ellipse(t, 0.0, 0.0, 0.14, 0.32))),
    (0.28, lambda t: flat(*ring(t, 0.0, 0.45, 0.1))),
    (0.58, _eagle_wing(-1.0)),
    (0.88, _eagle_wing(1.0)),
    (1.0, _eagle_tail),
])


def _flower_petals(t):
    a = TAU * t
    r = 0.25 + 0.75 * abs(math.sin(3 * a))
    return flat(r * math.cos(a), r * math.sin(a))


segmented("flower", "nature", [
    (0.2, lambda t: flat(*disk(t, 0.0, 0.0, 0.2, turns=8))),
    (1.0, _flower_petals),
])


def _trunk(t, rng):
    return wrap(t, 0.08, 0.08, -1.0, -0.3, turns=5)


def _canopy(t, rng):
    return orb(t, 0.0, 0.2, 0.0, 0.55, turns=37) + jitter(rng, 0.15)


segmented("tree", "nature", [
    (0.2, _trunk),
    (1.0, _canopy),
], randomized=True)

segmented("sun", "nature", [
    (0.45, lambda t: flat(*ring(t, 0.0, 0.0, 0.4))),
    (1.0, lambda t: flat(*spokes(t, 12, 0.55, 1.0))),
])


# crescent opening to the right: outer arc on the unit circle, inner arc on a
# circle through the same tips
_TIP = math.pi / 3
_INNER_CX = 0.35
_INNER_R = math.hypot(math.cos(_TIP) - _INNER_CX, math.sin(_TIP))
_INNER_TIP = math.atan2(math.sin(_TIP), math.cos(_TIP) - _INNER_CX)

segmented("moon", "nature", [
    (0.6, lambda t: flat(*ellipse(t, 0.0, 0.0, 1.0, 1.0, _TIP, TAU - _TIP))),
    (1.0, lambda t: flat(*ellipse(t, _INNER_CX, 0.0, _INNER_R, _INNER_R, _INNER_TIP, TAU - _INNER_TIP))),
])


_PUFFS = [
    ((-0.6, 0.0, 0.0), 0.35),
    ((-0.2, 0.2, 0.0), 0.45),
    ((0.25, 0.25, 0.0), 0.45),
    ((0.65, 0.0, 0.0), 0.35),
    ((0.0, -0.05, 0.0), 0.4),
]


def _puff(center, radius):
    def place(t, rng):
        return orb(t, *center, radius, turns=13) + jitter(rng, 0.05)
    return place


segmented("cloud", "nature", [
    ((k + 1) / len(_PUFFS), _puff(center, radius)) for k, (center, radius) in enumerate(_PUFFS)
], randomized=True)
