import math

from .base import TAU, closed_form, disk, ellipse, flat, jitter, lerp, ring, segmented, stochastic

GALAXY_ARMS = 3


@stochastic("random", "abstract")
def random_cloud(i, n, rng):
    return rng.uniform(-1.0, 1.0, size=3)


@stochastic("galaxy", "abstract")
def galaxy(i, n, rng):
    arm = i % GALAXY_ARMS
    t = i / n
    a = TAU * arm / GALAXY_ARMS + 2 * TAU * t
    x, z = t * math.cos(a), t * math.sin(a)
    dx, dy, dz = jitter(rng, 0.08)
    return (x + dx, 0.5 * dy, z + dz)


def _mandala_inner(t):
    a = TAU * t
    r = 0.5 + 0.1 * math.cos(8 * a)
    return flat(r * math.cos(a), r * math.sin(a))


def _mandala_outer(t):
    a = TAU * t
    r = 0.6 + 0.4 * abs(math.cos(6 * a))
    return flat(r * math.cos(a), r * math.sin(a))


segmented("mandala", "abstract", [
    (0.15, lambda t: flat(*ring(t, 0.0, 0.0, 0.2))),
    (0.55, _mandala_inner),
    (1.0, _mandala_outer),
])


def _yin_yang_curve(t):
    # S-curve made of two half circles
    if t < 0.5:
        return flat(*ellipse(t * 2.0, 0.0, 0.5, 0.5, 0.5, math.pi / 2, -math.pi / 2))
    return flat(*ellipse(t * 2.0 - 1.0, 0.0, -0.5, 0.5, 0.5, math.pi / 2, 3 * math.pi / 2))


segmented("yin_yang", "abstract", [
    (0.45, lambda t: flat(*ring(t, 0.0, 0.0, 1.0))),
    (0.75, _yin_yang_curve),
    (0.875, lambda t: flat(*ring(t, 0.0, 0.5, 0.1))),
    (1.0, lambda t: flat(*ring(t, 0.0, -0.5, 0.1))),
])


@closed_form("rose", "abstract")
def rose(i, n):
    """Eight-petal rhodonea r = cos(4a)."""
    a = TAU * i / n
    r = math.cos(4 * a)
    return flat(r * math.cos(a), r * math.sin(a))


def _note_flag(t):
    return flat(0.45 * t, 0.9 - 0.6 * t + 0.15 * math.sin(math.pi * t))


segmented("musical_note", "abstract", [
    (0.35, lambda t: flat(*disk(t, -0.3, -0.7, 0.3, 0.2, turns=3))),
    (0.7, lambda t: flat(*lerp((0.0, -0.7), (0.0, 0.9), t))),
    (1.0, _note_flag),
])
