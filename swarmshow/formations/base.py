"""
Formation registry and shared geometry.

Every formation is registered under a string id and builds its shape in a
unit local frame (roughly [-1, 1] on each axis). `catalog.generate_targets`
multiplies by the formation scale and adds the anchor afterwards, so the
generators here never see either.

Flat (icon-like) shapes are laid out in the XZ ground plane through `flat`,
with image "up" mapped to -Z. Upright 3D shapes use Y as height.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

import numpy as np

TAU = 2.0 * math.pi
GOLDEN_TURN = math.pi * (1.0 + math.sqrt(5.0))

Point2 = tuple[float, float]
Point3 = tuple[float, float, float]


class GeneratorKind(Enum):
    CLOSED_FORM = "closed_form"
    SEGMENTED = "segmented"
    STOCHASTIC = "stochastic"


@dataclass(frozen=True)
class Formation:
    id: str
    kind: GeneratorKind
    category: str
    build: Callable[[int, np.random.Generator], np.ndarray]


REGISTRY: dict[str, Formation] = {}


def _register(formation: Formation):
    if formation.id in REGISTRY:
        raise ValueError(f"formation {formation.id!r} registered twice")
    REGISTRY[formation.id] = formation
    return formation


def _as_array(points, n: int) -> np.ndarray:
    return np.asarray(points, dtype=float).reshape(n, 3)


def closed_form(formation_id: str, category: str):
    """
    Register `fn(i, n) -> (x, y, z)` as a deterministic per-index generator.
    """
    def deco(fn):
        def build(n, rng):
            return _as_array([fn(i, n) for i in range(n)], n)

        _register(Formation(formation_id, GeneratorKind.CLOSED_FORM, category, build))
        return fn

    return deco


def stochastic(formation_id: str, category: str):
    """
    Register `fn(i, n, rng) -> (x, y, z)`; the generator may draw from `rng`.
    """
    def deco(fn):
        def build(n, rng):
            return _as_array([fn(i, n, rng) for i in range(n)], n)

        _register(Formation(formation_id, GeneratorKind.STOCHASTIC, category, build))
        return fn

    return deco


def segment_ranges(n: int, uppers: Sequence[float]) -> list[tuple[int, int]]:
    """
    Split [0, n) into contiguous (start, stop) ranges.

    Index i belongs to the first range whose upper fraction exceeds i / n.
    The last range always absorbs whatever is left so that no index is lost
    to rounding in the fractions.
    """
    ranges = []
    start = 0
    last = len(uppers) - 1
    for k, upper in enumerate(uppers):
        stop = start
        while stop < n and (k == last or stop / n < upper):
            stop += 1
        ranges.append((start, stop))
        start = stop
    return ranges


def segmented(formation_id: str, category: str, parts, randomized: bool = False):
    """
    Register a shape made of index sub-ranges.

    `parts` is a list of (upper_fraction, place) pairs in increasing order of
    upper_fraction, the last one being 1.0. `place(t)` maps the local progress
    t = (i - start) / length in [0, 1) to a point. With `randomized=True` the
    placers are called as `place(t, rng)` and the formation is registered as
    stochastic.
    """
    uppers = [upper for upper, _ in parts]
    placers = [place for _, place in parts]

    def build(n, rng):
        points = []
        for (start, stop), place in zip(segment_ranges(n, uppers), placers):
            length = stop - start
            for i in range(start, stop):
                t = (i - start) / length
                points.append(place(t, rng) if randomized else place(t))
        return _as_array(points, n)

    kind = GeneratorKind.STOCHASTIC if randomized else GeneratorKind.SEGMENTED
    return _register(Formation(formation_id, kind, category, build))


# ---------------------------------------------------------------------------
# geometry helpers
# ---------------------------------------------------------------------------

def flat(u: float, v: float, h: float = 0.0) -> Point3:
    """Image coordinates (u right, v up) to world XZ, with optional height."""
    return (u, h, -v)


def lerp(a: Point2, b: Point2, s: float) -> Point2:
    return (a[0] + (b[0] - a[0]) * s, a[1] + (b[1] - a[1]) * s)


def polyline(points: Sequence[Point2], s: float, closed: bool = False) -> Point2:
    """Point at arc-length fraction s along a polyline."""
    pts = list(points)
    if closed:
        pts.append(pts[0])
    lengths = [math.dist(a, b) for a, b in zip(pts, pts[1:])]
    total = sum(lengths)
    if total == 0.0:
        return pts[0]
    remaining = (s % 1.0 if closed else min(max(s, 0.0), 1.0)) * total
    for (a, b), seg in zip(zip(pts, pts[1:]), lengths):
        if remaining <= seg and seg > 0.0:
            return lerp(a, b, remaining / seg)
        remaining -= seg
    return pts[-1]


def ellipse(s: float, cx: float, cy: float, rx: float, ry: float,
            a0: float = 0.0, a1: float = TAU) -> Point2:
    a = a0 + (a1 - a0) * s
    return (cx + rx * math.cos(a), cy + ry * math.sin(a))


def ring(s: float, cx: float, cy: float, r: float) -> Point2:
    return ellipse(s, cx, cy, r, r)


def arc_points(cx: float, cy: float, r: float, a0: float, a1: float, count: int = 12) -> list[Point2]:
    return [ellipse(k / (count - 1), cx, cy, r, r, a0, a1) for k in range(count)]


def regular_polygon(sides: int, radius: float = 1.0, rotation: float = math.pi / 2) -> list[Point2]:
    return [
        (radius * math.cos(rotation + TAU * k / sides), radius * math.sin(rotation + TAU * k / sides))
        for k in range(sides)
    ]


def rect_outline(u0: float, v0: float, u1: float, v1: float) -> list[Point2]:
    return [(u0, v0), (u1, v0), (u1, v1), (u0, v1)]


def rect_fill(s: float, u0: float, v0: float, u1: float, v1: float, rows: int) -> Point2:
    """Raster a rectangle row by row (top row first) as s runs over [0, 1)."""
    row = min(int(s * rows), rows - 1)
    along = s * rows - row
    v = v1 - (v1 - v0) * (row + 0.5) / rows
    return (u0 + (u1 - u0) * along, v)


def spokes(s: float, count: int, r0: float, r1: float,
           cx: float = 0.0, cy: float = 0.0, phase: float = math.pi / 2) -> Point2:
    """Evenly spaced radial segments from r0 to r1."""
    k = min(int(s * count), count - 1)
    along = s * count - k
    r = r0 + (r1 - r0) * along
    a = phase + TAU * k / count
    return (cx + r * math.cos(a), cy + r * math.sin(a))


def disk(s: float, cx: float, cy: float, rx: float, ry: float | None = None, turns: float = 5.0) -> Point2:
    """Fill an ellipse with an outward spiral (area-uniform in s)."""
    ry = rx if ry is None else ry
    r = math.sqrt(s)
    a = TAU * turns * s
    return (cx + rx * r * math.cos(a), cy + ry * r * math.sin(a))


def wrap(s: float, r0: float, r1: float, y0: float, y1: float, turns: float = 6.0) -> Point3:
    """Spiral wound around a vertical surface of revolution (cylinder, cone, bowl)."""
    a = TAU * turns * s
    r = r0 + (r1 - r0) * s
    return (r * math.cos(a), y0 + (y1 - y0) * s, r * math.sin(a))


def orb(s: float, cx: float, cy: float, cz: float, r: float, turns: float = 21.0) -> Point3:
    """Golden-angle style point on a sphere, parameterized by s in [0, 1)."""
    phi = math.acos(1.0 - 2.0 * s)
    theta = GOLDEN_TURN * turns * s
    return (
        cx + r * math.sin(phi) * math.cos(theta),
        cy + r * math.cos(phi),
        cz + r * math.sin(phi) * math.sin(theta),
    )


def jitter(rng: np.random.Generator, amount: float) -> np.ndarray:
    return rng.uniform(-amount, amount, size=3)
