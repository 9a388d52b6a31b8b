"""
Vehicles and everyday objects.

The airplane split (fuselage 35 %, wings 20 %, winglets 15 %, stabilizer
15 %, rudder 15 %) is what makes the silhouette read as a plane from above;
keep the fractions as they are.
"""

import math

from .base import TAU, flat, lerp, polyline, rect_fill, rect_outline, ring, segmented, wrap

_WING = [(-1.0, -0.05), (0.0, 0.2), (1.0, -0.05)]
_STABILIZER = [(-0.4, -0.8), (0.0, -0.7), (0.4, -0.8)]


def _winglets(t):
    # left tip for the first half, right tip for the second, both rising
    side = -1.0 if t < 0.5 else 1.0
    rise = (t * 2.0) % 1.0
    return flat(side * (1.0 + 0.05 * rise), -0.05 + 0.1 * rise, 0.2 * rise)


def _rudder(t):
    return flat(0.0, -0.9 + 0.15 * t, 0.35 * t)


segmented("airplane", "objects", [
    (0.35, lambda t: flat(*lerp((0.0, -0.9), (0.0, 1.0), t))),
    (0.55, lambda t: flat(*polyline(_WING, t))),
    (0.70, _winglets),
    (0.85, lambda t: flat(*polyline(_STABILIZER, t))),
    (1.0, _rudder),
])


def _rocket_fins(t):
    fins = 4
    k = min(int(t * fins), fins - 1)
    along = t * fins - k
    a = TAU * k / fins
    r = 0.2 + 0.25 * along
    return (r * math.cos(a), -0.5 - 0.3 * along, r * math.sin(a))


def _rocket_exhaust(t):
    u, v = ring(t, 0.0, 0.0, 0.12)
    return (u, -0.8, v)


segmented("rocket", "objects", [
    (0.5, lambda t: wrap(t, 0.2, 0.2, -0.7, 0.5, turns=8)),
    (0.7, lambda t: wrap(t, 0.2, 0.0, 0.5, 1.0, turns=4)),
    (0.9, _rocket_fins),
    (1.0, _rocket_exhaust),
])


def _latitudes(t):
    rings = 5
    k = min(int(t * rings), rings - 1)
    lat = math.radians(-60 + 30 * k)
    a = TAU * (t * rings - k)
    return (math.cos(lat) * math.cos(a), math.sin(lat), math.cos(lat) * math.sin(a))


def _meridians(t):
    circles = 3
    k = min(int(t * circles), circles - 1)
    lon = math.pi * k / circles
    a = TAU * (t * circles - k)
    return (math.cos(a) * math.cos(lon), math.sin(a), math.cos(a) * math.sin(lon))


segmented("globe", "objects", [
    (0.5, _latitudes),
    (1.0, _meridians),
])

segmented("phone", "objects", [
    (0.6, lambda t: flat(*polyline(rect_outline(-0.5, -1.0, 0.5, 1.0), t, closed=True))),
    (0.9, lambda t: flat(*polyline(rect_outline(-0.4, -0.7, 0.4, 0.8), t, closed=True))),
    (1.0, lambda t: flat(*ring(t, 0.0, -0.86, 0.07))),
])


def _laptop_screen(t):
    # screen stands upright along the back edge of the base
    u, v = polyline(rect_outline(-0.8, 0.0, 0.8, 1.0), t, closed=True)
    return (u, v, 0.0)


def _laptop_base(t):
    u, v = polyline(rect_outline(-0.8, 0.0, 0.8, 0.9), t, closed=True)
    return (u, 0.0, v)


def _laptop_keys(t):
    u, v = rect_fill(t, -0.6, 0.15, 0.6, 0.6, 3)
    return (u, 0.0, v)


segmented("laptop", "objects", [
    (0.5, _laptop_screen),
    (0.85, _laptop_base),
    (1.0, _laptop_keys),
])

_CAR_BODY = [(-1.0, -0.2), (1.0, -0.2), (1.0, 0.1), (0.5, 0.15), (0.25, 0.5),
             (-0.4, 0.5), (-0.65, 0.15), (-1.0, 0.1)]
_CAR_WINDOW = [(-0.35, 0.15), (-0.3, 0.42), (0.2, 0.42), (0.4, 0.15)]

segmented("car", "objects", [
    (0.45, lambda t: flat(*polyline(_CAR_BODY, t, closed=True))),
    (0.6, lambda t: flat(*polyline(_CAR_WINDOW, t, closed=True))),
    (0.8, lambda t: flat(*ring(t, -0.55, -0.25, 0.2))),
    (1.0, lambda t: flat(*ring(t, 0.55, -0.25, 0.2))),
])

segmented("house", "objects", [
    (0.45, lambda t: flat(*polyline(rect_outline(-0.7, -1.0, 0.7, 0.1), t, closed=True))),
    (0.7, lambda t: flat(*polyline([(-0.9, 0.1), (0.0, 0.9), (0.9, 0.1)], t))),
    (0.85, lambda t: flat(*polyline([(-0.15, -1.0), (-0.15, -0.5), (0.15, -0.5), (0.15, -1.0)], t))),
    (1.0, lambda t: flat(*polyline(rect_outline(0.3, -0.35, 0.55, -0.1), t, closed=True))),
])
