"""
Per-drone color rules.

Every rule is a pure function of (agent, index, swarm_size, t) and returns an
RGB triple in [0, 1] that matplotlib accepts directly. Rules never touch the
agent state.
"""

import colorsys
import math
from typing import Callable

import numpy as np
from matplotlib.colors import to_rgb

from .state import AgentState, Color

DISTANCE_NORM = 20.0   # distance from origin that maps to the far end of the gradient
VELOCITY_NORM = 0.1    # per-tick step length that maps to "fast"

PALETTES: dict[str, list[Color]] = {
    name: [to_rgb(c) for c in hexes]
    for name, hexes in {
        "indian_flag": ["#FF9933", "#FFFFFF", "#138808"],
        "peacock": ["#005F73", "#0A9396", "#94D2BD", "#1B4965", "#7B2CBF", "#E9D8A6"],
        "fire": ["#FF0000", "#FF4500", "#FF8C00", "#FFA500", "#FFD700"],
        "ocean": ["#03045E", "#023E8A", "#0077B6", "#00B4D8", "#90E0EF"],
        "galaxy": ["#240046", "#5A189A", "#9D4EDD", "#C77DFF", "#E0AAFF", "#FFFFFF"],
    }.items()
}

ColorRule = Callable[[AgentState, int, int, float], Color]
COLOR_RULES: dict[str, ColorRule] = {}


def hsl(hue: float, saturation: float, lightness: float) -> Color:
    """CSS-style hsl(): hue in degrees, saturation/lightness in [0, 1]."""
    return colorsys.hls_to_rgb((hue % 360.0) / 360.0, lightness, saturation)


def color_rule(mode: str):
    def deco(fn):
        COLOR_RULES[mode] = fn
        return fn
    return deco


@color_rule("by_index")
def by_index(agent, index, swarm_size, t):
    return hsl(index / max(swarm_size, 1) * 360.0, 0.7, 0.6)


@color_rule("by_distance")
def by_distance(agent, index, swarm_size, t):
    # near the origin blue, far away red
    d = min(float(np.linalg.norm(agent.pos)) / DISTANCE_NORM, 1.0)
    return hsl((1.0 - d) * 240.0, 0.8, 0.6)


@color_rule("by_velocity")
def by_velocity(agent, index, swarm_size, t):
    v = min(float(np.linalg.norm(agent.vel)) / VELOCITY_NORM, 1.0)
    return hsl((1.0 - v) * 240.0, 0.85, 0.55)


@color_rule("rainbow")
def rainbow(agent, index, swarm_size, t):
    return hsl(t * 60.0 + index / max(swarm_size, 1) * 360.0, 0.9, 0.6)


@color_rule("temperature")
def temperature(agent, index, swarm_size, t):
    # swings between blue (240) and red (0)
    return hsl(120.0 + 120.0 * math.sin(t + index * 0.1), 0.85, 0.55)


@color_rule("indian_flag")
def tricolor(agent, index, swarm_size, t):
    saffron, white, green = PALETTES["indian_flag"]
    frac = index / max(swarm_size, 1)
    if frac < 1 / 3:
        return saffron
    if frac < 2 / 3:
        return white
    return green


def _palette_rule(name):
    palette = PALETTES[name]

    def rule(agent, index, swarm_size, t):
        return palette[index % len(palette)]

    rule.__name__ = f"{name}_palette"
    return rule


for _name in ("peacock", "fire", "ocean", "galaxy"):
    color_rule(_name)(_palette_rule(_name))

COLOR_MODES = tuple(COLOR_RULES)


def is_color_mode(mode) -> bool:
    return isinstance(mode, str) and mode in COLOR_RULES


def agent_color(agent: AgentState, index: int, swarm_size: int, mode: str, t: float = 0.0) -> Color:
    """Display color for one agent; unknown modes fall back to by_index."""
    rule = COLOR_RULES.get(mode, by_index) if is_color_mode(mode) else by_index
    return tuple(float(c) for c in rule(agent, index, swarm_size, t))
