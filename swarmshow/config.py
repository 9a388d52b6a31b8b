import copy
import logging
import math
import pathlib
from dataclasses import dataclass, fields

import numpy as np
import yaml

logger = logging.getLogger(__name__)

MIN_SPEED = 0.1

DEFAULT_CONFIG = {
    "dt": 1 / 60,
    "steps": 3000,
    "render_every": 2,
    "seed": None,
    "bounds": 20.0,
    "swarm": {
        "formation": "indian_flag",
        "swarm_size": 150,
        "scale": 8.0,
        "anchor": [0.0, 0.0, 0.0],
        "color_mode": "indian_flag",
        "animating": True,
        "speed": 1.0,
    },
    # list of {"step": int, <swarm key>: value, ...} applied during a run
    "schedule": [],
}


class ConfigError(ValueError):
    pass


@dataclass
class SwarmConfig:
    formation: str = "indian_flag"
    swarm_size: int = 150
    scale: float = 8.0
    anchor: tuple[float, float, float] = (0.0, 0.0, 0.0)
    color_mode: str = "indian_flag"
    animating: bool = False
    speed: float = 1.0

    @classmethod
    def from_dict(cls, data: dict | None) -> "SwarmConfig":
        data = data or {}
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning("ignoring unknown swarm config keys: %s", ", ".join(sorted(unknown)))
        kwargs = {k: v for k, v in data.items() if k in known}
        if isinstance(kwargs.get("anchor"), list):
            kwargs["anchor"] = tuple(kwargs["anchor"])
        # anything else is passed through; the simulator rejects bad anchors
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def deep_update(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = deep_update(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: pathlib.Path | None) -> dict:
    """
    Load a YAML run config on top of DEFAULT_CONFIG.

    An `inherits: other.yaml` key pulls in a base file first, resolved
    relative to the including file.
    """
    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    path = pathlib.Path(path)
    cfg = yaml.safe_load(path.read_text())
    if cfg is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    if not isinstance(cfg, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level, got {type(cfg).__name__}")
    if "inherits" in cfg:
        base_cfg = load_config(path.parent / cfg["inherits"])
        cfg = {k: v for k, v in cfg.items() if k != "inherits"}
        return deep_update(base_cfg, cfg)
    return deep_update(copy.deepcopy(DEFAULT_CONFIG), cfg)


# normalizers: invalid values are clamped or rejected (None), never raised

def normalize_swarm_size(value) -> int | None:
    try:
        n = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return max(n, 1)


def normalize_scale(value) -> float | None:
    try:
        s = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(s):
        return None
    return max(s, 0.0)


def normalize_speed(value) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError):
        return MIN_SPEED
    if not math.isfinite(v) or v <= 0.0:
        return MIN_SPEED
    return v


def normalize_anchor(value) -> tuple[float, float, float] | None:
    try:
        xyz = tuple(float(c) for c in value)
    except (TypeError, ValueError):
        return None
    if len(xyz) != 3 or not all(math.isfinite(c) for c in xyz):
        return None
    return xyz


_TRUE_WORDS = {"true", "yes", "on", "1"}
_FALSE_WORDS = {"false", "no", "off", "0"}


def normalize_animating(value) -> bool | None:
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    return None
