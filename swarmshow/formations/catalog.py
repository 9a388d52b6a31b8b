import logging

import numpy as np

from . import abstract, basic, dynamic, glyphs, heritage, nature, objects, shows, symbols  # noqa: F401  (register)
from .base import REGISTRY, Formation, GeneratorKind

logger = logging.getLogger(__name__)

CATEGORIES = ("basic", "symbols", "heritage", "nature", "glyphs", "objects", "dynamic", "shows", "abstract")


def formation_ids(category: str | None = None) -> list[str]:
    return [fid for fid, f in REGISTRY.items() if category is None or f.category == category]


def get_formation(formation_id: str) -> Formation | None:
    if not isinstance(formation_id, str):
        return None
    return REGISTRY.get(formation_id)


def is_known(formation_id: str) -> bool:
    return get_formation(formation_id) is not None


def is_stochastic(formation_id: str) -> bool:
    f = get_formation(formation_id)
    return f is not None and f.kind is GeneratorKind.STOCHASTIC


def generate_targets(formation_id: str, swarm_size: int, scale: float, anchor, rng: np.random.Generator | None = None) -> np.ndarray:
    """
    Target positions for `swarm_size` agents, shape (swarm_size, 3).

    Row i is agent i's target. The shape is built in its unit frame, scaled
    and then translated by `anchor` as a whole. Returns an empty (0, 3) array
    for swarm_size <= 0 or an unknown formation id; callers keep their
    previous targets in that case.
    """
    if swarm_size <= 0:
        return np.zeros((0, 3))
    formation = get_formation(formation_id)
    if formation is None:
        logger.debug("unknown formation %r, no targets generated", formation_id)
        return np.zeros((0, 3))
    if rng is None:
        rng = np.random.default_rng()
    local = formation.build(int(swarm_size), rng)
    return local * float(scale) + np.asarray(anchor, dtype=float).reshape(3)
