import numpy as np

from .agent import ARRIVAL_THRESHOLD
from .state import SwarmState


def coverage_extent(state: SwarmState) -> float:
    """
    Volume of the axis-aligned bounding box around all drones.
    """
    positions = np.array([d.pos for d in state.drones])
    if len(positions) == 0:
        return 0.0
    mins = positions.min(axis=0)
    maxs = positions.max(axis=0)
    return float(np.prod(maxs - mins))


def target_distances(state: SwarmState) -> np.ndarray:
    if not state.drones:
        return np.zeros(0)
    pos = np.array([d.pos for d in state.drones])
    tgt = np.array([d.target for d in state.drones])
    return np.linalg.norm(tgt - pos, axis=1)


def mean_target_distance(state: SwarmState) -> float:
    """
    How far the swarm still is from its formation, averaged over drones.
    """
    dists = target_distances(state)
    return float(dists.mean()) if len(dists) else 0.0


def arrived_fraction(state: SwarmState, threshold: float = ARRIVAL_THRESHOLD) -> float:
    dists = target_distances(state)
    if len(dists) == 0:
        return 1.0
    return float((dists <= threshold).mean())
