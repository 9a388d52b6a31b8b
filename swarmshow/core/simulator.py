import logging
import math

import numpy as np

from .agent import Agent
from .colors import agent_color, is_color_mode
from .state import AgentState, DroneView, SwarmState
from ..config import (SwarmConfig, normalize_anchor, normalize_animating, normalize_scale, normalize_speed,
                      normalize_swarm_size)
from ..formations.catalog import generate_targets, is_known

logger = logging.getLogger(__name__)

SPAWN_HALF_EXTENT = 10.0   # fresh agents start inside [-10, 10]^3


class Simulator:
    """
    Owns the swarm: configuration mutators regenerate targets from the
    formation catalog, `tick` moves every agent one step toward its target.

    Single-threaded. A mutator always finishes rewriting targets (or swapping
    in a new agent list) before the next tick reads them.
    """

    def __init__(self, config: SwarmConfig | None = None, rng: np.random.Generator | None = None, seed=None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.config = SwarmConfig()
        self.t = 0.0
        self._next_id = 0
        self.agents: list[Agent] = []
        if config is not None:
            self._absorb(config)
        self._respawn(self.config.swarm_size)
        self._regenerate_targets()

    # -- inbound configuration -------------------------------------------

    def set_swarm_size(self, n):
        size = normalize_swarm_size(n)
        if size is None:
            logger.warning("ignoring invalid swarm size %r", n)
            return
        if size != n:
            logger.warning("swarm size %r clamped to %d", n, size)
        self.config.swarm_size = size
        self._respawn(size)
        self._regenerate_targets()

    def set_formation(self, formation_id: str):
        if not is_known(formation_id):
            logger.warning("unknown formation %r, keeping %r", formation_id, self.config.formation)
            return
        self.config.formation = formation_id
        self._regenerate_targets()

    def set_scale(self, scale):
        s = normalize_scale(scale)
        if s is None:
            logger.warning("ignoring invalid formation scale %r", scale)
            return
        self.config.scale = s
        self._regenerate_targets()

    def set_anchor(self, anchor):
        a = normalize_anchor(anchor)
        if a is None:
            logger.warning("ignoring invalid anchor %r", anchor)
            return
        self.config.anchor = a
        self._regenerate_targets()

    def set_color_mode(self, mode: str):
        if not is_color_mode(mode):
            logger.warning("unknown color mode %r, keeping %r", mode, self.config.color_mode)
            return
        self.config.color_mode = mode

    def set_animating(self, animating: bool):
        flag = normalize_animating(animating)
        if flag is None:
            logger.warning("ignoring invalid animating flag %r", animating)
            return
        self.config.animating = flag

    def set_speed(self, speed):
        v = normalize_speed(speed)
        try:
            requested = float(speed)
        except (TypeError, ValueError):
            requested = None
        if requested != v:
            logger.warning("animation speed %r clamped to %s", speed, v)
        self.config.speed = v

    def apply_config(self, config: SwarmConfig):
        """Apply a whole configuration with at most one respawn and one regeneration."""
        old_size = len(self.agents)
        self._absorb(config)
        if self.config.swarm_size != old_size:
            self._respawn(self.config.swarm_size)
        self._regenerate_targets()

    # -- per-tick ---------------------------------------------------------

    def tick(self, dt: float = 0.0) -> int:
        """
        Advance every agent one step. Returns how many agents moved.
        Does nothing at all (clock included) while animation is off.
        """
        if not self.config.animating:
            return 0
        if dt > 0.0 and math.isfinite(dt):
            self.t += dt
        agents = self.agents
        moved = 0
        for agent in agents:
            if agent.step(self.config.speed):
                moved += 1
        return moved

    def colors(self) -> list[tuple[float, float, float]]:
        n = len(self.agents)
        return [agent_color(a.state, i, n, self.config.color_mode, self.t) for i, a in enumerate(self.agents)]

    def snapshot(self) -> SwarmState:
        colors = self.colors()
        drones = [
            DroneView(
                id=a.state.id,
                pos=a.state.pos.copy(),
                target=a.state.target.copy(),
                vel=a.state.vel.copy(),
                color=c,
            )
            for a, c in zip(self.agents, colors)
        ]
        return SwarmState(t=self.t, formation=self.config.formation, anchor=self.anchor_marker, drones=drones)

    @property
    def anchor_marker(self) -> np.ndarray:
        return np.array(self.config.anchor, dtype=float)

    def targets(self) -> np.ndarray:
        return np.array([a.state.target for a in self.agents]).reshape(len(self.agents), 3)

    def positions(self) -> np.ndarray:
        return np.array([a.state.pos for a in self.agents]).reshape(len(self.agents), 3)

    # -- internals --------------------------------------------------------

    def _absorb(self, config: SwarmConfig):
        # route every field through the mutator normalization, without side effects
        size = normalize_swarm_size(config.swarm_size)
        if size is not None:
            self.config.swarm_size = size
        if is_known(config.formation):
            self.config.formation = config.formation
        else:
            logger.warning("unknown formation %r, keeping %r", config.formation, self.config.formation)
        scale = normalize_scale(config.scale)
        if scale is not None:
            self.config.scale = scale
        anchor = normalize_anchor(config.anchor)
        if anchor is not None:
            self.config.anchor = anchor
        else:
            logger.warning("ignoring invalid anchor %r", config.anchor)
        if is_color_mode(config.color_mode):
            self.config.color_mode = config.color_mode
        else:
            logger.warning("unknown color mode %r, keeping %r", config.color_mode, self.config.color_mode)
        animating = normalize_animating(config.animating)
        if animating is not None:
            self.config.animating = animating
        else:
            logger.warning("ignoring invalid animating flag %r", config.animating)
        self.config.speed = normalize_speed(config.speed)

    def _respawn(self, n: int):
        agents = []
        for _ in range(n):
            st = AgentState(
                id=self._next_id,
                pos=self.rng.uniform(-SPAWN_HALF_EXTENT, SPAWN_HALF_EXTENT, size=3),
                target=np.zeros(3),
                vel=np.zeros(3),
            )
            self._next_id += 1
            agents.append(Agent(st))
        # swap in the complete list in one assignment
        self.agents = agents
        logger.info("spawned %d agents", n)

    def _regenerate_targets(self):
        targets = generate_targets(
            self.config.formation,
            len(self.agents),
            self.config.scale,
            self.config.anchor,
            rng=self.rng,
        )
        if len(targets) == 0:
            return
        if len(targets) < len(self.agents):
            logger.warning("formation %r produced %d targets for %d agents", self.config.formation,
                           len(targets), len(self.agents))
        # agents past the end of a short target list keep what they had
        for agent, target in zip(self.agents, targets):
            agent.retarget(target)
        logger.debug("regenerated %d targets for %r", len(targets), self.config.formation)
