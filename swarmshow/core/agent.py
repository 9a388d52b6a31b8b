import numpy as np

from .state import AgentState

ARRIVAL_THRESHOLD = 0.1   # closer than this counts as arrived
EASE_GAIN = 0.02          # fraction of the remaining distance covered per tick
MAX_STEP = 0.1            # per-tick step cap at speed 1


class Agent:
    def __init__(self, state: AgentState):
        self.state = state

    def retarget(self, target):
        self.state.target = np.array(target, dtype=float)

    def step(self, speed: float = 1.0) -> bool:
        """
        Move one tick toward the target with ease-out; returns False when the
        agent is already within ARRIVAL_THRESHOLD and was left untouched.
        """
        direction = self.state.target - self.state.pos
        distance = float(np.linalg.norm(direction))
        if distance <= ARRIVAL_THRESHOLD:
            return False
        step = min(distance * EASE_GAIN * speed, MAX_STEP * speed, distance)
        self._apply_step(direction / distance * step)
        return True

    def _apply_step(self, displacement):
        self.state.vel = displacement
        self.state.pos = self.state.pos + displacement
