from dataclasses import dataclass, field
import numpy as np

Color = tuple[float, float, float]


@dataclass
class AgentState:
    id: int
    pos: np.ndarray      # shape (3,)
    target: np.ndarray   # shape (3,)
    vel: np.ndarray      # displacement applied on the last tick

    def copy(self) -> "AgentState":
        return AgentState(id=self.id, pos=self.pos.copy(), target=self.target.copy(), vel=self.vel.copy())


@dataclass
class DroneView:
    id: int
    pos: np.ndarray
    target: np.ndarray
    vel: np.ndarray
    color: Color


@dataclass
class SwarmState:
    """Read-only per-tick view handed to renderers and loggers."""
    t: float
    formation: str
    anchor: np.ndarray
    drones: list[DroneView] = field(default_factory=list)
