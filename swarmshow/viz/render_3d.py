import matplotlib.pyplot as plt
import numpy as np
from ..core.state import SwarmState


class SwarmRenderer3D:
    def __init__(self, bounds: float = 20.0, point_size: float = 12.0):
        self.bounds = bounds
        self.point_size = point_size
        self.fig = plt.figure(figsize=(8, 8))
        self.ax = self.fig.add_subplot(projection="3d")
        backend = plt.get_backend().lower()
        self._interactive = backend not in {"agg", "pdf", "svg"}
        if self._interactive:
            plt.ion()
        self.drone_scat = None
        self.anchor_scat = None
        self._setup_axes()

    def _setup_axes(self):
        b = self.bounds
        self.ax.set_xlim(-b, b)
        self.ax.set_ylim(-b, b)
        self.ax.set_zlim(-b, b)
        self.ax.set_xlabel("x")
        self.ax.set_ylabel("z")
        self.ax.set_zlabel("y")
        self.ax.set_facecolor("#0f172a")

    @staticmethod
    def _to_axes(points: np.ndarray):
        # world is Y-up; matplotlib 3D draws its third axis upward
        return points[:, 0], points[:, 2], points[:, 1]

    def render(self, swarm_state: SwarmState):
        positions = np.array([d.pos for d in swarm_state.drones]).reshape(-1, 3)
        colors = [d.color for d in swarm_state.drones]
        xs, ys, zs = self._to_axes(positions)
        if self.drone_scat is None:
            self.drone_scat = self.ax.scatter(xs, ys, zs, c=colors, s=self.point_size, depthshade=False)
        else:
            self.drone_scat._offsets3d = (xs, ys, zs)
            self.drone_scat.set_facecolors(colors)
            self.drone_scat.set_edgecolors(colors)
        ax_, ay_, az_ = self._to_axes(swarm_state.anchor.reshape(1, 3))
        if self.anchor_scat is None:
            self.anchor_scat = self.ax.scatter(ax_, ay_, az_, c="white", s=120, alpha=0.5, marker="o")
        else:
            self.anchor_scat._offsets3d = (ax_, ay_, az_)
        self.ax.set_title(f"{swarm_state.formation} | drones={len(swarm_state.drones)} | t={swarm_state.t:.2f}")
        if self._interactive:
            plt.pause(0.001)

    def close(self):
        plt.close(self.fig)
