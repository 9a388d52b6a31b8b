import json
from pathlib import Path
from ..core.state import SwarmState


class SwarmLogger:
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.records = []

    def log_state(self, state: SwarmState, step: int | None = None):
        snapshot = {
            "t": state.t,
            "formation": state.formation,
            "anchor": state.anchor.tolist(),
            "drones": {
                d.id: {
                    "pos": d.pos.tolist(),
                    "target": d.target.tolist(),
                    "vel": d.vel.tolist(),
                    "color": list(d.color),
                }
                for d in state.drones
            },
        }
        if step is not None:
            snapshot["step"] = step
        self.records.append(snapshot)

    def flush(self):
        with self.path.open("w") as f:
            json.dump(self.records, f, indent=2)
