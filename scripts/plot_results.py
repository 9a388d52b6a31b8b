import json
import sys
import numpy as np
import matplotlib.pyplot as plt


def load_log(path):
    with open(path, "r") as f:
        return json.load(f)


def settle_curve(data):
    """Per record: time and mean distance between drones and their targets."""
    ts = [entry["t"] for entry in data]
    dists = []
    for entry in data:
        if not entry["drones"]:
            dists.append(0.0)
            continue
        pos = np.array([d["pos"] for d in entry["drones"].values()])
        tgt = np.array([d["target"] for d in entry["drones"].values()])
        dists.append(float(np.linalg.norm(tgt - pos, axis=1).mean()))
    return ts, dists


def main(log_path="logs/sim.json"):
    data = load_log(log_path)
    ts, dists = settle_curve(data)

    plt.plot(ts, dists)
    plt.xlabel("time")
    plt.ylabel("mean distance to target")
    plt.title("Formation settling over time")
    plt.show()


if __name__ == "__main__":
    log = sys.argv[1] if len(sys.argv) > 1 else "logs/sim.json"
    main(log)
