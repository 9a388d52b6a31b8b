import importlib.util
import json
import pathlib

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from swarmshow.config import SwarmConfig
from swarmshow.core.metrics import arrived_fraction, coverage_extent, mean_target_distance
from swarmshow.core.simulator import Simulator
from swarmshow.core.state import DroneView, SwarmState
from swarmshow.viz.logger import SwarmLogger
from swarmshow.viz.render_3d import SwarmRenderer3D

SCRIPTS = pathlib.Path(__file__).resolve().parents[1] / "scripts"


def load_script(name):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def drone(i, pos, target):
    return DroneView(id=i, pos=np.array(pos, dtype=float), target=np.array(target, dtype=float),
                     vel=np.zeros(3), color=(1.0, 1.0, 1.0))


def test_metrics():
    state = SwarmState(t=0.0, formation="line", anchor=np.zeros(3), drones=[
        drone(0, (0, 0, 0), (0, 0, 0)),
        drone(1, (2, 3, 4), (2, 3, 5)),
    ])
    assert coverage_extent(state) == pytest.approx(24.0)
    assert mean_target_distance(state) == pytest.approx(0.5)
    assert arrived_fraction(state) == pytest.approx(0.5)


def test_metrics_on_empty_state():
    state = SwarmState(t=0.0, formation="line", anchor=np.zeros(3))
    assert coverage_extent(state) == 0.0
    assert mean_target_distance(state) == 0.0
    assert arrived_fraction(state) == 1.0


def test_logger_writes_snapshots(tmp_path):
    sim = Simulator(SwarmConfig(swarm_size=4, formation="square", animating=True), seed=0)
    log = SwarmLogger(tmp_path / "logs" / "run.json")
    sim.tick(0.1)
    log.log_state(sim.snapshot(), step=0)
    sim.tick(0.1)
    log.log_state(sim.snapshot(), step=1)
    log.flush()
    data = json.loads((tmp_path / "logs" / "run.json").read_text())
    assert [r["step"] for r in data] == [0, 1]
    assert data[1]["t"] == pytest.approx(0.2)
    assert data[0]["formation"] == "square"
    first = data[0]["drones"][str(sim.agents[0].state.id)]
    assert set(first) == {"pos", "target", "vel", "color"}


def test_renderer_draws_swarm_and_anchor():
    sim = Simulator(SwarmConfig(swarm_size=12, formation="circle", color_mode="rainbow", animating=True), seed=0)
    renderer = SwarmRenderer3D(bounds=10.0)
    renderer.render(sim.snapshot())
    sim.tick(0.5)
    sim.set_anchor((3.0, 0.0, 0.0))
    renderer.render(sim.snapshot())
    xs, ys, zs = renderer.anchor_scat._offsets3d
    assert (float(xs[0]), float(ys[0]), float(zs[0])) == (3.0, 0.0, 0.0)
    assert len(renderer.drone_scat._offsets3d[0]) == 12
    assert "circle" in renderer.ax.get_title()
    renderer.close()


def test_run_sim_headless_with_schedule(tmp_path, capsys):
    run_sim = load_script("run_sim")
    cfg = tmp_path / "tour.yaml"
    cfg.write_text(
        "steps: 60\n"
        "swarm:\n  swarm_size: 16\n  formation: circle\n  speed: 3.0\n"
        "schedule:\n  - {step: 20, formation: pyramid, color_mode: fire}\n  - {step: 40, swarm_size: 9}\n"
    )
    log_path = tmp_path / "sim.json"
    state = run_sim.main(["--config", str(cfg), "--no-render", "--seed", "5", "--log", str(log_path)])
    assert state.formation == "pyramid"
    assert len(state.drones) == 9
    out = capsys.readouterr().out
    assert "pyramid: 9 drones" in out
    assert "extent" in out

    plot_results = load_script("plot_results")
    data = plot_results.load_log(log_path)
    ts, dists = plot_results.settle_curve(data)
    assert len(ts) == len(dists) == 60
    assert dists[19] < dists[0]


def test_run_sim_cli_overrides(tmp_path):
    run_sim = load_script("run_sim")
    state = run_sim.main(["--no-render", "--steps", "5", "--formation", "heart", "--swarm-size", "11", "--seed", "1"])
    assert state.formation == "heart"
    assert len(state.drones) == 11
