import argparse
import logging
import pathlib
import sys

# Ensure repository root is on PYTHONPATH when running without installation.
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from swarmshow.config import SwarmConfig, load_config
from swarmshow.core.metrics import arrived_fraction, coverage_extent, mean_target_distance
from swarmshow.core.simulator import Simulator
from swarmshow.viz.logger import SwarmLogger

SCHEDULE_SETTERS = {
    "formation": "set_formation",
    "swarm_size": "set_swarm_size",
    "scale": "set_scale",
    "anchor": "set_anchor",
    "color_mode": "set_color_mode",
    "animating": "set_animating",
    "speed": "set_speed",
}


def apply_schedule_entry(sim: Simulator, entry: dict):
    for key, value in entry.items():
        if key == "step":
            continue
        setter = SCHEDULE_SETTERS.get(key)
        if setter is None:
            logging.getLogger(__name__).warning("unknown schedule key %r", key)
            continue
        getattr(sim, setter)(value)


def build_parser():
    parser = argparse.ArgumentParser(description="Run the drone formation swarm.")
    parser.add_argument("--config", type=pathlib.Path, help="Path to YAML config.")
    parser.add_argument("--no-render", action="store_true", help="Disable live rendering (headless).")
    parser.add_argument("--log", type=pathlib.Path, help="Optional path to write JSON log.")
    parser.add_argument("--steps", type=int, help="Override total simulation steps.")
    parser.add_argument("--dt", type=float, help="Override seconds per tick.")
    parser.add_argument("--render-every", type=int, dest="render_every", help="Render every N steps.")
    parser.add_argument("--formation", help="Override the starting formation.")
    parser.add_argument("--swarm-size", type=int, dest="swarm_size", help="Override the number of drones.")
    parser.add_argument("--seed", type=int, help="Seed for spawn positions and random formations.")
    parser.add_argument("--log-level", default="INFO", dest="log_level", help="Python logging level.")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    cfg = load_config(args.config)
    if args.steps is not None:
        cfg["steps"] = args.steps
    if args.dt is not None:
        cfg["dt"] = args.dt
    if args.render_every is not None:
        cfg["render_every"] = args.render_every
    if args.seed is not None:
        cfg["seed"] = args.seed
    if args.formation is not None:
        cfg["swarm"]["formation"] = args.formation
    if args.swarm_size is not None:
        cfg["swarm"]["swarm_size"] = args.swarm_size

    sim = Simulator(SwarmConfig.from_dict(cfg["swarm"]), seed=cfg.get("seed"))
    renderer = None
    if not args.no_render:
        from swarmshow.viz.render_3d import SwarmRenderer3D
        renderer = SwarmRenderer3D(bounds=cfg.get("bounds", 20.0))
    logger = SwarmLogger(args.log) if args.log else None
    schedule = {int(e["step"]): e for e in cfg.get("schedule") or []}

    state = sim.snapshot()
    for step in range(cfg["steps"]):
        if step in schedule:
            apply_schedule_entry(sim, schedule[step])
        sim.tick(cfg["dt"])
        state = sim.snapshot()
        if renderer and step % cfg["render_every"] == 0:
            renderer.render(state)
        if logger:
            logger.log_state(state, step=step)

    if logger:
        logger.flush()
    print(
        f"{state.formation}: {len(state.drones)} drones, "
        f"{arrived_fraction(state):.0%} in place, mean distance {mean_target_distance(state):.3f}, "
        f"extent {coverage_extent(state):.1f}"
    )
    return state


if __name__ == "__main__":
    main()
