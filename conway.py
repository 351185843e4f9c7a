"""Conway's Game of Life in the terminal - Entry Point."""

import argparse
import asyncio
import os
import random

from config import load_config
from internal.logging import StructuredLogger, parse_level
from simulation.engine import LifeEngine
from simulation.life import Simulation
from utils.crash import configure as configure_crash, install_crash_handler


def build_parser():
    p = argparse.ArgumentParser(description="Conway's Game of Life on a toroidal grid")
    p.add_argument("--config", default=None, help="Path to a JSON config file")
    p.add_argument("--width", type=int, default=None, help="Grid width")
    p.add_argument("--height", type=int, default=None, help="Grid height")
    p.add_argument("--generations", type=int, default=None,
                   help="Generations to show; 0 runs until interrupted")
    p.add_argument("--interval", type=float, default=None, help="Seconds between frames")
    p.add_argument("--seed", type=int, default=None, help="Random seed for the initial pattern")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARN or ERROR")
    return p


def apply_overrides(config, args):
    """Copy CLI options that were actually given onto the loaded config."""
    sim = config.simulation
    for option, attr in (("width", "width"), ("height", "height"), ("generations", "generations"),
                         ("interval", "frame_interval"), ("seed", "seed")):
        value = getattr(args, option)
        if value is not None:
            setattr(sim, attr, value)
    if args.log_level:
        config.logging.level = args.log_level
    return config


def open_log_stream(path):
    log_dir = os.path.dirname(path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    return open(path, "a")


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = apply_overrides(load_config(args.config), args)

    configure_crash(config.logging.crash_file)
    install_crash_handler()

    stream = open_log_stream(config.logging.file) if config.logging.file else None
    try:
        StructuredLogger.configure(parse_level(config.logging.level), stream)
        sim_config = config.simulation
        simulation = Simulation(sim_config.width, sim_config.height, rng=random.Random(sim_config.seed))
        engine = LifeEngine(simulation, config=sim_config, display=config.display)
        try:
            asyncio.run(engine.run())
        except KeyboardInterrupt:
            pass
    finally:
        if stream:
            stream.close()


if __name__ == "__main__":
    main()
