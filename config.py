import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class SimulationConfig:
    __slots__ = ("width", "height", "generations", "frame_interval", "seed")

    def __init__(self, width=40, height=15, generations=300, frame_interval=1 / 30, seed=None):
        self.width = width
        self.height = height
        self.generations = generations  # <= 0 runs until stopped
        self.frame_interval = frame_interval
        self.seed = seed


class DisplayConfig:
    __slots__ = ("alive", "dead", "clear")

    def __init__(self, alive="*", dead=" ", clear="\x0c"):
        self.alive = alive
        self.dead = dead
        self.clear = clear


class LoggingConfig:
    __slots__ = ("level", "file", "crash_file")

    def __init__(self, level="INFO", file="logs/conway.log", crash_file="logs/crash.log"):
        self.level = level
        self.file = file
        self.crash_file = crash_file


class Config:
    __slots__ = ("simulation", "display", "logging")

    def __init__(self, simulation=None, display=None, logging=None):
        self.simulation = simulation or SimulationConfig()
        self.display = display or DisplayConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            SimulationConfig(**d.get("simulation", {})),
            DisplayConfig(**d.get("display", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
