from utils.timestamp import format_timestamp


class GenerationSnapshot:
    """Immutable view of one generation, safe to hand to renderers and loggers."""

    __slots__ = ("generation", "width", "height", "population", "frame", "timestamp")

    def __init__(self, generation, width, height, population, frame, timestamp=None):
        values = (generation, width, height, population, frame, timestamp or format_timestamp())
        for name, value in zip(self.__slots__, values):
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is read-only")

    @property
    def rows(self):
        return self.frame.splitlines()

    def to_dict(self):
        return {
            "generation": self.generation,
            "timestamp": self.timestamp,
            "width": self.width,
            "height": self.height,
            "population": self.population,
            "rows": self.rows,
        }
