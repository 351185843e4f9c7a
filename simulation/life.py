"""Conway's Game of Life over a double-buffered toroidal grid."""

import random

from internal.logging import get_logger
from simulation.grid import Grid
from simulation.state import GenerationSnapshot

ALIVE = "*"
DEAD = " "


class Simulation:
    """Owns a current and a scratch grid and advances them one generation at a time.

    The two grids trade roles after every step; neither is reallocated.
    """

    def __init__(self, width, height, rng=None, populate=True):
        self._current = Grid(width, height)
        self._next = Grid(width, height)
        self.width = width
        self.height = height
        self.generation = 0
        self._log = get_logger()
        if populate:
            self._seed(rng or random.Random())
            self._log.info("simulation created", width=width, height=height,
                           population=self.population)

    @classmethod
    def from_cells(cls, width, height, cells):
        """Build a simulation whose first generation holds exactly `cells` alive."""
        simulation = cls(width, height, populate=False)
        for x, y in cells:
            simulation._current.set_cell(x, y, True)
        return simulation

    def _seed(self, rng):
        # Picks may repeat, so fewer than width*height//4 cells can end up alive.
        for _ in range(self.width * self.height // 4):
            self._current.set_cell(rng.randrange(self.width), rng.randrange(self.height), True)

    @property
    def population(self):
        return self._current.live_count()

    def live_cells(self):
        return self._current.live_cells()

    def step(self):
        """Advance one generation: fill the scratch grid from the current one, then swap."""
        current, scratch = self._current, self._next
        for y in range(self.height):
            for x in range(self.width):
                scratch.set_cell(x, y, current.next_state(x, y))
        self._current, self._next = scratch, current
        self.generation += 1
        self._log.debug("step", generation=self.generation, population=self.population)

    def render(self, alive=ALIVE, dead=DEAD):
        """Text frame of the current generation: one glyph per cell, one line per row."""
        lines = []
        for y in range(self.height):
            lines.append("".join(alive if self._current.is_active(x, y) else dead
                                 for x in range(self.width)))
            lines.append("\n")
        return "".join(lines)

    def snapshot(self, alive=ALIVE, dead=DEAD):
        return GenerationSnapshot(self.generation, self.width, self.height,
                                  self.population, self.render(alive, dead))

    def __str__(self):
        return self.render()
