"""Grid holds one generation of cells on a torus."""

from core.errors import CellOutOfRangeError, InvalidDimensionError

# Offsets of the 8 surrounding cells (Moore neighbourhood).
NEIGHBOR_OFFSETS = tuple((dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if dx or dy)


def wrap(n, size):
    """Map any integer onto [0, size)."""
    return ((n % size) + size) % size


class Grid:
    """Fixed-size boolean cell matrix with toroidal wraparound."""

    __slots__ = ("width", "height", "_cells")

    def __init__(self, width, height):
        if not _positive_int(width) or not _positive_int(height):
            raise InvalidDimensionError(f"grid must be at least 1x1, got {width}x{height}",
                                        width=width, height=height)
        self.width = width
        self.height = height
        # Row-major: _cells[y][x]
        self._cells = [[False] * width for _ in range(height)]

    def set_cell(self, x, y, value):
        """Set the state of an in-range cell. Raises CellOutOfRangeError otherwise."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise CellOutOfRangeError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid",
                                      x=x, y=y, width=self.width, height=self.height)
        self._cells[y][x] = bool(value)

    def is_active(self, x, y):
        """Report whether a cell is alive. Coordinates wrap toroidally, so -1 is width-1."""
        return self._cells[wrap(y, self.height)][wrap(x, self.width)]

    def next_state(self, x, y):
        """State of the cell at the next generation under B3/S23."""
        active = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            if self.is_active(x + dx, y + dy):
                active += 1
        # 3 neighbours: on, 2 neighbours: keep current state, otherwise: off
        return active == 3 or (active == 2 and self.is_active(x, y))

    def live_count(self):
        return sum(sum(row) for row in self._cells)

    def live_cells(self):
        """Sorted (x, y) coordinates of every live cell."""
        return sorted((x, y) for y, row in enumerate(self._cells)
                      for x, alive in enumerate(row) if alive)


def _positive_int(n):
    return isinstance(n, int) and not isinstance(n, bool) and n > 0
