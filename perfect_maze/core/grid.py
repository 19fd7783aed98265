from array import array
from typing import Dict, Iterator, List, NamedTuple, Tuple

# Bitmask Constants
UP    = 0b00000001
DOWN  = 0b00000010
LEFT  = 0b00000100
RIGHT = 0b00001000

# Flags
VISITED = 0b00010000

ALL_WALLS = UP | DOWN | LEFT | RIGHT


class InvalidGridError(ValueError):
    pass


class GridAllocationError(MemoryError):
    pass


class Cell(NamedTuple):
    """Read-only snapshot of one cell, for renderers and tests."""
    x: int
    y: int
    visited: bool
    flags: int

    def has_wall(self, direction: int) -> bool:
        return (self.flags & direction) != 0

    @property
    def walls(self) -> Dict[int, bool]:
        return {d: (self.flags & d) != 0 for d in Grid.DIRECTIONS}


class Grid:
    UP = UP
    DOWN = DOWN
    LEFT = LEFT
    RIGHT = RIGHT
    VISITED = VISITED
    ALL_WALLS = ALL_WALLS

    # Neighbour order used by every generator
    DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

    # Direction Helpers
    DX = {UP: 0, DOWN: 0, LEFT: -1, RIGHT: 1}
    DY = {UP: -1, DOWN: 1, LEFT: 0, RIGHT: 0}
    OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}
    NAMES = {UP: "UP", DOWN: "DOWN", LEFT: "LEFT", RIGHT: "RIGHT"}

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidGridError(f"Grid {name} must be an integer, got {value!r}")
            if value < 1:
                raise InvalidGridError(f"Grid {name} must be >= 1, got {value}")

        self.width = width
        self.height = height
        # One byte per cell, all walls present, unvisited
        try:
            self.cells = array('B', [ALL_WALLS]) * (width * height)
        except MemoryError as e:
            raise GridAllocationError(
                f"Cannot allocate a {width}x{height} grid ({width * height:,} cells)"
            ) from e

    @classmethod
    def from_config(cls, config) -> "Grid":
        return cls(config.width, config.height)

    def __len__(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if self.in_bounds(x, y):
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get_coords(self, idx: int) -> Tuple[int, int]:
        if not 0 <= idx < self.width * self.height:
            raise IndexError(f"Cell index {idx} out of bounds")
        return idx % self.width, idx // self.width

    def carve_path(self, x1: int, y1: int, dir_bit: int):
        """
        Removes the wall between cell (x1,y1) and its neighbour in 'dir_bit',
        and the OPPOSITE wall from the neighbour.
        """
        if dir_bit not in self.OPPOSITE:
            raise ValueError(f"Unknown direction {dir_bit!r}")

        idx1 = self.get_index(x1, y1)
        x2, y2 = x1 + self.DX[dir_bit], y1 + self.DY[dir_bit]
        if not self.in_bounds(x2, y2):
            raise IndexError(
                f"Cannot carve {self.NAMES[dir_bit]} from ({x1}, {y1}): neighbour is outside the grid"
            )
        idx2 = y2 * self.width + x2

        self.cells[idx1] &= ~dir_bit
        self.cells[idx2] &= ~self.OPPOSITE[dir_bit]

    def direction_between(self, x1: int, y1: int, x2: int, y2: int) -> int:
        dx, dy = x2 - x1, y2 - y1
        for dir_bit in self.DIRECTIONS:
            if self.DX[dir_bit] == dx and self.DY[dir_bit] == dy:
                return dir_bit
        raise ValueError(f"Cells ({x1}, {y1}) and ({x2}, {y2}) are not 4-adjacent")

    def open_passage(self, x1: int, y1: int, x2: int, y2: int):
        """Clears the wall pair between two 4-adjacent cells."""
        self.get_index(x2, y2)
        self.carve_path(x1, y1, self.direction_between(x1, y1, x2, y2))

    def has_wall(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[self.get_index(x, y)] & dir_bit) != 0

    # Renderer-facing alias
    wall_state = has_wall

    def set_visited(self, x: int, y: int, visited: bool = True):
        idx = self.get_index(x, y)
        if visited:
            self.cells[idx] |= VISITED
        else:
            self.cells[idx] &= ~VISITED

    def is_visited(self, x: int, y: int) -> bool:
        return (self.cells[self.get_index(x, y)] & VISITED) != 0

    def visited_count(self) -> int:
        return sum(1 for val in self.cells if val & VISITED)

    def cell(self, x: int, y: int) -> Cell:
        val = self.cells[self.get_index(x, y)]
        return Cell(x, y, (val & VISITED) != 0, val & ALL_WALLS)

    def iter_cells(self) -> Iterator[Cell]:
        """Row-major walk over all cells."""
        for y in range(self.height):
            for x in range(self.width):
                val = self.cells[y * self.width + x]
                yield Cell(x, y, (val & VISITED) != 0, val & ALL_WALLS)

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all in-bounds neighbours,
        in UP, DOWN, LEFT, RIGHT order. Does NOT check walls.
        """
        if y > 0:
            yield (x, y - 1, UP)
        if y < self.height - 1:
            yield (x, y + 1, DOWN)
        if x > 0:
            yield (x - 1, y, LEFT)
        if x < self.width - 1:
            yield (x + 1, y, RIGHT)

    def unvisited_neighbors(self, x: int, y: int) -> List[Tuple[int, int, int]]:
        return [
            (nx, ny, dir_bit)
            for nx, ny, dir_bit in self.get_neighbors(x, y)
            if not self.cells[ny * self.width + nx] & VISITED
        ]

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbours that are NOT blocked by a wall.
        """
        val = self.cells[self.get_index(x, y)]
        for nx, ny, dir_bit in self.get_neighbors(x, y):
            if not val & dir_bit:
                yield (nx, ny)

    def iter_passages(self) -> Iterator[Tuple[Tuple[int, int], Tuple[int, int]]]:
        """Yields each open passage once, as ((x, y), (x+1, y)) or ((x, y), (x, y+1))."""
        for y in range(self.height):
            for x in range(self.width):
                val = self.cells[y * self.width + x]
                if x < self.width - 1 and not val & RIGHT:
                    yield (x, y), (x + 1, y)
                if y < self.height - 1 and not val & DOWN:
                    yield (x, y), (x, y + 1)

    def count_passages(self) -> int:
        return sum(1 for _ in self.iter_passages())
