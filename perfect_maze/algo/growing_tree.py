import logging
from enum import Enum
from typing import Iterator, Optional, Tuple
from perfect_maze.algo.base import Generator
from perfect_maze.core.grid import Grid, VISITED
from perfect_maze.core.rng import RandomSource

logger = logging.getLogger(__name__)

class RestartPolicy(Enum):
    """
    What happens when the walk dead-ends.

    LEGACY: first unvisited cell (row-major) with an unvisited neighbour
        becomes the anchor; it links to that neighbour but is itself left
        unvisited. The result can strand cells or close a loop, so it is
        not guaranteed to be a perfect maze.
    MARK_ANCHOR: as LEGACY, but the anchor is marked visited. The result
        is acyclic but can be a forest.
    HUNT: hunt-and-kill. First unvisited cell with a visited neighbour is
        linked to that neighbour and the walk resumes from it. Always a
        perfect maze.
    """
    LEGACY = "legacy"
    MARK_ANCHOR = "mark-anchor"
    HUNT = "hunt"


class GrowingTreeGenerator(Generator):
    """
    Random walk that restarts from a scanned cell instead of backtracking
    ("medium"). Runs to completion in a single call.
    """

    def __init__(self, grid: Grid, rng: Optional[RandomSource] = None, seed: int = None,
                 restart: RestartPolicy = RestartPolicy.LEGACY):
        super().__init__(grid, rng=rng, seed=seed)
        self.restart = RestartPolicy(restart)
        self.restart_count = 0
        self.current: Optional[Tuple[int, int]] = None

    def _scan_anchor(self) -> Optional[Tuple[int, int]]:
        """Row-major scan for the first unvisited cell with an unvisited neighbour."""
        grid = self.grid
        for y in range(grid.height):
            for x in range(grid.width):
                if grid.cells[y * grid.width + x] & VISITED:
                    continue
                if grid.unvisited_neighbors(x, y):
                    return (x, y)
        return None

    def _hunt(self) -> bool:
        """Links the first unvisited cell bordering the visited region. Returns False if none."""
        grid = self.grid
        for y in range(grid.height):
            for x in range(grid.width):
                if grid.cells[y * grid.width + x] & VISITED:
                    continue
                visited = [
                    (nx, ny, dir_bit)
                    for nx, ny, dir_bit in grid.get_neighbors(x, y)
                    if grid.is_visited(nx, ny)
                ]
                if visited:
                    _, _, dir_bit = self.choose(visited)
                    grid.carve_path(x, y, dir_bit)
                    grid.set_visited(x, y)
                    self.current = (x, y)
                    return True
        return False

    def _restart(self) -> bool:
        if self.restart is RestartPolicy.HUNT:
            return self._hunt()

        anchor = self._scan_anchor()
        if anchor is None:
            return False

        ax, ay = anchor
        if self.restart is RestartPolicy.MARK_ANCHOR:
            self.grid.set_visited(ax, ay)

        nx, ny, dir_bit = self.choose(self.grid.unvisited_neighbors(ax, ay))
        self.grid.carve_path(ax, ay, dir_bit)
        self.grid.set_visited(nx, ny)
        self.current = (nx, ny)
        return True

    def run(self) -> Iterator[str]:
        if self.complete:
            yield "Done"
            return

        grid = self.grid
        start = self.rng.next_in_range(grid.width * grid.height)
        self.current = grid.get_coords(start)
        grid.set_visited(*self.current)

        while True:
            cx, cy = self.current
            neighbors = grid.unvisited_neighbors(cx, cy)
            if neighbors:
                nx, ny, dir_bit = self.choose(neighbors)
                grid.carve_path(cx, cy, dir_bit)
                grid.set_visited(nx, ny)
                self.current = (nx, ny)
            elif self._restart():
                self.restart_count += 1
                logger.debug(f"Restart ({self.restart.value}), walk resumes at {self.current}")
            else:
                break

            self.step_count += 1
            if self.step_count % 100 == 0:
                yield f"Walking... Restarts: {self.restart_count}"

        self.complete = True
        logger.debug(f"Growing tree finished after {self.step_count} steps, "
                     f"{self.restart_count} restarts")
        yield "Done"
