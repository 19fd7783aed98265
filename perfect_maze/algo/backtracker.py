import logging
from typing import Iterator, List, Optional, Tuple
from perfect_maze.algo.base import Generator
from perfect_maze.core.config import INSTANT
from perfect_maze.core.grid import Grid
from perfect_maze.core.rng import RandomSource

logger = logging.getLogger(__name__)

class BacktrackerGenerator(Generator):
    """
    Randomized depth-first backtracker ("easy").

    Resumable: each step() either carves into one unvisited neighbour,
    pops the stack once, or detects completion. run_steps(n) is called
    once per frame by the renderer for the animated mode.
    """
    steppable = True

    def __init__(self, grid: Grid, rng: Optional[RandomSource] = None, seed: int = None):
        super().__init__(grid, rng=rng, seed=seed)

        # Start at (0,0), empty stack
        self.current: Tuple[int, int] = (0, 0)
        self.stack: List[Tuple[int, int]] = []
        self.grid.set_visited(0, 0)
        self.visit_count = 1

    def step(self) -> bool:
        """Performs one step. Returns True while more steps remain."""
        if self.complete:
            return False

        cx, cy = self.current
        neighbors = self.grid.unvisited_neighbors(cx, cy)

        if neighbors:
            nx, ny, dir_bit = self.choose(neighbors)
            self.grid.set_visited(nx, ny)
            self.visit_count += 1
            self.stack.append(self.current)
            self.grid.carve_path(cx, cy, dir_bit)
            self.current = (nx, ny)
        elif self.stack:
            # Backtrack
            self.current = self.stack.pop()
        else:
            self.complete = True
            logger.debug(f"Backtracker finished {self.grid.width}x{self.grid.height} "
                         f"after {self.step_count} steps")
            return False

        self.step_count += 1
        return True

    def run_steps(self, n: Optional[int]) -> bool:
        """
        Calls step() up to n times (INSTANT: until done).
        Returns whether generation is now complete.
        """
        if n is INSTANT:
            while self.step():
                pass
            return self.complete

        for _ in range(n):
            if not self.step():
                break
        return self.complete

    def run(self) -> Iterator[str]:
        while self.step():
            # Yield every N steps to keep UI responsive without spamming
            if self.step_count % 100 == 0:
                yield f"Carving... Stack: {len(self.stack)}"
        yield "Done"
