from abc import ABC, abstractmethod
from typing import Iterator, Optional
from perfect_maze.core.grid import Grid
from perfect_maze.core.rng import RandomSource, make_random_source

class Generator(ABC):
    # Steppable generators advance a bounded number of steps per tick;
    # the rest run to completion in one call.
    steppable = False

    def __init__(self, grid: Grid, rng: Optional[RandomSource] = None, seed: int = None):
        self.grid = grid
        self.seed = seed
        self.rng = rng if rng is not None else make_random_source(seed)
        self.step_count = 0
        self.complete = False

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self) -> bool:
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
        return self.complete

    def choose(self, options):
        return options[self.rng.next_in_range(len(options))]
