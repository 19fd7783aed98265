import logging
from typing import Iterator, List, Optional, Tuple
from perfect_maze.algo.base import Generator
from perfect_maze.core.disjoint_set import DisjointSet
from perfect_maze.core.grid import Grid
from perfect_maze.core.rng import RandomSource

logger = logging.getLogger(__name__)

Edge = Tuple[Tuple[int, int], Tuple[int, int]]


class NaiveShuffle:
    """
    Swaps each position with one drawn from the whole list.
    Not uniform over permutations; the maze is still a spanning tree.
    """
    name = "naive"

    def __call__(self, items: List, rng: RandomSource):
        count = len(items)
        for i in range(count):
            j = rng.next_in_range(count)
            items[i], items[j] = items[j], items[i]


class FisherYatesShuffle:
    """Swaps each position with one drawn from the unshuffled tail."""
    name = "fisher-yates"

    def __call__(self, items: List, rng: RandomSource):
        count = len(items)
        for i in range(count):
            j = i + rng.next_in_range(count - i)
            items[i], items[j] = items[j], items[i]


SHUFFLES = {s.name: s for s in (NaiveShuffle, FisherYatesShuffle)}


def build_edges(width: int, height: int) -> List[Edge]:
    """Every horizontal and vertical adjacency once: 2*w*h - w - h edges."""
    edges: List[Edge] = []
    for x in range(width):
        for y in range(height):
            if x > 0:
                edges.append(((x, y), (x - 1, y)))
            if y > 0:
                edges.append(((x, y), (x, y - 1)))
    return edges


class KruskalGenerator(Generator):
    """Randomized Kruskal ("hard"). Runs to completion in a single call."""

    def __init__(self, grid: Grid, rng: Optional[RandomSource] = None, seed: int = None,
                 shuffle=None):
        super().__init__(grid, rng=rng, seed=seed)
        if shuffle is None:
            shuffle = NaiveShuffle()
        elif isinstance(shuffle, str):
            if shuffle not in SHUFFLES:
                raise ValueError(f"Unknown shuffle {shuffle!r} (choose from {', '.join(SHUFFLES)})")
            shuffle = SHUFFLES[shuffle]()
        self.shuffle = shuffle
        self.union_count = 0
        self.edges: List[Edge] = []

    def run(self) -> Iterator[str]:
        # One pass only; a finished grid must not be merged again
        if self.complete:
            yield "Done"
            return

        grid = self.grid
        self.edges = build_edges(grid.width, grid.height)
        self.shuffle(self.edges, self.rng)
        logger.debug(f"Shuffled {len(self.edges)} edges ({type(self.shuffle).__name__})")

        sets = DisjointSet(grid.width * grid.height)

        for (x1, y1), (x2, y2) in self.edges:
            # Different sets -> no cycle
            if sets.union(grid.get_index(x1, y1), grid.get_index(x2, y2)):
                grid.open_passage(x1, y1, x2, y2)
                grid.set_visited(x1, y1)
                grid.set_visited(x2, y2)
                self.union_count += 1

            self.step_count += 1
            if self.step_count % 100 == 0:
                yield f"Merging... Sets: {sets.set_count}"

        self.complete = True
        logger.debug(f"Kruskal finished with {self.union_count} unions")
        yield "Done"
