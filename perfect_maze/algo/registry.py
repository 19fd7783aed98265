from typing import Optional
from perfect_maze.algo.base import Generator
from perfect_maze.core.config import MazeConfig, ConfigError, ALGO_ALIASES
from perfect_maze.core.grid import Grid
from perfect_maze.core.rng import RandomSource, make_random_source

def create_generator(grid: Grid, config: MazeConfig, rng: Optional[RandomSource] = None) -> Generator:
    if grid.width != config.width or grid.height != config.height:
        raise ConfigError(
            f"Grid is {grid.width}x{grid.height} but config asks for {config.width}x{config.height}"
        )
    if rng is None:
        rng = make_random_source(config.seed)

    algo = ALGO_ALIASES.get(config.algo, config.algo)
    if algo == "backtracker":
        from perfect_maze.algo.backtracker import BacktrackerGenerator
        return BacktrackerGenerator(grid, rng=rng, seed=config.seed)
    elif algo == "growing-tree":
        from perfect_maze.algo.growing_tree import GrowingTreeGenerator, RestartPolicy
        return GrowingTreeGenerator(grid, rng=rng, seed=config.seed,
                                    restart=RestartPolicy(config.restart))
    elif algo == "kruskal":
        from perfect_maze.algo.kruskal import KruskalGenerator
        return KruskalGenerator(grid, rng=rng, seed=config.seed, shuffle=config.shuffle)

    raise ConfigError(f"Unknown algorithm {config.algo!r}")
