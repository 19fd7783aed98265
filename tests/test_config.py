import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.core.config import MazeConfig, ConfigError, INSTANT, parse_steps
from perfect_maze.core.grid import Grid
from perfect_maze.algo.registry import create_generator
from perfect_maze.algo.backtracker import BacktrackerGenerator
from perfect_maze.algo.growing_tree import GrowingTreeGenerator, RestartPolicy
from perfect_maze.algo.kruskal import KruskalGenerator, FisherYatesShuffle

class TestConfig(unittest.TestCase):
    def test_defaults(self):
        config = MazeConfig()
        self.assertEqual((config.width, config.height), (20, 20))
        self.assertEqual(config.algo, "backtracker")
        self.assertEqual(config.steps, 1)
        self.assertEqual(config.cell_count, 400)

    def test_aliases(self):
        self.assertEqual(MazeConfig(algo="easy").algo, "backtracker")
        self.assertEqual(MazeConfig(algo="medium").algo, "growing-tree")
        self.assertEqual(MazeConfig(algo="hard").algo, "kruskal")

    def test_immutable(self):
        config = MazeConfig()
        with self.assertRaises(AttributeError):
            config.width = 5

    def test_invalid(self):
        bad = [
            dict(width=0),
            dict(height=-3),
            dict(width="10"),
            dict(algo="prim"),
            dict(steps=0),
            dict(steps="fast"),
            dict(shuffle="random"),
            dict(restart="never"),
        ]
        for kwargs in bad:
            with self.assertRaises(ConfigError, msg=str(kwargs)):
                MazeConfig(**kwargs)

    def test_steps(self):
        self.assertIs(parse_steps("instant"), INSTANT)
        self.assertIs(parse_steps("INSTANT"), INSTANT)
        self.assertEqual(parse_steps("25"), 25)
        self.assertIs(MazeConfig(steps="instant").steps, INSTANT)

class TestRegistry(unittest.TestCase):
    def test_selects_generator(self):
        grid = Grid(4, 4)
        self.assertIsInstance(create_generator(grid, MazeConfig(4, 4, algo="easy")), BacktrackerGenerator)

        grid = Grid(4, 4)
        gen = create_generator(grid, MazeConfig(4, 4, algo="medium", restart="hunt"))
        self.assertIsInstance(gen, GrowingTreeGenerator)
        self.assertIs(gen.restart, RestartPolicy.HUNT)

        grid = Grid(4, 4)
        gen = create_generator(grid, MazeConfig(4, 4, algo="hard", shuffle="fisher-yates"))
        self.assertIsInstance(gen, KruskalGenerator)
        self.assertIsInstance(gen.shuffle, FisherYatesShuffle)

    def test_dimension_mismatch(self):
        with self.assertRaises(ConfigError):
            create_generator(Grid(3, 3), MazeConfig(4, 4))

    def test_seed_is_replayable(self):
        config = MazeConfig(8, 8, algo="kruskal", seed=99)
        grid1 = Grid.from_config(config)
        create_generator(grid1, config).run_all()
        grid2 = Grid.from_config(config)
        create_generator(grid2, config).run_all()
        self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())

if __name__ == '__main__':
    unittest.main()
