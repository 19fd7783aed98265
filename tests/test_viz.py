import unittest
import sys
import os
import shutil

# No real display needed
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pygame

from perfect_maze.core.grid import Grid
from perfect_maze.core.rng import SequenceRandom
from perfect_maze.algo.backtracker import BacktrackerGenerator
from perfect_maze.algo.kruskal import KruskalGenerator
from perfect_maze.viz.renderer import (
    Renderer, draw_maze, fit_cell_size, COLOR_BG, COLOR_WALL, COLOR_START, COLOR_END
)
from perfect_maze.viz.recorder import VideoRecorder, save_snapshot, surface_to_frame

class TestDrawing(unittest.TestCase):
    def test_fit_cell_size(self):
        self.assertEqual(fit_cell_size(Grid(20, 20), 1080, 1080), 54)
        self.assertEqual(fit_cell_size(Grid(40, 20), 1080, 1080), 27)
        self.assertEqual(fit_cell_size(Grid(5000, 1), 1080, 1080), 1)

    def test_walls_and_markers(self):
        grid = Grid(3, 2)
        grid.open_passage(0, 0, 1, 0)
        cs = 10
        surface = pygame.Surface((3 * cs + 1, 2 * cs + 1))
        draw_maze(surface, grid, cs)

        def color(x, y):
            return tuple(surface.get_at((x, y)))[:3]

        self.assertEqual(color(1, 1), COLOR_START)
        self.assertEqual(color(25, 15), COLOR_END)
        # Closed wall between (1,0) and (2,0) at x=20
        self.assertEqual(color(20, 5), COLOR_WALL)
        # Open passage between (0,0) and (1,0) at x=10, just right of the start marker
        self.assertEqual(color(10, 5), COLOR_BG)
        # Closed wall between (1,0) and (1,1)
        self.assertEqual(color(15, 10), COLOR_WALL)

class TestRecorder(unittest.TestCase):
    def setUp(self):
        os.makedirs("test_out", exist_ok=True)

    def tearDown(self):
        shutil.rmtree("test_out", ignore_errors=True)

    def test_snapshot(self):
        grid = Grid(4, 4)
        KruskalGenerator(grid, rng=SequenceRandom([1, 2, 3])).run_all()
        surface = pygame.Surface((81, 81))
        draw_maze(surface, grid, 20)

        path = save_snapshot(surface, "test_out/shots/maze.png")
        self.assertTrue(os.path.exists(path))
        loaded = pygame.image.load(path)
        self.assertEqual(loaded.get_size(), (81, 81))

    def test_frame_is_bgr(self):
        surface = pygame.Surface((4, 2))
        surface.fill((255, 0, 0))
        frame = surface_to_frame(surface)
        self.assertEqual(frame.shape, (2, 4, 3))
        self.assertEqual(tuple(frame[0, 0]), (0, 0, 255))

    def test_inactive_recorder_is_noop(self):
        rec = VideoRecorder(active=False)
        rec.capture_frame(pygame.Surface((4, 4)))
        rec.stop()
        self.assertEqual(rec.frame_count, 0)
        self.assertIsNone(rec.output_file)

class TestRenderer(unittest.TestCase):
    def test_advance_steps_per_tick(self):
        grid = Grid(2, 2)
        gen = BacktrackerGenerator(grid, rng=SequenceRandom([0]))
        renderer = Renderer(grid, generator=gen, steps=3)

        renderer.advance()
        self.assertEqual(grid.count_passages(), 3)
        self.assertFalse(renderer.gen_finished)
        renderer.advance()
        renderer.advance()
        self.assertTrue(renderer.gen_finished)

    def test_advance_runs_synchronous_generator(self):
        grid = Grid(5, 5)
        renderer = Renderer(grid, generator=KruskalGenerator(grid, seed=4))
        renderer.advance()
        self.assertTrue(renderer.gen_finished)
        self.assertEqual(grid.count_passages(), 24)

    def test_no_generator(self):
        grid = Grid(2, 2)
        renderer = Renderer(grid)
        self.assertTrue(renderer.gen_finished)
        renderer.advance()

if __name__ == '__main__':
    unittest.main()
