import logging
import pygame
from perfect_maze.core.grid import Grid
from perfect_maze.viz.recorder import VideoRecorder, save_snapshot

logger = logging.getLogger(__name__)

COLOR_BG = (255, 255, 255)
COLOR_WALL = (0, 0, 0)
COLOR_START = (0, 255, 0)
COLOR_END = (255, 0, 0)


def fit_cell_size(grid: Grid, screen_width: int, screen_height: int) -> int:
    """Largest whole-pixel cell that fits the grid on screen."""
    return max(1, int(min(screen_width / grid.width, screen_height / grid.height)))


def draw_maze(surface: pygame.Surface, grid: Grid, cell_size: int):
    """Draws walls plus the start (0,0) and end (w-1,h-1) markers. Needs no window."""
    surface.fill(COLOR_BG)

    for cell in grid.iter_cells():
        x1 = cell.x * cell_size
        y1 = cell.y * cell_size
        x2 = x1 + cell_size
        y2 = y1 + cell_size

        if cell.has_wall(Grid.UP):
            pygame.draw.line(surface, COLOR_WALL, (x1, y1), (x2, y1))
        if cell.has_wall(Grid.DOWN):
            pygame.draw.line(surface, COLOR_WALL, (x1, y2), (x2, y2))
        if cell.has_wall(Grid.LEFT):
            pygame.draw.line(surface, COLOR_WALL, (x1, y1), (x1, y2))
        if cell.has_wall(Grid.RIGHT):
            pygame.draw.line(surface, COLOR_WALL, (x2, y1), (x2, y2))

    pygame.draw.rect(surface, COLOR_START, (0, 0, cell_size, cell_size))
    pygame.draw.rect(surface, COLOR_END,
                     ((grid.width - 1) * cell_size, (grid.height - 1) * cell_size,
                      cell_size, cell_size))


class Renderer:
    def __init__(self, grid: Grid, generator=None, steps=1, width=1080, height=1080,
                 record=False, snapshot=None):
        self.grid = grid
        self.generator = generator
        self.steps = steps
        self.screen_width = width
        self.screen_height = height
        self.cell_size = fit_cell_size(grid, width, height)
        self.snapshot = snapshot

        self.recorder = VideoRecorder(active=record)

        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator is None

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height))
        self.clock = pygame.time.Clock()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

    def advance(self):
        """One tick of generation: a step budget for steppable generators, everything otherwise."""
        if self.gen_finished:
            return
        if self.generator.steppable:
            self.gen_finished = self.generator.run_steps(self.steps)
        else:
            self.gen_finished = self.generator.run_all()

        if self.gen_finished:
            logger.info("Generation complete")

    def draw(self):
        draw_maze(self.surface, self.grid, self.cell_size)

    def run_loop(self):
        # Synchronous generators finish before the first frame
        if self.generator and not self.generator.steppable:
            self.advance()

        snapshot_taken = False
        recorded_final = False
        while self.running:
            self.handle_input()
            self.advance()

            self.draw()
            pygame.display.flip()

            # Record the animation up to and including the finished maze
            if self.recorder.active and not recorded_final:
                self.recorder.capture_frame(self.surface)
                recorded_final = self.gen_finished

            if self.snapshot and self.gen_finished and not snapshot_taken:
                save_snapshot(self.surface, self.snapshot)
                snapshot_taken = True

            self.clock.tick(60)

        self.recorder.stop()
        pygame.quit()
