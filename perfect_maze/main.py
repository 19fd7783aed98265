import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'perfect_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.core.config import (
    MazeConfig, ConfigError, parse_steps, ALGORITHMS, ALGO_ALIASES, SHUFFLES, RESTARTS, DEFAULT_CELLS
)

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Perfect Maze: spanning-tree maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=DEFAULT_CELLS, help="Maze Width (cells)")
    gen_parser.add_argument("--height", type=int, default=DEFAULT_CELLS, help="Maze Height (cells)")
    gen_parser.add_argument("--cells", "-c", type=int, nargs=2, metavar=("X", "Y"),
                            help="Number of cells along X and Y (overrides --width/--height)")
    gen_parser.add_argument("--algo", type=str, default="backtracker",
                            choices=list(ALGORITHMS) + list(ALGO_ALIASES), help="Generation Algorithm")
    gen_parser.add_argument("--steps", "-s", type=str, default="1",
                            help="Backtracker steps per frame, or 'instant' to generate at once")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--shuffle", type=str, default="naive", choices=SHUFFLES,
                            help="Kruskal edge shuffle")
    gen_parser.add_argument("--restart", type=str, default="legacy", choices=RESTARTS,
                            help="Growing-tree restart policy")
    gen_parser.add_argument("--visual", action="store_true", help="Show visualization")
    gen_parser.add_argument("--snapshot", type=str, help="Save the finished maze as a PNG")
    gen_parser.add_argument("--record", action="store_true", help="Record generation video")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time every generator")
    bench_parser.add_argument("--size", type=int, default=200, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser

def config_from_args(args) -> MazeConfig:
    width, height = args.cells if args.cells else (args.width, args.height)
    return MazeConfig(
        width=width,
        height=height,
        algo=args.algo,
        steps=parse_steps(args.steps),
        seed=args.seed,
        shuffle=args.shuffle,
        restart=args.restart,
    )

def print_stats(stats):
    print(f"Cells: {stats['cells']}")
    print(f"Passages: {stats['passages']}")
    print(f"Components: {stats['components']}")
    print(f"Perfect: {'yes' if stats['perfect'] else 'no'}")
    print(f"Dead ends: {stats['dead_ends']} ({stats['dead_end_percent']:.1f}%)")

def generate(config: MazeConfig, args, logger):
    from perfect_maze.core.grid import Grid
    from perfect_maze.core.analysis import MazeAnalyzer
    from perfect_maze.algo.registry import create_generator

    logger.info(f"Generating {config.width}x{config.height} maze with {config.algo.upper()}...")
    grid = Grid.from_config(config)
    generator = create_generator(grid, config)

    if args.visual or args.record:
        logger.info("Visual mode enabled - Opening window...")
        from perfect_maze.viz.renderer import Renderer
        renderer = Renderer(grid, generator=generator, steps=config.steps,
                            record=args.record, snapshot=args.snapshot)

        # Auto-Name Recording
        if args.record:
            import datetime
            if not os.path.exists("recordings"):
                os.makedirs("recordings")

            ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            fname = f"gen_{config.algo}_{config.width}x{config.height}_{ts}.mp4"

            renderer.recorder.output_file = os.path.join("recordings", fname)
            logger.info(f"Recording video to {renderer.recorder.output_file}")

        renderer.init_window()
        renderer.run_loop()
    else:
        logger.info("Headless generation...")
        generator.run_all()

        if args.snapshot:
            import pygame
            from perfect_maze.viz.renderer import draw_maze
            from perfect_maze.viz.recorder import save_snapshot
            cell_size = 20
            surface = pygame.Surface((grid.width * cell_size + 1, grid.height * cell_size + 1))
            draw_maze(surface, grid, cell_size)
            save_snapshot(surface, args.snapshot)

    stats = MazeAnalyzer.calculate_stats(grid)
    logger.debug(f"Stats: {stats}")
    print_stats(stats)
    return grid

def benchmark(size: int, seed: int, logger):
    import time
    from perfect_maze.core.grid import Grid
    from perfect_maze.core.analysis import MazeAnalyzer
    from perfect_maze.algo.registry import create_generator

    logger.info(f"Running Generator Benchmark Suite (Size: {size}x{size})...")

    print(f"\n{'ALGORITHM':<20} | {'TIME (s)':<10} | {'PASSAGES':<10} | {'PERFECT':<10}")
    print("-" * 60)

    results = []
    for algo in ALGORITHMS:
        config = MazeConfig(width=size, height=size, algo=algo, seed=seed)
        grid = Grid.from_config(config)
        generator = create_generator(grid, config)

        t_start = time.time()
        generator.run_all()
        duration = time.time() - t_start

        passages = grid.count_passages()
        perfect = MazeAnalyzer.is_perfect(grid)
        results.append((algo, duration, passages, perfect))
        print(f"{algo:<20} | {duration:<10.4f} | {passages:<10} | {str(perfect):<10}")

    return results

def run(argv=None):
    """Parses argv and runs the command. Returns the command result (grid or benchmark rows)."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("perfect_maze")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        try:
            config = config_from_args(args)
        except ConfigError as e:
            parser.error(str(e))
        return generate(config, args, logger)

    elif args.command == "benchmark":
        if args.size < 1:
            parser.error(f"--size must be >= 1, got {args.size}")
        return benchmark(args.size, args.seed, logger)

def main(argv=None):
    run(argv)

if __name__ == "__main__":
    main()
