#!/usr/bin/env python3
"""
Terminal driver for the toroidal Game of Life.

Usage:
    game-of-life run                            # random soup, default settings
    game-of-life run --pattern glider --generations 20
    game-of-life run --config life_config.toml --quiet
    game-of-life verify --rows 64 --cols 64     # compare against numpy reference
"""

import argparse
import random
import sys

from loguru import logger

from .config import ConfigError, Settings, load_settings
from .grid import Grid
from .patterns import centered_origin, get_pattern, place_pattern
from .verify import verify


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=level)
    if log_file:
        logger.add(log_file, rotation="10 MB", retention="30 days", level="DEBUG")


def build_grid(settings: Settings) -> Grid:
    if settings.pattern:
        grid = Grid(settings.rows, settings.cols)
        pattern = get_pattern(settings.pattern)
        row, col = centered_origin(grid, pattern)
        place_pattern(grid, pattern, row, col)
        logger.info(f"Seeded '{settings.pattern}' at ({row}, {col})")
    else:
        grid = Grid.random(
            settings.rows, settings.cols, settings.density, rng=random.Random(settings.seed)
        )
        logger.info(f"Seeded random grid: density={settings.density}, seed={settings.seed}")
    return grid


def run(settings: Settings, quiet: bool = False) -> Grid:
    grid = build_grid(settings)
    if not quiet:
        print(f"Generation 0:\n{grid}", end="")
    for gen in range(1, settings.generations + 1):
        grid.update()
        logger.info(f"Generation {gen}: population={grid.population}")
        if not quiet:
            print(f"Generation {gen}:\n{grid}", end="")
    if quiet:
        print(grid, end="")
    return grid


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="game-of-life",
        description="Conway's Game of Life on a toroidal grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    run_parser = sub.add_parser("run", help="Seed a grid and advance it")
    run_parser.add_argument("--config", "-c", help="TOML settings file")
    run_parser.add_argument("--rows", type=int, help="Grid rows")
    run_parser.add_argument("--cols", type=int, help="Grid columns")
    run_parser.add_argument("--generations", "-g", type=int, help="Number of generations")
    run_parser.add_argument("--seed", type=int, help="Random seed for the initial soup")
    run_parser.add_argument("--density", type=float, help="Live-cell probability for the soup")
    run_parser.add_argument("--pattern", "-p", help="Named seed pattern instead of a soup")
    run_parser.add_argument("--log-level", help="stderr log level (default: INFO)")
    run_parser.add_argument(
        "--quiet", "-q", action="store_true", help="Print only the final generation"
    )

    verify_parser = sub.add_parser("verify", help="Check the grid against the numpy reference")
    verify_parser.add_argument("--rows", type=int, default=64, help="Grid rows (default: 64)")
    verify_parser.add_argument("--cols", type=int, default=64, help="Grid columns (default: 64)")
    verify_parser.add_argument(
        "--generations", type=int, default=100, help="Number of generations (default: 100)"
    )
    verify_parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = make_parser().parse_args(argv)

    if args.command == "verify":
        setup_logging()
        try:
            result = verify(args.rows, args.cols, args.generations, args.seed)
        except ValueError as e:
            logger.error(str(e))
            return 2
        return 0 if result.matches else 1

    try:
        settings = load_settings(
            args.config,
            rows=args.rows,
            cols=args.cols,
            generations=args.generations,
            seed=args.seed,
            density=args.density,
            pattern=args.pattern,
            log_level=args.log_level,
        )
    except ConfigError as e:
        setup_logging()
        logger.error(str(e))
        return 2

    setup_logging(settings.log_level, settings.log_file)
    try:
        run(settings, quiet=args.quiet)
    except KeyError as e:
        logger.error(e.args[0])
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
