"""Command-line interface for the bit-packed Game of Life."""

import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from ..constants import (
    DEFAULT_DELAY_MS,
    DEFAULT_HEIGHT,
    DEFAULT_OFF_SYMBOL,
    DEFAULT_ON_SYMBOL,
    DEFAULT_WIDTH,
)
from ..core.errors import GridError
from ..core.grid import BoundaryPolicy
from ..core.patterns import PatternLibrary
from ..core.session import GameSession
from .animation import ConsoleTerminal, run_animation
from .demos import create_pattern_session, create_random_session
from .render import RenderOptions

logger = logging.getLogger(__name__)

DEMOS = {
    "random": None,
    "glider-gun": "Gosper Glider Gun",
}

DEMO_POLICIES = {
    "random": BoundaryPolicy.TORUS,
    "glider-gun": BoundaryPolicy.ALL_OFF,
}


class BitLifeCLI:
    """Builds sessions from parsed arguments and runs them in the terminal."""

    def __init__(self) -> None:
        self.pattern_library = PatternLibrary()

    def build_session(self, args: argparse.Namespace) -> GameSession:
        """Create the session described by the arguments.

        A named pattern takes precedence over the demo and is centered unless
        an offset is given.

        Raises:
            GridError: If the grid cannot be created or the pattern does not fit
            KeyError: If the pattern is unknown
        """
        pattern_name = args.pattern or DEMOS[args.demo]
        if args.boundary:
            policy = BoundaryPolicy(args.boundary)
        elif args.pattern:
            policy = BoundaryPolicy.ALL_OFF
        else:
            policy = DEMO_POLICIES[args.demo]

        if pattern_name is None:
            rng = np.random.default_rng(args.seed)
            if args.verbose:
                print(f"Generating random {args.width}x{args.height} grid ({policy.value})")
            return create_random_session(args.width, args.height, policy, rng)

        offset_x, offset_y = args.pattern_x, args.pattern_y
        pattern = self.pattern_library.get_pattern(pattern_name)
        if args.pattern and pattern is not None:
            # Auto-center along any axis without an explicit offset
            rows, columns = pattern.get_size()
            if offset_x is None:
                offset_x = max(0, (args.width - rows) // 2)
            if offset_y is None:
                offset_y = max(0, (args.height - columns) // 2)

        # Demo patterns sit one cell in from the corner
        offset_x = 1 if offset_x is None else offset_x
        offset_y = 1 if offset_y is None else offset_y
        if args.verbose:
            print(f"Loading pattern '{pattern_name}' at ({offset_x}, {offset_y}) on {policy.value} grid")

        return create_pattern_session(
            pattern_name,
            args.width,
            args.height,
            policy,
            offset_x,
            offset_y,
            self.pattern_library,
        )

    def list_patterns(self) -> None:
        """List built-in patterns."""
        print("Available patterns:")
        for name in self.pattern_library.list_patterns():
            pattern = self.pattern_library.get_pattern(name)
            if pattern:
                rows, columns = pattern.get_size()
                print(f"  {name}: {rows}x{columns}, {len(pattern.cells)} cells")
                if pattern.description:
                    print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Watch Conway's Game of Life evolve in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random 20x40 torus, forever
  bitlife-cli

  # Gosper glider gun on a bounded grid
  bitlife-cli --demo glider-gun

  # Reproducible random start, 50 generations, no screen clearing
  bitlife-cli --seed 42 -n 50 --no-clear

  # Glider centered on a 10x10 torus
  bitlife-cli --pattern Glider -W 10 -H 10 -b torus
        """,
    )

    parser.add_argument("--demo", choices=sorted(DEMOS), default="random", help="Demo to run (default: random)")

    parser.add_argument("--pattern", type=str, help="Seed with a built-in pattern instead of the demo")

    parser.add_argument("--pattern-x", type=int, help="Row offset for pattern placement (default: centered)")

    parser.add_argument("--pattern-y", type=int, help="Column offset for pattern placement (default: centered)")

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=None, help="Number of rows (default: 20)")

    parser.add_argument("-H", "--height", type=int, default=None, help="Cells per row (default: 40)")

    parser.add_argument(
        "-b",
        "--boundary",
        choices=[policy.value for policy in BoundaryPolicy],
        help="Out-of-bounds rule (default: torus for the random demo, all-off for patterns and the glider gun)",
    )

    parser.add_argument("--seed", type=int, help="Random seed for reproducible grids")

    # Animation configuration
    parser.add_argument(
        "-d",
        "--delay",
        type=int,
        default=DEFAULT_DELAY_MS,
        help=f"Pause between generations in milliseconds (default: {DEFAULT_DELAY_MS})",
    )

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=0,
        help="Stop after this many generations (default: 0, run until interrupted)",
    )

    parser.add_argument(
        "--on", default=DEFAULT_ON_SYMBOL, help=f"Symbol for living cells (default: '{DEFAULT_ON_SYMBOL}')"
    )

    parser.add_argument(
        "--off", default=DEFAULT_OFF_SYMBOL, help=f"Symbol for dead cells (default: '{DEFAULT_OFF_SYMBOL}')"
    )

    parser.add_argument("--no-clear", action="store_true", help="Don't clear the screen between generations")

    # Output configuration
    parser.add_argument("--list-patterns", action="store_true", help="List all available patterns and exit")

    parser.add_argument("-v", "--verbose", action="store_true", help="Print detailed progress information")

    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Grid dimensions are left to the grid itself.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if len(args.on) != 1 or len(args.off) != 1:
        errors.append("Cell symbols must be single characters")

    if args.pattern_x is not None and args.pattern_x < 0:
        errors.append("Pattern X offset must be non-negative")

    if args.pattern_y is not None and args.pattern_y < 0:
        errors.append("Pattern Y offset must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def apply_defaults(args: argparse.Namespace) -> None:
    """Fill in grid dimensions the user left out."""
    if args.width is None:
        args.width = DEFAULT_WIDTH
    if args.height is None:
        args.height = DEFAULT_HEIGHT


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    logger.debug("Arguments: %s", vars(args))

    cli = BitLifeCLI()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    apply_defaults(args)

    if args.pattern and cli.pattern_library.get_pattern(args.pattern) is None:
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(cli.pattern_library.list_patterns())}")
        return 1

    try:
        session = cli.build_session(args)
    except GridError as e:
        print(f"Error: {e}")
        return 1

    options = RenderOptions(args.on, args.off)
    terminal = ConsoleTerminal(clear_screen=not args.no_clear)

    try:
        with session:
            steps = run_animation(
                session,
                options,
                terminal,
                delay=args.delay / 1000.0,
                generations=args.generations or None,
            )
            final_population = session.population
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1

    if args.verbose:
        print(f"Ran {steps} generations, final population: {final_population} cells")
    return 0


if __name__ == "__main__":
    sys.exit(main())
