#!/usr/bin/env python3
"""
Short bitlife-cli runs, executed in-process through the CLI entry point.
"""

from bitlife.frontends.cli import main

EXAMPLES = [
    ("List all available patterns", ["--list-patterns"]),
    ("Random torus, five generations", ["--seed", "42", "-n", "5"]),
    ("Gosper glider gun on a bounded grid", ["--demo", "glider-gun", "-n", "3"]),
    ("Glider wrapping on a small torus", ["--pattern", "Glider", "-W", "8", "-H", "8", "-b", "torus", "-n", "4"]),
    ("Blinker with custom symbols", ["--pattern", "Blinker", "-W", "5", "-H", "5", "-n", "2", "--on", "#"]),
]

# Keep the output readable: no pauses, no screen clearing
QUIET_FLAGS = ["-d", "0", "--no-clear"]


if __name__ == "__main__":
    failures = 0
    for description, args in EXAMPLES:
        print(f"\n== {description}: bitlife-cli {' '.join(args)}")
        if args != ["--list-patterns"]:
            args = args + QUIET_FLAGS
        failures += main(args) != 0

    print(f"\n{len(EXAMPLES) - failures}/{len(EXAMPLES)} examples completed successfully")
