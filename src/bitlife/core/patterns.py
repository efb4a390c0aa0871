"""Common Conway's Game of Life seed patterns."""

from typing import Dict, List, Optional, Tuple

from .grid import BitGrid, CellState


class Pattern:
    """A named set of living cells used to seed a grid.

    Coordinates are (x, y) with x the row and y the position within the row.
    """

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def apply_to_grid(self, grid: BitGrid, offset_x: int = 0, offset_y: int = 0) -> None:
        """Clear a grid and draw this pattern on it.

        Args:
            grid: Target grid
            offset_x: Row offset
            offset_y: Column offset

        Raises:
            OutOfBoundsError: If a shifted cell falls outside the grid
        """
        grid.clear()
        for x, y in self.cells:
            grid.set(x + offset_x, y + offset_y, CellState.ON)

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (rows, columns)."""
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)


class PatternLibrary:
    """Holds the built-in seed patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))

        self.add_pattern(Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))

        self.add_pattern(
            Pattern(
                "Glider",
                [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
                "Smallest spaceship, period-4, moves one row down and one column right",
            )
        )

        self.add_pattern(
            Pattern(
                "Gosper Glider Gun",
                [
                    (0, 24),
                    (1, 22),
                    (1, 24),
                    (2, 12),
                    (2, 13),
                    (2, 20),
                    (2, 21),
                    (2, 34),
                    (2, 35),
                    (3, 11),
                    (3, 15),
                    (3, 20),
                    (3, 21),
                    (3, 34),
                    (3, 35),
                    (4, 0),
                    (4, 1),
                    (4, 10),
                    (4, 16),
                    (4, 20),
                    (4, 21),
                    (5, 0),
                    (5, 1),
                    (5, 10),
                    (5, 14),
                    (5, 16),
                    (5, 17),
                    (5, 22),
                    (5, 24),
                    (6, 10),
                    (6, 16),
                    (6, 24),
                    (7, 11),
                    (7, 15),
                    (8, 12),
                    (8, 13),
                ],
                "Period-30 gun emitting a glider every 30 generations",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())
