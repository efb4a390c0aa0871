"""Text rendering of grids."""

from typing import Iterable, Optional, TextIO
import sys

from ..constants import DEFAULT_OFF_SYMBOL, DEFAULT_ON_SYMBOL
from ..core.grid import BitGrid, CellState


class RenderOptions:
    """Symbols used to draw living and dead cells."""

    def __init__(self, on_symbol: str = DEFAULT_ON_SYMBOL, off_symbol: str = DEFAULT_OFF_SYMBOL) -> None:
        """Initialize render options.

        Args:
            on_symbol: Single character for living cells
            off_symbol: Single character for dead cells

        Raises:
            ValueError: If either symbol is not exactly one character
        """
        for label, symbol in (("on", on_symbol), ("off", off_symbol)):
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ValueError(f"The {label} symbol must be a single character, got {symbol!r}")

        self.on_symbol = on_symbol
        self.off_symbol = off_symbol


def _render_row(row: Iterable[CellState], options: RenderOptions) -> str:
    return "".join(options.on_symbol if cell else options.off_symbol for cell in row)


def render_grid(grid: BitGrid, options: Optional[RenderOptions] = None) -> str:
    """Format a grid as text, one line per row and one character per cell.

    Args:
        grid: Grid to format
        options: Cell symbols (defaults to 'O' and '.')

    Returns:
        Rows joined by newlines, without a trailing newline
    """
    options = options or RenderOptions()
    return "\n".join(_render_row(row, options) for row in grid.rows())


def print_grid(grid: BitGrid, options: Optional[RenderOptions] = None, stream: Optional[TextIO] = None) -> None:
    """Write a grid framed by blank lines, each row terminated by a newline."""
    options = options or RenderOptions()
    stream = stream or sys.stdout

    stream.write("\n")
    for row in grid.rows():
        stream.write(_render_row(row, options))
        stream.write("\n")
    stream.write("\n")
