"""Text frontends for the bit-packed Game of Life."""

from .render import RenderOptions, render_grid, print_grid
from .animation import Terminal, ConsoleTerminal, run_animation

__all__ = ["RenderOptions", "render_grid", "print_grid", "Terminal", "ConsoleTerminal", "run_animation"]
