"""Endless print-step-sleep loop for watching a session evolve."""

from typing import Optional, Protocol, TextIO
import logging
import sys
import time

from ..constants import ANIMATION_TITLE, CLEAR_SCREEN, DEFAULT_DELAY_MS
from ..core.session import GameSession
from .render import RenderOptions, print_grid

logger = logging.getLogger(__name__)


class Terminal(Protocol):
    """Pausing and screen clearing, supplied to the animation loop."""

    def sleep(self, seconds: float) -> None:
        ...

    def clear(self) -> None:
        ...


class ConsoleTerminal:
    """Terminal backed by time.sleep and an ANSI clear-screen sequence."""

    def __init__(self, stream: Optional[TextIO] = None, clear_screen: bool = True) -> None:
        self.stream = stream or sys.stdout
        self.clear_screen = clear_screen

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)

    def clear(self) -> None:
        if self.clear_screen:
            self.stream.write(CLEAR_SCREEN)
            self.stream.flush()


def run_animation(
    session: GameSession,
    options: Optional[RenderOptions] = None,
    terminal: Optional[Terminal] = None,
    delay: float = DEFAULT_DELAY_MS / 1000.0,
    generations: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> int:
    """Print, step, pause and clear, over and over.

    Args:
        session: Session to animate
        options: Cell symbols
        terminal: Sleep and clear capability (defaults to a ConsoleTerminal on stream)
        delay: Pause between generations in seconds
        generations: Number of steps to run, or None to run until interrupted
        stream: Output stream (defaults to stdout)

    Returns:
        Number of steps taken
    """
    stream = stream or sys.stdout
    terminal = terminal or ConsoleTerminal(stream)

    stream.flush()
    terminal.clear()
    stream.write(f"{ANIMATION_TITLE}\n\n")

    steps = 0
    while generations is None or steps < generations:
        print_grid(session.current_grid(), options, stream)
        session.step()
        steps += 1

        stream.flush()
        terminal.sleep(delay)
        terminal.clear()

    logger.debug("Animation stopped after %d generations", steps)
    return steps
