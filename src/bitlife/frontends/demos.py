"""Ready-made sessions for the demos."""

from typing import Optional
import logging

import numpy as np

from ..constants import DEFAULT_HEIGHT, DEFAULT_WIDTH
from ..core.errors import GridError
from ..core.grid import BoundaryPolicy
from ..core.patterns import PatternLibrary
from ..core.session import GameSession

logger = logging.getLogger(__name__)


def create_random_session(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    policy: BoundaryPolicy = BoundaryPolicy.TORUS,
    rng: Optional[np.random.Generator] = None,
) -> GameSession:
    """Create a session with every cell randomly on or off (a torus by default)."""
    session = GameSession(width, height, policy)
    session.randomize(rng)
    logger.debug("Random session seeded with %d living cells", session.population)
    return session


def create_pattern_session(
    name: str,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    policy: BoundaryPolicy = BoundaryPolicy.ALL_OFF,
    offset_x: int = 1,
    offset_y: int = 1,
    library: Optional[PatternLibrary] = None,
) -> GameSession:
    """Create a session seeded with a library pattern.

    Raises:
        KeyError: If the pattern is not in the library
        OutOfBoundsError: If the pattern does not fit at the offset
    """
    library = library or PatternLibrary()
    pattern = library.get_pattern(name)
    if pattern is None:
        raise KeyError(f"Pattern '{name}' not found")

    session = GameSession(width, height, policy)
    try:
        pattern.apply_to_grid(session.current_grid(), offset_x, offset_y)
    except GridError:
        session.destroy()
        raise
    return session


def create_glider_gun_session(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    policy: BoundaryPolicy = BoundaryPolicy.ALL_OFF,
) -> GameSession:
    """Create a session holding a Gosper glider gun one cell in from the corner."""
    return create_pattern_session("Gosper Glider Gun", width, height, policy)
