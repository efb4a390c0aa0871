"""Double-buffered Game of Life session."""

from enum import Enum
from typing import Iterable, Optional, Tuple, Union
import logging

import numpy as np

from .engine import TransitionEngine
from .errors import GridError
from .grid import BitGrid, BoundaryPolicy, CellState

logger = logging.getLogger(__name__)


class Buffer(Enum):
    """Which of a session's two grids is meant."""

    A = 0
    B = 1

    @property
    def other(self) -> "Buffer":
        return Buffer.B if self is Buffer.A else Buffer.A


class GameSession:
    """Owns a pair of matching grids and flips between them each generation.

    The current generation lives in one grid; ``step()`` writes the next one
    into the other grid and makes it current. The grid that was current
    before a step is overwritten by the following step, so callers should
    fetch ``current_grid()`` again after stepping rather than keep a
    reference.
    """

    def __init__(
        self,
        width: int,
        height: int,
        policy: Union[BoundaryPolicy, str] = BoundaryPolicy.ALL_OFF,
    ) -> None:
        """Allocate both grids.

        Args:
            width: Number of rows
            height: Number of cells per row
            policy: Boundary policy shared by both grids

        Raises:
            InvalidDimensionError: If width or height is invalid
            AllocationFailureError: If either grid cannot be allocated
        """
        grid_a = BitGrid(width, height, policy)
        try:
            grid_b = BitGrid(width, height, policy)
        except GridError:
            grid_a.destroy()
            raise

        self._grids: Tuple[BitGrid, BitGrid] = (grid_a, grid_b)
        self._current = Buffer.A
        self._engine = TransitionEngine()
        self._generation = 0

        logger.debug("Created %dx%d session (%s)", grid_a.width, grid_a.height, grid_a.policy.value)

    @property
    def width(self) -> int:
        return self._grids[0].width

    @property
    def height(self) -> int:
        return self._grids[0].height

    @property
    def policy(self) -> BoundaryPolicy:
        return self._grids[0].policy

    @property
    def current(self) -> Buffer:
        """Which buffer holds the live generation."""
        return self._current

    @property
    def generation(self) -> int:
        """Number of steps taken since the session was created."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.current_grid().population

    def current_grid(self) -> BitGrid:
        """Get the grid holding the live generation."""
        return self._grids[self._current.value]

    def step(self) -> None:
        """Advance the simulation by one generation."""
        target = self._current.other
        self._engine.step(self.current_grid(), self._grids[target.value])
        self._current = target
        self._generation += 1

    def run(self, generations: int) -> None:
        """Advance the simulation by several generations.

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generation count must be non-negative, got {generations}")
        for _ in range(generations):
            self.step()

    def randomize(self, rng: Optional[np.random.Generator] = None) -> None:
        """Randomly populate the current grid."""
        self.current_grid().randomize(rng)

    def seed(self, cells: Iterable[Tuple[int, int]]) -> None:
        """Turn on each listed (x, y) cell of the current grid.

        Raises:
            OutOfBoundsError: If a coordinate lies outside the grid
        """
        grid = self.current_grid()
        for x, y in cells:
            grid.set(x, y, CellState.ON)

    def destroy(self) -> None:
        """Release both grids."""
        for grid in self._grids:
            grid.destroy()

    def __enter__(self) -> "GameSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()
