"""Bit-packed grid data structure for the Game of Life."""

from enum import Enum, IntEnum
from typing import Iterator, NamedTuple, Optional, Tuple, Union
import logging

import numpy as np

from ..constants import BITS_PER_WORD, DEFAULT_OFF_SYMBOL, DEFAULT_ON_SYMBOL
from .errors import (
    AllocationFailureError,
    GridDestroyedError,
    InvalidDimensionError,
    OutOfBoundsError,
)

logger = logging.getLogger(__name__)


class CellState(IntEnum):
    """State of a single cell."""

    OFF = 0
    ON = 1


class BoundaryPolicy(Enum):
    """How reads outside the grid are answered."""

    ALL_OFF = "all-off"
    ALL_ON = "all-on"
    TORUS = "torus"


class CellLocation(NamedTuple):
    """A storage word (row, word) and the bit inside it holding one cell."""

    row: int
    word: int
    bit: int

    @property
    def mask(self) -> int:
        return 1 << self.bit


def _is_dimension(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool) and value >= 0


def to_cell_state(state: Union[CellState, bool, int]) -> CellState:
    """Convert a CellState, bool or 0/1 into a CellState."""
    if isinstance(state, (bool, int, np.integer)) and state in (0, 1):
        return CellState(int(state))
    raise ValueError(f"Invalid cell state {state!r}; expected CellState.ON or CellState.OFF")


class BitGrid:
    """A 2D grid of cells packed eight to a byte.

    Storage is a numpy ``uint8`` array of shape ``(width, ceil(height / 8))``.
    Cells are packed along the y axis: bit ``b`` of word ``(x, w)`` holds
    cell ``(x, w * 8 + b)``. Bits past ``height`` in the last word of each
    row are never set.

    Reads outside ``[0, width) x [0, height)`` are answered by the boundary
    policy; writes outside it always fail.
    """

    def __init__(
        self,
        width: int,
        height: int,
        policy: Union[BoundaryPolicy, str] = BoundaryPolicy.ALL_OFF,
    ) -> None:
        """Allocate a grid with every cell off.

        Args:
            width: Number of storage rows (x extent)
            height: Number of cells per row (y extent)
            policy: Boundary policy, as a BoundaryPolicy or its string value

        Raises:
            InvalidDimensionError: If width or height is negative or not an integer
            AllocationFailureError: If numpy cannot allocate the storage
            ValueError: If policy is not a known boundary policy
        """
        if not (_is_dimension(width) and _is_dimension(height)):
            logger.debug("Rejected grid dimensions (%r, %r)", width, height)
            raise InvalidDimensionError(width, height)

        self.width = int(width)
        self.height = int(height)
        self.policy = BoundaryPolicy(policy)
        self.words_per_row = -(-self.height // BITS_PER_WORD)

        try:
            self._storage: Optional[np.ndarray] = np.zeros((self.width, self.words_per_row), dtype=np.uint8)
        except (MemoryError, ValueError) as exc:
            logger.debug("Storage allocation failed for %dx%d grid: %s", self.width, self.height, exc)
            raise AllocationFailureError(self.width, self.height) from exc

        logger.debug(
            "Created %dx%d grid (%s) with %d words",
            self.width,
            self.height,
            self.policy.value,
            self.width * self.words_per_row,
        )

    @property
    def _words(self) -> np.ndarray:
        if self._storage is None:
            raise GridDestroyedError("Grid storage has already been released")
        return self._storage

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def storage(self) -> np.ndarray:
        """Read-only view of the packed storage words."""
        view = self._words.view()
        view.flags.writeable = False
        return view

    @property
    def destroyed(self) -> bool:
        """Whether the storage has been released."""
        return self._storage is None

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.unpackbits(self._words).sum())

    def _locate(self, x: int, y: int) -> Optional[CellLocation]:
        if 0 <= x < self.width and 0 <= y < self.height:
            word, bit = divmod(y, BITS_PER_WORD)
            return CellLocation(x, word, bit)
        return None

    def resolve(self, x: int, y: int) -> Optional[CellLocation]:
        """Find the storage word and bit holding cell (x, y).

        Under the torus policy out-of-range coordinates wrap with a
        nonnegative modulo, so ``(-1, 0)`` resolves like ``(width - 1, 0)``
        and ``(2 * width, 0)`` like ``(0, 0)``.

        Args:
            x: Row coordinate
            y: Column coordinate

        Returns:
            The cell's location, or None if it is not addressable
        """
        location = self._locate(x, y)
        if location is not None:
            return location

        # An empty torus has nothing to wrap onto.
        if self.policy is BoundaryPolicy.TORUS and self.width and self.height:
            return self.resolve(x % self.width, y % self.height)

        return None

    def get(self, x: int, y: int) -> CellState:
        """Read a cell, answering unaddressable cells from the boundary policy.

        Args:
            x: Row coordinate
            y: Column coordinate

        Returns:
            The cell's state
        """
        location = self.resolve(x, y)
        if location is None:
            return CellState.ON if self.policy is BoundaryPolicy.ALL_ON else CellState.OFF

        word = int(self._words[location.row, location.word])
        return CellState.ON if word & location.mask else CellState.OFF

    def set(self, x: int, y: int, state: Union[CellState, bool, int]) -> None:
        """Write a cell.

        Only cells inside the grid can be written, whatever the policy.

        Args:
            x: Row coordinate
            y: Column coordinate
            state: New state (CellState, bool or 0/1)

        Raises:
            OutOfBoundsError: If (x, y) lies outside the grid
            ValueError: If state is not a valid cell state
        """
        new_state = to_cell_state(state)
        location = self._locate(x, y)
        if location is None:
            logger.debug("Rejected write to (%d, %d) on %dx%d grid", x, y, self.width, self.height)
            raise OutOfBoundsError(x, y, self.width, self.height)

        words = self._words
        word = int(words[location.row, location.word])
        if new_state is CellState.ON:
            words[location.row, location.word] = word | location.mask
        else:
            words[location.row, location.word] = word & ~location.mask

    def clear(self) -> None:
        """Clear all cells (set all to off)."""
        self._words.fill(0)

    def randomize(self, rng: Optional[np.random.Generator] = None) -> None:
        """Set every cell on or off with equal probability.

        One random bit is drawn per cell, independently.

        Args:
            rng: Random source; pass a seeded generator for reproducible grids
        """
        if rng is None:
            rng = np.random.default_rng()

        bits = rng.integers(0, 2, size=(self.width, self.height))
        for x in range(self.width):
            for y in range(self.height):
                self.set(x, y, int(bits[x, y]))

    def _row(self, x: int) -> Iterator[CellState]:
        for y in range(self.height):
            yield self.get(x, y)

    def rows(self) -> Iterator[Iterator[CellState]]:
        """Iterate rows top to bottom, each yielding its cells left to right.

        Row ``x`` yields cells ``(x, 0)`` through ``(x, height - 1)``.
        """
        for x in range(self.width):
            yield self._row(x)

    def destroy(self) -> None:
        """Release the storage. Calling it again does nothing."""
        if self._storage is None:
            return
        self._storage = None
        logger.debug("Destroyed %dx%d grid", self.width, self.height)

    def __enter__(self) -> "BitGrid":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, BitGrid):
            return False
        return (
            self.shape == other.shape
            and self.policy is other.policy
            and np.array_equal(self._words, other._words)
        )

    def __repr__(self) -> str:
        return f"BitGrid(width={self.width}, height={self.height}, policy={self.policy.value!r})"

    def __str__(self) -> str:
        """String representation showing living cells as 'O' and dead as '.'."""
        result = []
        for row in self.rows():
            result.append("".join(DEFAULT_ON_SYMBOL if cell else DEFAULT_OFF_SYMBOL for cell in row))
        return "\n".join(result)
