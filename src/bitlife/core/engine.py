"""Conway's Game of Life transition rule."""

from typing import FrozenSet, Tuple, Union

from .grid import BitGrid, CellState, to_cell_state


class TransitionEngine:
    """Computes the next generation of one grid into another.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    BIRTH: FrozenSet[int] = frozenset({3})
    SURVIVAL: FrozenSet[int] = frozenset({2, 3})
    NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
        (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
    )

    def count_neighbors(self, grid: BitGrid, x: int, y: int) -> int:
        """Count living neighbors of a cell.

        Neighbors outside the grid are read through the grid's boundary policy.

        Args:
            grid: Grid to read
            x: Row coordinate
            y: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        return sum(int(grid.get(x + dx, y + dy)) for dx, dy in self.NEIGHBOR_OFFSETS)

    def next_state(self, state: Union[CellState, bool, int], neighbors: int) -> CellState:
        """Apply the B3/S23 rule to one cell.

        Raises:
            ValueError: If state is not a valid cell state
        """
        if to_cell_state(state) is CellState.ON:
            return CellState.ON if neighbors in self.SURVIVAL else CellState.OFF
        return CellState.ON if neighbors in self.BIRTH else CellState.OFF

    def step(self, source: BitGrid, dest: BitGrid) -> None:
        """Write the generation following ``source`` into ``dest``.

        Every cell of ``dest`` is overwritten; ``source`` is only read.

        Args:
            source: Grid holding the current generation
            dest: Grid receiving the next generation

        Raises:
            ValueError: If the grids are the same object or differ in shape or policy
        """
        if source is dest:
            raise ValueError("Source and destination must be different grids")
        if source.shape != dest.shape or source.policy is not dest.policy:
            raise ValueError(
                f"Grids don't match: {source.shape} {source.policy.value} vs {dest.shape} {dest.policy.value}"
            )

        for x in range(source.width):
            for y in range(source.height):
                neighbors = self.count_neighbors(source, x, y)
                dest.set(x, y, self.next_state(source.get(x, y), neighbors))
