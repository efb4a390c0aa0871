"""Exceptions raised by the bit-packed grid and session."""


class GridError(Exception):
    """Base class for grid and session errors."""


class InvalidDimensionError(GridError, ValueError):
    """Raised when a grid is created with a negative or non-integer dimension."""

    def __init__(self, width: object, height: object) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Grid dimensions ({width}, {height}) are invalid; both must be non-negative integers")


class AllocationFailureError(GridError, MemoryError):
    """Raised when storage for a grid cannot be obtained."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Could not allocate storage for a {width}x{height} grid")


class OutOfBoundsError(GridError, IndexError):
    """Raised when writing to a cell outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        super().__init__(f"Cell ({x}, {y}) is outside the {width}x{height} grid and cannot be set")


class GridDestroyedError(GridError):
    """Raised when a grid is used after its storage was released."""
