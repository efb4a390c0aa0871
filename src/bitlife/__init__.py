"""Bit-packed Conway's Game of Life with a double-buffered session."""

__version__ = "0.1.0"

from .core.errors import (
    GridError,
    InvalidDimensionError,
    AllocationFailureError,
    OutOfBoundsError,
    GridDestroyedError,
)
from .core.grid import BitGrid, BoundaryPolicy, CellState
from .core.engine import TransitionEngine
from .core.session import Buffer, GameSession
from .core.patterns import Pattern, PatternLibrary

__all__ = [
    "GridError",
    "InvalidDimensionError",
    "AllocationFailureError",
    "OutOfBoundsError",
    "GridDestroyedError",
    "BitGrid",
    "BoundaryPolicy",
    "CellState",
    "TransitionEngine",
    "Buffer",
    "GameSession",
    "Pattern",
    "PatternLibrary",
]
