"""Core bit-packed grid, transition rule and session logic."""

from .errors import (
    GridError,
    InvalidDimensionError,
    AllocationFailureError,
    OutOfBoundsError,
    GridDestroyedError,
)
from .grid import BitGrid, BoundaryPolicy, CellLocation, CellState
from .engine import TransitionEngine
from .session import Buffer, GameSession
from .patterns import Pattern, PatternLibrary

__all__ = [
    "GridError",
    "InvalidDimensionError",
    "AllocationFailureError",
    "OutOfBoundsError",
    "GridDestroyedError",
    "BitGrid",
    "BoundaryPolicy",
    "CellLocation",
    "CellState",
    "TransitionEngine",
    "Buffer",
    "GameSession",
    "Pattern",
    "PatternLibrary",
]
