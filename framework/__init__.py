"""Game-agnostic plumbing: errors, serialization, state base, config and randomness."""

from .config import EngineConfig, configure_logging
from .errors import (
    AlreadyRevealedError,
    BoardInvariantError,
    ClueSourceError,
    EngineError,
    IndexOutOfRangeError,
    InsufficientWordsError,
    InvalidClueError,
    InvalidStatusError,
    NotInProgressError,
    NotInSetupError,
)
from .rng import make_rng
from .state import State

__all__ = [
    "AlreadyRevealedError",
    "BoardInvariantError",
    "ClueSourceError",
    "EngineConfig",
    "EngineError",
    "IndexOutOfRangeError",
    "InsufficientWordsError",
    "InvalidClueError",
    "InvalidStatusError",
    "NotInProgressError",
    "NotInSetupError",
    "State",
    "configure_logging",
    "make_rng",
]
