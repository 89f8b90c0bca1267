"""Structured exceptions raised by the Codenames engine and its controller."""

from __future__ import annotations

from typing import Any


class EngineError(Exception):
    """Base class for engine-level exceptions."""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {"type": self.__class__.__name__, "message": str(self)}


class InvalidStatusError(EngineError):
    """Raised when an operation is not allowed in the current game status."""

    required: str = ""

    def __init__(self, operation: str, status: str):
        self.operation = operation
        self.status = status
        super().__init__(f"Cannot {operation}: game status is {status}, expected {self.required}")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update({"operation": self.operation, "status": self.status})
        return payload


class NotInProgressError(InvalidStatusError):
    """Raised when a turn operation is attempted outside IN_PROGRESS."""

    required = "IN_PROGRESS"


class NotInSetupError(InvalidStatusError):
    """Raised when starting a game that has already left SETUP."""

    required = "SETUP"


class IndexOutOfRangeError(EngineError):
    """Raised when a card index falls outside the board."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Card index {index} is out of range for a board of {size} cards")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update({"index": self.index, "size": self.size})
        return payload


class AlreadyRevealedError(EngineError):
    """Raised when a card is revealed a second time."""

    def __init__(self, index: int, word: str):
        self.index = index
        self.word = word
        super().__init__(f"Card {index} ({word}) is already revealed")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update({"index": self.index, "word": self.word})
        return payload


class InsufficientWordsError(EngineError):
    """Raised when the word catalog cannot fill a board."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(f"Cannot select {required} words from a catalog of {available}")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update({"required": self.required, "available": self.available})
        return payload


class BoardInvariantError(EngineError):
    """Raised when a board does not match its color distribution or word rules."""


class InvalidClueError(EngineError):
    """Raised when a proposed clue is rejected before reaching the engine."""

    def __init__(self, clue: str, reason: str):
        self.clue = clue
        self.reason = reason
        super().__init__(f"Invalid clue {clue!r}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update({"clue": self.clue, "reason": self.reason})
        return payload


class ClueSourceError(EngineError):
    """Raised when a clue source fails to produce a clue."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["source"] = self.source
        return payload
