"""Clue-source boundary: proposals, baseline sources and board-word filtering."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from framework.errors import ClueSourceError, InvalidClueError
from framework.rng import make_rng

from .codenames_state import Board, CardColor, Team

logger = logging.getLogger(__name__)

SAMPLE_CLUES: tuple[str, ...] = (
    "ALPHA", "BETA", "GAMMA", "DELTA", "ECHO", "VECTOR", "ORBIT", "SPECTRUM",
    "THING", "GAME", "NATURE", "METAL", "TRAVEL", "MUSIC", "FAMILY", "WEATHER",
)
MAX_RANDOM_COUNT = 3


@dataclass(frozen=True)
class ClueProposal:
    """One clue returned by a clue source."""

    word: str
    number: int
    reasoning: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"word": self.word, "number": self.number, "reasoning": self.reasoning}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClueProposal":
        word = data.get("word", data.get("clue"))
        if word is None or "number" not in data:
            raise ValueError("Clue payload requires 'word' (or 'clue') and 'number'.")
        return cls(word=str(word), number=int(data["number"]), reasoning=data.get("reasoning"))


def clue_context(board: Board, team: Team) -> dict[str, list[str]]:
    """Partition the board into the word groups a spymaster reasons about."""
    unrevealed = [tile for tile in board if not tile.revealed]
    return {
        "board": [tile.word for tile in board],
        "team": [tile.word for tile in unrevealed if tile.color is team.color],
        "opponent": [tile.word for tile in unrevealed if tile.color is team.other.color],
        "neutral": [tile.word for tile in unrevealed if tile.color is CardColor.NEUTRAL],
        "assassin": [tile.word for tile in unrevealed if tile.color is CardColor.ASSASSIN],
        "revealed": [tile.word for tile in board if tile.revealed],
    }


def normalize_clue(proposal: ClueProposal, board: Board) -> ClueProposal:
    """Upper-case the clue and reject ones the table would not accept.

    Raises:
        InvalidClueError: For empty or multi-word clues, board words (revealed
            or not) and negative counts.
    """
    word = proposal.word.strip().upper()
    if not word:
        raise InvalidClueError(proposal.word, "clue cannot be empty")
    if len(word.split()) > 1:
        raise InvalidClueError(proposal.word, "clue must be a single word")
    if word in {tile.word.upper() for tile in board}:
        raise InvalidClueError(proposal.word, "clue cannot be a word on the board")
    if proposal.number < 0:
        raise InvalidClueError(proposal.word, "clue count must be >= 0")
    return ClueProposal(word=word, number=proposal.number, reasoning=proposal.reasoning)


class ClueSource(ABC):
    """External spymaster role: turns a board and acting team into a clue."""

    def __init__(self, source_id: str):
        self.source_id = source_id

    @abstractmethod
    def propose(self, board: Board, team: Team) -> ClueProposal:
        """Return a clue for ``team``; raise ``ClueSourceError`` on failure."""


class ScriptedClueSource(ClueSource):
    """Runs a user-provided ``policy(board, team)`` callable."""

    def __init__(self, source_id: str, policy: Callable[[Board, Team], ClueProposal] | None = None):
        super().__init__(source_id=source_id)
        self.policy = policy

    def propose(self, board: Board, team: Team) -> ClueProposal:
        if self.policy is None:
            raise ClueSourceError(self.source_id, "ScriptedClueSource requires a policy(board, team) callable.")
        return self.policy(board, team)


class RandomClueSource(ClueSource):
    """Seeded baseline: a random non-board word with a small count. Not a strategy."""

    def __init__(self, source_id: str = "random", rng: random.Random | None = None, seed: int | None = None):
        super().__init__(source_id=source_id)
        self._rng = rng if rng is not None else make_rng(seed)

    def propose(self, board: Board, team: Team) -> ClueProposal:
        context = clue_context(board, team)
        on_board = set(context["board"])
        options = [clue for clue in SAMPLE_CLUES if clue not in on_board]
        if not options:
            raise ClueSourceError(self.source_id, "Every sample clue is already on the board.")
        team_left = len(context["team"])
        if team_left == 0:
            raise ClueSourceError(self.source_id, f"{team.value} has no unrevealed words to clue.")
        word = self._rng.choice(options)
        number = self._rng.randint(1, min(MAX_RANDOM_COUNT, team_left))
        logger.debug("%s proposed %s %d for %s", self.source_id, word, number, team.value)
        return ClueProposal(word=word, number=number, reasoning="random baseline")
