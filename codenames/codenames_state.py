"""State and enums for Codenames."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Self

from framework.state import State


class Team(str, Enum):
    """Codenames teams; RED and BLUE are the two sides of the board."""

    RED = "RED"
    BLUE = "BLUE"

    @property
    def other(self) -> "Team":
        return Team.BLUE if self is Team.RED else Team.RED

    @property
    def color(self) -> "CardColor":
        return CardColor(self.value)


class CardColor(str, Enum):
    """Hidden color of each board card."""

    RED = "RED"
    BLUE = "BLUE"
    NEUTRAL = "NEUTRAL"
    ASSASSIN = "ASSASSIN"


class GameStatus(str, Enum):
    """Lifecycle of a single game."""

    SETUP = "SETUP"
    IN_PROGRESS = "IN_PROGRESS"
    RED_WIN = "RED_WIN"
    BLUE_WIN = "BLUE_WIN"
    ASSASSIN_HIT = "ASSASSIN_HIT"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset({GameStatus.RED_WIN, GameStatus.BLUE_WIN, GameStatus.ASSASSIN_HIT})


def win_status_for(team: Team) -> GameStatus:
    """Return the status recorded when ``team`` wins."""
    return GameStatus.RED_WIN if team is Team.RED else GameStatus.BLUE_WIN


@dataclass(frozen=True)
class Tile:
    """One board card. Only ``revealed`` ever changes, and only from False to True."""

    word: str
    color: CardColor
    revealed: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Tile":
        return cls(word=str(data["word"]), color=CardColor(data["color"]), revealed=bool(data.get("revealed", False)))


Board = tuple[Tile, ...]


@dataclass(frozen=True)
class Clue:
    """Clue currently in effect for the team that received it."""

    word: str
    number: int
    team: Team

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Clue":
        return cls(word=str(data["word"]), number=int(data["number"]), team=Team(data["team"]))


@dataclass(frozen=True)
class Score:
    """Unrevealed card counts per team; a team wins when its count reaches 0."""

    red: int
    blue: int

    def for_team(self, team: Team) -> int:
        return self.red if team is Team.RED else self.blue


@dataclass(frozen=True)
class GameState(State):
    """Immutable Codenames state."""

    board: Board
    current_turn: Team
    starting_team: Team
    status: GameStatus
    score: Score
    current_clue: Clue | None = None
    guesses_remaining: int = 0
    revealed_count: int = 0

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @property
    def winner(self) -> Team | None:
        """Return the winning team once the game has ended."""
        if self.status is GameStatus.RED_WIN:
            return Team.RED
        if self.status is GameStatus.BLUE_WIN:
            return Team.BLUE
        return None

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(tile.word for tile in self.board)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        clue = data.get("current_clue")
        score = data["score"]
        return cls(
            board=tuple(Tile.from_dict(tile) for tile in data["board"]),
            current_turn=Team(data["current_turn"]),
            starting_team=Team(data["starting_team"]),
            status=GameStatus(data["status"]),
            score=Score(red=int(score["red"]), blue=int(score["blue"])),
            current_clue=Clue.from_dict(clue) if clue is not None else None,
            guesses_remaining=int(data.get("guesses_remaining", 0)),
            revealed_count=int(data.get("revealed_count", 0)),
        )


def unrevealed_cards_for_color(state: GameState, color: CardColor | Team) -> list[Tile]:
    """Return unrevealed cards of one color (team colors accept a ``Team``)."""
    target = color.color if isinstance(color, Team) else color
    return [tile for tile in state.board if not tile.revealed and tile.color is target]


def unrevealed_cards(state: GameState) -> list[Tile]:
    return [tile for tile in state.board if not tile.revealed]


def revealed_cards(state: GameState) -> list[Tile]:
    return [tile for tile in state.board if tile.revealed]
