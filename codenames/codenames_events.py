"""Event layer: narrates every Codenames transition into a history feed."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from time import time
from typing import Any, Mapping, Self

from framework.serialize import to_serializable
from framework.state import State

from .codenames_game import CodenamesGame
from .codenames_state import CardColor, GameState, Team

logger = logging.getLogger(__name__)

DEFAULT_RECENT_EVENTS = 5


class Outcome(str, Enum):
    """Classification attached to each event."""

    CORRECT_TEAM = "CORRECT_TEAM"
    WRONG_TEAM = "WRONG_TEAM"
    NEUTRAL = "NEUTRAL"
    ASSASSIN = "ASSASSIN"
    WIN = "WIN"
    PASS = "PASS"


@dataclass(frozen=True)
class GameEvent:
    """Single notification emitted by a transition. Never mutated after creation."""

    outcome: Outcome
    message: str
    team: Team | None
    card_revealed: str | None
    timestamp_ms: int

    def to_dict(self) -> dict[str, Any]:
        """Return JSON-serializable event data."""
        return to_serializable(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameEvent":
        """Build an event from a dictionary payload."""
        team = data.get("team")
        return cls(
            outcome=Outcome(data["outcome"]),
            message=str(data["message"]),
            team=Team(team) if team is not None else None,
            card_revealed=data.get("card_revealed"),
            timestamp_ms=int(data["timestamp_ms"]),
        )

    @classmethod
    def create(
        cls,
        outcome: Outcome,
        message: str,
        team: Team | None = None,
        card_revealed: str | None = None,
    ) -> "GameEvent":
        """Construct an event with the current wall-clock timestamp."""
        return cls(
            outcome=outcome,
            message=message,
            team=team,
            card_revealed=card_revealed,
            timestamp_ms=int(time() * 1000),
        )


@dataclass(frozen=True)
class EventedGameState(State):
    """Game state plus the latest event and the full event history."""

    state: GameState
    last_event: GameEvent | None = None
    history: tuple[GameEvent, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        last_event = data.get("last_event")
        return cls(
            state=GameState.from_dict(data["state"]),
            last_event=GameEvent.from_dict(last_event) if last_event is not None else None,
            history=tuple(GameEvent.from_dict(event) for event in data.get("history", ())),
        )


def determine_outcome(card_color: CardColor, acting_team: Team, is_win: bool) -> Outcome:
    """Classify a reveal; a win outranks every other outcome."""
    if is_win:
        return Outcome.WIN
    if card_color is CardColor.ASSASSIN:
        return Outcome.ASSASSIN
    if card_color is CardColor.NEUTRAL:
        return Outcome.NEUTRAL
    if card_color is acting_team.color:
        return Outcome.CORRECT_TEAM
    return Outcome.WRONG_TEAM


def outcome_message(outcome: Outcome, word: str, team: Team) -> str:
    """Render the notification text for an outcome.

    ``team`` is the acting team, except for WIN where it is the winner.
    """
    if outcome is Outcome.CORRECT_TEAM:
        return f"✓ Correct! {word} belongs to {team.value} team. Continue guessing!"
    if outcome is Outcome.WRONG_TEAM:
        return f"✗ Wrong! {word} belongs to {team.other.value} team. Turn ends."
    if outcome is Outcome.NEUTRAL:
        return f"○ Neutral! {word} is a bystander. Turn ends."
    if outcome is Outcome.ASSASSIN:
        return f"💀 ASSASSIN! {word} was the assassin. Game Over!"
    if outcome is Outcome.WIN:
        return f"🎉 Victory! {team.value} team has revealed all their cards!"
    return f"⏭️ {team.value} team passed their turn."


def get_recent_events(evented: EventedGameState, count: int = DEFAULT_RECENT_EVENTS) -> list[GameEvent]:
    """Return the last ``count`` events in chronological order."""
    if count <= 0:
        return []
    return list(evented.history[-count:])


def clear_last_event(evented: EventedGameState) -> EventedGameState:
    """Dismiss the latest notification; history is kept intact."""
    return evented.evolve(last_event=None)


class EventedCodenamesGame:
    """Wraps ``CodenamesGame`` so every transition also emits one ``GameEvent``.

    The underlying transition is delegated unchanged; this layer only adds the
    classification and narration. ``history_limit`` bounds how many events are
    retained (oldest dropped first); ``None`` keeps all of them.
    """

    def __init__(self, game: CodenamesGame | None = None, history_limit: int | None = None):
        if history_limit is not None and history_limit < 1:
            raise ValueError("history_limit must be >= 1 when set.")
        self.game = game or CodenamesGame()
        self.history_limit = history_limit

    def create_initial(self) -> EventedGameState:
        return EventedGameState(state=self.game.create_initial())

    def start(self, evented: EventedGameState) -> EventedGameState:
        state = self.game.start(evented.state)
        team = state.starting_team
        event = GameEvent.create(
            Outcome.CORRECT_TEAM,
            f"🎮 Game started! {team.value} team goes first.",
            team,
        )
        return self._record(evented, state, event)

    def set_clue(self, evented: EventedGameState, word: str, number: int) -> EventedGameState:
        state = self.game.set_clue(evented.state, word, number)
        event = GameEvent.create(
            Outcome.CORRECT_TEAM,
            f'🤖 Clue: "{word.upper()}" - {number}. Make your guesses!',
            evented.state.current_turn,
        )
        return self._record(evented, state, event)

    def reveal_card(self, evented: EventedGameState, index: int) -> EventedGameState:
        state = self.game.reveal_card(evented.state, index)
        tile = evented.state.board[index]
        acting_team = evented.state.current_turn

        winner = state.winner
        is_win = winner is not None and tile.color is not CardColor.ASSASSIN
        outcome = determine_outcome(tile.color, acting_team, is_win)
        # WIN names the winner, which may be the opponent of the acting team.
        message_team = winner if is_win and winner is not None else acting_team
        event = GameEvent.create(
            outcome,
            outcome_message(outcome, tile.word, message_team),
            acting_team,
            tile.word,
        )
        return self._record(evented, state, event)

    def pass_turn(self, evented: EventedGameState) -> EventedGameState:
        acting_team = evented.state.current_turn
        state = self.game.pass_turn(evented.state)
        event = GameEvent.create(Outcome.PASS, outcome_message(Outcome.PASS, "", acting_team), acting_team)
        return self._record(evented, state, event)

    def reset(self, evented: EventedGameState | None = None) -> EventedGameState:
        """Deal a new game with an empty history; the old history is discarded."""
        return EventedGameState(state=self.game.reset())

    def clear_last_event(self, evented: EventedGameState) -> EventedGameState:
        return clear_last_event(evented)

    def recent_events(self, evented: EventedGameState, count: int = DEFAULT_RECENT_EVENTS) -> list[GameEvent]:
        return get_recent_events(evented, count)

    def _record(self, evented: EventedGameState, state: GameState, event: GameEvent) -> EventedGameState:
        history = evented.history + (event,)
        if self.history_limit is not None and len(history) > self.history_limit:
            history = history[-self.history_limit :]
        logger.debug("Event %s: %s", event.outcome.value, event.message)
        return EventedGameState(state=state, last_event=event, history=history)
