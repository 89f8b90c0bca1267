"""Event layer: outcome classification, narration and history."""

from __future__ import annotations

import pytest

from codenames.codenames_events import (
    EventedCodenamesGame,
    EventedGameState,
    GameEvent,
    Outcome,
    clear_last_event,
    determine_outcome,
    get_recent_events,
    outcome_message,
)
from codenames.codenames_game import CodenamesGame
from codenames.codenames_state import CardColor, GameState, GameStatus, Score, Team, Tile
from codenames.codenames_words import DEFAULT_WORDS
from framework.errors import AlreadyRevealedError, NotInProgressError

BLUE_INDEX = 9
NEUTRAL_INDEX = 17
ASSASSIN_INDEX = 24


def _evented(revealed: set[int] | None = None) -> EventedGameState:
    """RED to move on a fixed layout: 0-8 RED, 9-16 BLUE, 17-23 NEUTRAL, 24 ASSASSIN."""
    revealed = revealed or set()
    colors = [CardColor.RED] * 9 + [CardColor.BLUE] * 8 + [CardColor.NEUTRAL] * 7 + [CardColor.ASSASSIN]
    board = tuple(
        Tile(word=word, color=color, revealed=index in revealed)
        for index, (word, color) in enumerate(zip(DEFAULT_WORDS[:25], colors))
    )
    state = GameState(
        board=board,
        current_turn=Team.RED,
        starting_team=Team.RED,
        status=GameStatus.IN_PROGRESS,
        score=Score(
            red=sum(1 for t in board if t.color is CardColor.RED and not t.revealed),
            blue=sum(1 for t in board if t.color is CardColor.BLUE and not t.revealed),
        ),
    )
    return EventedGameState(state=state)


def test_determine_outcome_precedence() -> None:
    assert determine_outcome(CardColor.RED, Team.RED, True) is Outcome.WIN
    assert determine_outcome(CardColor.ASSASSIN, Team.RED, True) is Outcome.WIN
    assert determine_outcome(CardColor.ASSASSIN, Team.RED, False) is Outcome.ASSASSIN
    assert determine_outcome(CardColor.NEUTRAL, Team.BLUE, False) is Outcome.NEUTRAL
    assert determine_outcome(CardColor.BLUE, Team.BLUE, False) is Outcome.CORRECT_TEAM
    assert determine_outcome(CardColor.RED, Team.BLUE, False) is Outcome.WRONG_TEAM


def test_messages_interpolate_word_and_teams() -> None:
    assert outcome_message(Outcome.CORRECT_TEAM, "CAT", Team.RED) == (
        "✓ Correct! CAT belongs to RED team. Continue guessing!"
    )
    assert outcome_message(Outcome.WRONG_TEAM, "DOG", Team.RED) == "✗ Wrong! DOG belongs to BLUE team. Turn ends."
    assert outcome_message(Outcome.NEUTRAL, "SUN", Team.BLUE) == "○ Neutral! SUN is a bystander. Turn ends."
    assert outcome_message(Outcome.ASSASSIN, "KEY", Team.BLUE) == "💀 ASSASSIN! KEY was the assassin. Game Over!"
    assert outcome_message(Outcome.WIN, "CAT", Team.BLUE) == "🎉 Victory! BLUE team has revealed all their cards!"
    assert outcome_message(Outcome.PASS, "", Team.RED) == "⏭️ RED team passed their turn."


def test_correct_then_wrong_team_scenario() -> None:
    game = EventedCodenamesGame()
    evented = game.set_clue(_evented(), "ANIMAL", 2)
    assert evented.state.guesses_remaining == 3
    assert evented.last_event is not None
    assert evented.last_event.message == '🤖 Clue: "ANIMAL" - 2. Make your guesses!'

    evented = game.reveal_card(evented, 0)
    assert evented.last_event.outcome is Outcome.CORRECT_TEAM
    assert evented.last_event.card_revealed == DEFAULT_WORDS[0]
    assert evented.last_event.team is Team.RED
    assert evented.state.guesses_remaining == 2
    assert evented.state.current_turn is Team.RED

    evented = game.reveal_card(evented, BLUE_INDEX)
    assert evented.last_event.outcome is Outcome.WRONG_TEAM
    assert evented.state.current_turn is Team.BLUE
    assert evented.state.guesses_remaining == 0
    assert evented.state.current_clue is not None
    assert len(evented.history) == 3


def test_neutral_reveal_event() -> None:
    evented = EventedCodenamesGame().reveal_card(_evented(), NEUTRAL_INDEX)

    assert evented.last_event.outcome is Outcome.NEUTRAL
    assert evented.state.current_turn is Team.BLUE


def test_assassin_event_is_not_a_win_outcome() -> None:
    evented = EventedCodenamesGame().reveal_card(_evented(), ASSASSIN_INDEX)

    assert evented.state.status is GameStatus.BLUE_WIN
    assert evented.last_event.outcome is Outcome.ASSASSIN
    assert evented.last_event.team is Team.RED


def test_last_card_event_is_a_win() -> None:
    game = EventedCodenamesGame()
    evented = game.set_clue(_evented(revealed=set(range(0, 8))), "LAST", 1)
    assert evented.state.score.red == 1

    evented = game.reveal_card(evented, 8)

    assert evented.state.score.red == 0
    assert evented.state.status is GameStatus.RED_WIN
    assert evented.last_event.outcome is Outcome.WIN
    assert "RED team has revealed" in evented.last_event.message


def test_winning_for_the_opponent_names_the_opponent() -> None:
    evented = EventedCodenamesGame().reveal_card(_evented(revealed=set(range(9, 16))), 16)

    assert evented.state.status is GameStatus.BLUE_WIN
    assert evented.last_event.outcome is Outcome.WIN
    assert evented.last_event.message == "🎉 Victory! BLUE team has revealed all their cards!"


def test_pass_event_clears_clue() -> None:
    game = EventedCodenamesGame()
    evented = game.pass_turn(game.set_clue(_evented(), "ANIMAL", 2))

    assert evented.state.current_turn is Team.BLUE
    assert evented.state.guesses_remaining == 0
    assert evented.state.current_clue is None
    assert evented.last_event.outcome is Outcome.PASS
    assert evented.last_event.team is Team.RED


def test_start_event_and_fresh_games_have_empty_history() -> None:
    game = EventedCodenamesGame(CodenamesGame(seed=10))
    initial = game.create_initial()
    assert initial.history == ()
    assert initial.last_event is None

    started = game.start(initial)
    team = started.state.starting_team
    assert started.last_event.message == f"🎮 Game started! {team.value} team goes first."
    assert started.history == (started.last_event,)

    reset = game.reset(started)
    assert reset.history == ()
    assert reset.state.status is GameStatus.SETUP


def test_failed_transition_appends_nothing() -> None:
    game = EventedCodenamesGame()
    evented = game.reveal_card(_evented(), NEUTRAL_INDEX)

    with pytest.raises(AlreadyRevealedError):
        game.reveal_card(evented, NEUTRAL_INDEX)
    finished = game.reveal_card(evented, ASSASSIN_INDEX)
    with pytest.raises(NotInProgressError):
        game.pass_turn(finished)

    assert len(evented.history) == 1
    assert len(finished.history) == 2


def test_clear_last_event_keeps_history() -> None:
    game = EventedCodenamesGame()
    evented = game.reveal_card(_evented(), 0)

    cleared = clear_last_event(evented)

    assert cleared.last_event is None
    assert cleared.history == evented.history
    assert game.clear_last_event(evented) == cleared


def test_recent_events_are_chronological() -> None:
    game = EventedCodenamesGame()
    evented = _evented()
    for _ in range(4):
        evented = game.pass_turn(evented)
    evented = game.reveal_card(evented, 0)

    recent = get_recent_events(evented, 2)
    assert [event.outcome for event in recent] == [Outcome.PASS, Outcome.CORRECT_TEAM]
    assert len(get_recent_events(evented, 50)) == 5
    assert get_recent_events(evented, 0) == []
    assert game.recent_events(evented) == list(evented.history)


def test_history_limit_drops_oldest_events() -> None:
    game = EventedCodenamesGame(history_limit=3)
    evented = game.set_clue(_evented(), "FIRST", 1)
    for _ in range(4):
        evented = game.pass_turn(evented)

    assert len(evented.history) == 3
    assert all(event.outcome is Outcome.PASS for event in evented.history)
    assert evented.last_event is evented.history[-1]

    with pytest.raises(ValueError):
        EventedCodenamesGame(history_limit=0)


def test_evented_state_round_trips_through_dict() -> None:
    game = EventedCodenamesGame()
    evented = game.reveal_card(game.set_clue(_evented(), "ANIMAL", 1), 0)

    restored = EventedGameState.from_dict(evented.to_dict())

    assert restored == evented
    assert GameEvent.from_dict(evented.last_event.to_dict()) == evented.last_event


def test_event_dict_uses_plain_outcome_strings() -> None:
    event = GameEvent.create(Outcome.PASS, "x", Team.RED)

    payload = event.to_dict()

    assert payload["outcome"] == "PASS"
    assert type(payload["outcome"]) is str
    assert type(payload["team"]) is str
    assert GameEvent.from_dict(payload) == event
