"""Codenames game state machine."""

from __future__ import annotations

import logging
import random
from dataclasses import replace

from framework.errors import (
    AlreadyRevealedError,
    IndexOutOfRangeError,
    NotInProgressError,
    NotInSetupError,
)
from framework.rng import make_rng

from .codenames_board import (
    board_config,
    check_win_condition,
    choose_starting_team,
    count_remaining,
    generate_board,
)
from .codenames_state import (
    CardColor,
    Clue,
    GameState,
    GameStatus,
    Score,
    win_status_for,
)
from .codenames_words import DEFAULT_CATALOG, WordCatalog

logger = logging.getLogger(__name__)


class CodenamesGame:
    """Pure transitions over ``GameState``.

    The game object holds only its word catalog and randomness source. Every
    operation takes a state and returns a new one; inputs are never mutated,
    and a failed precondition raises before anything is built.
    """

    game_name = "codenames"

    def __init__(
        self,
        catalog: WordCatalog | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ):
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self.rng = rng if rng is not None else make_rng(seed)

    def create_initial(self) -> GameState:
        """Deal a fresh board in SETUP status."""
        starting_team = choose_starting_team(self.rng)
        board = generate_board(starting_team, self.rng, self.catalog)
        config = board_config(starting_team)
        logger.debug("Created game; %s starts", starting_team.value)
        return GameState(
            board=board,
            current_turn=starting_team,
            starting_team=starting_team,
            status=GameStatus.SETUP,
            score=Score(red=config.red_count, blue=config.blue_count),
            current_clue=None,
            guesses_remaining=0,
            revealed_count=0,
        )

    def start(self, state: GameState) -> GameState:
        if state.status is not GameStatus.SETUP:
            raise NotInSetupError("start game", state.status.value)
        logger.info("Game started; %s goes first", state.starting_team.value)
        return state.evolve(status=GameStatus.IN_PROGRESS)

    def set_clue(self, state: GameState, word: str, number: int) -> GameState:
        """Record a clue for the team to move and grant ``number + 1`` guesses.

        The extra guess lets a team bank one speculative guess. The clue word
        and count are taken as given; filtering happens before this call.
        """
        self.require_in_progress(state, "set clue")
        return state.evolve(
            current_clue=Clue(word=word, number=number, team=state.current_turn),
            guesses_remaining=number + 1,
        )

    def reveal_card(self, state: GameState, index: int) -> GameState:
        """Reveal one card and resolve score, win and turn changes."""
        self.require_in_progress(state, "reveal card")
        if index < 0 or index >= len(state.board):
            raise IndexOutOfRangeError(index=index, size=len(state.board))
        tile = state.board[index]
        if tile.revealed:
            raise AlreadyRevealedError(index=index, word=tile.word)

        acting_team = state.current_turn
        board = state.board[:index] + (replace(tile, revealed=True),) + state.board[index + 1 :]

        remaining = count_remaining(board)
        score = Score(red=remaining[CardColor.RED], blue=remaining[CardColor.BLUE])

        status = state.status
        decided = check_win_condition(board)
        if decided is CardColor.ASSASSIN:
            status = win_status_for(acting_team.other)
        elif decided is CardColor.RED:
            status = GameStatus.RED_WIN
        elif decided is CardColor.BLUE:
            status = GameStatus.BLUE_WIN

        guesses_remaining = state.guesses_remaining - 1
        current_turn = acting_team
        if status is not GameStatus.IN_PROGRESS:
            # A win ends the game where it stands; the turn does not pass.
            guesses_remaining = max(guesses_remaining, 0)
            logger.info("Game over after revealing %s: %s", tile.word, status.value)
        elif (
            tile.color is not acting_team.color
            or tile.color in (CardColor.NEUTRAL, CardColor.ASSASSIN)
            or guesses_remaining <= 0
        ):
            current_turn = acting_team.other
            guesses_remaining = 0

        logger.debug(
            "%s revealed %s (%s); turn=%s guesses_remaining=%d",
            acting_team.value,
            tile.word,
            tile.color.value,
            current_turn.value,
            guesses_remaining,
        )
        return state.evolve(
            board=board,
            score=score,
            status=status,
            current_turn=current_turn,
            guesses_remaining=guesses_remaining,
            revealed_count=state.revealed_count + 1,
        )

    def pass_turn(self, state: GameState) -> GameState:
        """Hand the turn to the other team and clear the clue."""
        self.require_in_progress(state, "pass turn")
        return state.evolve(
            current_turn=state.current_turn.other,
            guesses_remaining=0,
            current_clue=None,
        )

    def reset(self, state: GameState | None = None) -> GameState:
        """Discard ``state`` and deal a brand-new game."""
        return self.create_initial()

    def require_in_progress(self, state: GameState, operation: str) -> None:
        if state.status is not GameStatus.IN_PROGRESS:
            raise NotInProgressError(operation, state.status.value)
