"""Board generation: team choice, color distribution and word draw."""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass

from framework.errors import BoardInvariantError, InsufficientWordsError

from .codenames_state import Board, CardColor, Team, Tile
from .codenames_words import DEFAULT_CATALOG, WordCatalog

logger = logging.getLogger(__name__)

BOARD_SIZE = 25
STARTING_TEAM_CARDS = 9
SECOND_TEAM_CARDS = 8
NEUTRAL_CARDS = 7
ASSASSIN_CARDS = 1


@dataclass(frozen=True)
class BoardConfig:
    """Card counts for one board; the starting team is dealt the extra card."""

    total: int
    red_count: int
    blue_count: int
    neutral_count: int
    assassin_count: int

    def color_counts(self) -> dict[CardColor, int]:
        return {
            CardColor.RED: self.red_count,
            CardColor.BLUE: self.blue_count,
            CardColor.NEUTRAL: self.neutral_count,
            CardColor.ASSASSIN: self.assassin_count,
        }


def choose_starting_team(rng: random.Random) -> Team:
    """Pick the starting team uniformly at random."""
    return rng.choice([Team.RED, Team.BLUE])


def board_config(starting_team: Team) -> BoardConfig:
    return BoardConfig(
        total=BOARD_SIZE,
        red_count=STARTING_TEAM_CARDS if starting_team is Team.RED else SECOND_TEAM_CARDS,
        blue_count=STARTING_TEAM_CARDS if starting_team is Team.BLUE else SECOND_TEAM_CARDS,
        neutral_count=NEUTRAL_CARDS,
        assassin_count=ASSASSIN_CARDS,
    )


def _color_distribution(config: BoardConfig, rng: random.Random) -> list[CardColor]:
    colors = (
        [CardColor.RED] * config.red_count
        + [CardColor.BLUE] * config.blue_count
        + [CardColor.NEUTRAL] * config.neutral_count
        + [CardColor.ASSASSIN] * config.assassin_count
    )
    rng.shuffle(colors)
    return colors


def generate_board(
    starting_team: Team,
    rng: random.Random,
    catalog: WordCatalog = DEFAULT_CATALOG,
) -> Board:
    """Draw ``BOARD_SIZE`` distinct words and pair them with a shuffled color list.

    Words and colors are shuffled independently, so a color never depends on
    which word it lands on.

    Raises:
        InsufficientWordsError: If the catalog holds fewer words than the board needs.
    """
    config = board_config(starting_team)
    if not catalog.has_at_least(config.total):
        raise InsufficientWordsError(required=config.total, available=catalog.size())

    # sample() returns a uniformly random ordered subset, equivalent to a full
    # Fisher-Yates shuffle followed by a slice.
    words = rng.sample(catalog.words, config.total)
    colors = _color_distribution(config, rng)
    board = tuple(Tile(word=word, color=color) for word, color in zip(words, colors, strict=True))

    validate_board(board, config, catalog)
    logger.debug("Generated board for starting team %s: %s", starting_team.value, ", ".join(words))
    return board


def validate_board(board: Board, config: BoardConfig, catalog: WordCatalog | None = None) -> None:
    """Check size, color counts and word uniqueness of a board.

    Raises:
        BoardInvariantError: On the first violated rule.
    """
    if len(board) != config.total:
        raise BoardInvariantError(f"Board has {len(board)} cards, expected {config.total}")

    counts = Counter(tile.color for tile in board)
    expected = config.color_counts()
    if any(counts.get(color, 0) != count for color, count in expected.items()):
        found = {color.value: counts.get(color, 0) for color in CardColor}
        raise BoardInvariantError(f"Board color counts {found} do not match {config}")

    words = [tile.word for tile in board]
    if len(set(words)) != len(words):
        raise BoardInvariantError("Board words are not unique")
    if catalog is not None:
        missing = [word for word in words if word not in catalog]
        if missing:
            raise BoardInvariantError(f"Board words not in catalog: {missing}")


def count_remaining(board: Board) -> dict[CardColor, int]:
    """Count unrevealed cards for each color."""
    remaining = {color: 0 for color in CardColor}
    for tile in board:
        if not tile.revealed:
            remaining[tile.color] += 1
    return remaining


def check_win_condition(board: Board) -> CardColor | None:
    """Return ASSASSIN if it was revealed, else the team color with nothing left, else None."""
    if any(tile.color is CardColor.ASSASSIN and tile.revealed for tile in board):
        return CardColor.ASSASSIN
    remaining = count_remaining(board)
    if remaining[CardColor.RED] == 0:
        return CardColor.RED
    if remaining[CardColor.BLUE] == 0:
        return CardColor.BLUE
    return None
