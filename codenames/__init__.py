"""Codenames package exports."""

from .codenames_board import BoardConfig, board_config, choose_starting_team, generate_board
from .codenames_clues import ClueProposal, ClueSource, RandomClueSource, ScriptedClueSource, normalize_clue
from .codenames_events import (
    EventedCodenamesGame,
    EventedGameState,
    GameEvent,
    Outcome,
    clear_last_event,
    get_recent_events,
)
from .codenames_game import CodenamesGame
from .codenames_state import Board, CardColor, Clue, GameState, GameStatus, Score, Team, Tile
from .codenames_words import DEFAULT_CATALOG, WordCatalog

__all__ = [
    "Board",
    "BoardConfig",
    "CardColor",
    "Clue",
    "ClueProposal",
    "ClueSource",
    "CodenamesGame",
    "DEFAULT_CATALOG",
    "EventedCodenamesGame",
    "EventedGameState",
    "GameEvent",
    "GameState",
    "GameStatus",
    "Outcome",
    "RandomClueSource",
    "Score",
    "ScriptedClueSource",
    "Team",
    "Tile",
    "WordCatalog",
    "board_config",
    "choose_starting_team",
    "clear_last_event",
    "generate_board",
    "get_recent_events",
    "normalize_clue",
]
