"""In-memory game sessions: one canonical state cell per game, serialized writes."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

from codenames.codenames_clues import ClueProposal, ClueSource, RandomClueSource, normalize_clue
from codenames.codenames_events import EventedCodenamesGame, EventedGameState, get_recent_events
from codenames.codenames_game import CodenamesGame
from codenames.codenames_words import DEFAULT_CATALOG, WordCatalog
from framework.config import EngineConfig
from framework.errors import ClueSourceError, EngineError
from framework.rng import derive_seed, make_rng, time_based_seed
from framework.serialize import to_serializable

logger = logging.getLogger(__name__)

Transition = Callable[[EventedGameState], EventedGameState]


def _serialize_board(evented: EventedGameState, spymaster: bool) -> list[dict[str, Any]]:
    return [
        {
            "index": index,
            "word": tile.word,
            "revealed": tile.revealed,
            "color": tile.color.value if tile.revealed or spymaster else None,
        }
        for index, tile in enumerate(evented.state.board)
    ]


@dataclass
class GameSession:
    """Single in-memory game.

    ``evented`` is the canonical state cell. Every write runs the transition
    against the current snapshot and stores the result while holding
    ``_lock``, so concurrent requests apply one after another.
    """

    session_id: str
    seed: int
    game: EventedCodenamesGame
    clue_source: ClueSource
    evented: EventedGameState
    recent_events_default: int = 5
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def _apply(self, transition: Transition) -> EventedGameState:
        with self._lock:
            self.evented = transition(self.evented)
            return self.evented

    def start(self) -> EventedGameState:
        return self._apply(self.game.start)

    def set_clue(self, word: str, number: int, reasoning: str | None = None) -> EventedGameState:
        """Filter a clue at the table, then hand it to the engine."""

        def transition(evented: EventedGameState) -> EventedGameState:
            clue = normalize_clue(ClueProposal(word=word, number=number, reasoning=reasoning), evented.state.board)
            return self.game.set_clue(evented, clue.word, clue.number)

        return self._apply(transition)

    def request_clue(self) -> EventedGameState:
        """Ask the session's clue source for a clue and apply it."""

        def transition(evented: EventedGameState) -> EventedGameState:
            state = evented.state
            self.game.game.require_in_progress(state, "request clue")
            try:
                proposal = self.clue_source.propose(state.board, state.current_turn)
            except EngineError:
                raise
            except Exception as exc:
                raise ClueSourceError(self.clue_source.source_id, f"Clue source failed: {exc}") from exc
            clue = normalize_clue(proposal, state.board)
            logger.info("Session %s: %s clue %s %d", self.session_id, state.current_turn.value, clue.word, clue.number)
            return self.game.set_clue(evented, clue.word, clue.number)

        return self._apply(transition)

    def reveal(self, index: int) -> EventedGameState:
        return self._apply(lambda evented: self.game.reveal_card(evented, index))

    def pass_turn(self) -> EventedGameState:
        return self._apply(self.game.pass_turn)

    def reset(self) -> EventedGameState:
        logger.info("Session %s reset", self.session_id)
        return self._apply(self.game.reset)

    def clear_event(self) -> EventedGameState:
        return self._apply(self.game.clear_last_event)

    def recent_events(
        self,
        count: int | None = None,
        evented: EventedGameState | None = None,
    ) -> list[dict[str, Any]]:
        limit = self.recent_events_default if count is None else count
        source = evented if evented is not None else self.evented
        return [event.to_dict() for event in get_recent_events(source, limit)]

    def view(self, spymaster: bool = False, evented: EventedGameState | None = None) -> dict[str, Any]:
        """Return a presentation payload; unrevealed colors only for the spymaster.

        Pass the snapshot a write returned to render exactly that state, even if
        another request has replaced the session's cell since.
        """
        if evented is None:
            evented = self.evented
        state = evented.state
        return {
            "game_id": self.session_id,
            "seed": self.seed,
            "status": state.status.value,
            "current_turn": state.current_turn.value,
            "starting_team": state.starting_team.value,
            "score": to_serializable(state.score),
            "current_clue": to_serializable(state.current_clue),
            "guesses_remaining": state.guesses_remaining,
            "revealed_count": state.revealed_count,
            "winner": state.winner.value if state.winner is not None else None,
            "board": _serialize_board(evented, spymaster),
            "last_event": evented.last_event.to_dict() if evented.last_event is not None else None,
            "recent_events": self.recent_events(evented=evented),
            "state_digest": state.state_digest(),
        }


class SessionStore:
    """Keeps game sessions in memory keyed by generated id."""

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()
        self._sessions: dict[str, GameSession] = {}
        self._lock = threading.Lock()
        self._catalog: WordCatalog | None = None

    def catalog(self) -> WordCatalog:
        if self._catalog is None:
            path = self.config.word_list_path
            self._catalog = WordCatalog.from_file(path) if path else DEFAULT_CATALOG
        return self._catalog

    def create(
        self,
        *,
        seed: int | None = None,
        history_limit: int | None = None,
        clue_source: ClueSource | None = None,
    ) -> GameSession:
        resolved_seed = seed if seed is not None else self.config.seed
        if resolved_seed is None:
            resolved_seed = time_based_seed()
        session_id = f"game-{uuid4().hex[:10]}"

        engine = CodenamesGame(catalog=self.catalog(), rng=make_rng(derive_seed(resolved_seed, "board")))
        game = EventedCodenamesGame(
            engine,
            history_limit=history_limit if history_limit is not None else self.config.history_limit,
        )
        source = clue_source or RandomClueSource(
            source_id=f"random-{session_id}",
            rng=make_rng(derive_seed(resolved_seed, "clues")),
        )
        session = GameSession(
            session_id=session_id,
            seed=resolved_seed,
            game=game,
            clue_source=source,
            evented=game.create_initial(),
            recent_events_default=self.config.recent_events,
        )
        with self._lock:
            self._sessions[session_id] = session
        logger.info("Created session %s (seed=%d)", session_id, resolved_seed)
        return session

    def get(self, session_id: str) -> GameSession:
        with self._lock:
            return self._sessions[session_id]
