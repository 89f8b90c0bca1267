"""FastAPI server exposing a local Codenames game API."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, NoReturn

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from codenames.codenames_events import EventedGameState
from framework.config import EngineConfig, configure_logging
from framework.errors import (
    AlreadyRevealedError,
    ClueSourceError,
    EngineError,
    IndexOutOfRangeError,
    InvalidClueError,
    InvalidStatusError,
)
from server.schemas import CreateGameRequest, RevealRequest, SetClueRequest
from server.session import GameSession, SessionStore

config = EngineConfig.from_env()
configure_logging(config.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Codenames Local API", version="0.1.0")
store = SessionStore(config)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS: tuple[tuple[type[EngineError], int], ...] = (
    (InvalidStatusError, 409),
    (IndexOutOfRangeError, 400),
    (AlreadyRevealedError, 400),
    (InvalidClueError, 400),
    (ClueSourceError, 502),
)


def _raise_http(exc: EngineError) -> NoReturn:
    status_code = next((code for error_type, code in ERROR_STATUS if isinstance(exc, error_type)), 400)
    logger.warning("Rejected request: %s", exc)
    raise HTTPException(status_code=status_code, detail=exc.to_dict()) from exc


def _session(game_id: str) -> GameSession:
    try:
        return store.get(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Unknown game_id: {game_id}") from exc


def _act(
    game_id: str,
    spymaster: bool,
    action: Callable[[GameSession], EventedGameState],
) -> dict[str, Any]:
    session = _session(game_id)
    try:
        evented = action(session)
    except EngineError as exc:
        _raise_http(exc)
    return session.view(spymaster, evented)


@app.get("/api/health")
def health() -> dict[str, str]:
    """Healthcheck endpoint."""
    return {"status": "ok"}


@app.post("/api/game/new")
def new_game(request: CreateGameRequest) -> dict:
    """Create a new in-memory game, optionally starting it right away."""
    try:
        session = store.create(seed=request.seed, history_limit=request.history_limit)
        evented = session.start() if request.start else session.evented
    except EngineError as exc:
        _raise_http(exc)
    return session.view(evented=evented)


@app.get("/api/game/{game_id}")
def get_game(game_id: str, spymaster: bool = Query(default=False)) -> dict:
    """Return the current board and turn information."""
    return _session(game_id).view(spymaster)


@app.post("/api/game/{game_id}/start")
def start_game(game_id: str, spymaster: bool = Query(default=False)) -> dict:
    return _act(game_id, spymaster, lambda session: session.start())


@app.post("/api/game/{game_id}/clue")
def set_clue(game_id: str, request: SetClueRequest, spymaster: bool = Query(default=False)) -> dict:
    """Apply an explicit clue after the board-word check."""
    return _act(
        game_id,
        spymaster,
        lambda session: session.set_clue(request.word, request.number, request.reasoning),
    )


@app.post("/api/game/{game_id}/clue/auto")
def request_clue(game_id: str, spymaster: bool = Query(default=False)) -> dict:
    """Ask the session's clue source for a clue and apply it."""
    return _act(game_id, spymaster, lambda session: session.request_clue())


@app.post("/api/game/{game_id}/reveal")
def reveal_card(game_id: str, request: RevealRequest, spymaster: bool = Query(default=False)) -> dict:
    return _act(game_id, spymaster, lambda session: session.reveal(request.index))


@app.post("/api/game/{game_id}/pass")
def pass_turn(game_id: str, spymaster: bool = Query(default=False)) -> dict:
    return _act(game_id, spymaster, lambda session: session.pass_turn())


@app.post("/api/game/{game_id}/reset")
def reset_game(game_id: str, spymaster: bool = Query(default=False)) -> dict:
    """Deal a new board in the same session; history is discarded."""
    return _act(game_id, spymaster, lambda session: session.reset())


@app.post("/api/game/{game_id}/event/clear")
def clear_event(game_id: str, spymaster: bool = Query(default=False)) -> dict:
    return _act(game_id, spymaster, lambda session: session.clear_event())


@app.get("/api/game/{game_id}/events")
def get_events(game_id: str, count: int | None = Query(default=None, ge=0)) -> list[dict[str, Any]]:
    """Return the most recent events in chronological order."""
    return _session(game_id).recent_events(count)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.main:app", host="0.0.0.0", port=8000, reload=True)
