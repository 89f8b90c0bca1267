"""Pydantic request schemas for the game API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateGameRequest(BaseModel):
    """Request body for creating a new game session."""

    seed: int | None = None
    history_limit: int | None = Field(default=None, ge=1)
    start: bool = False


class SetClueRequest(BaseModel):
    """Request body for submitting an explicit clue."""

    word: str
    number: int
    reasoning: str | None = None


class RevealRequest(BaseModel):
    """Request body for revealing one card."""

    index: int
