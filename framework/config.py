"""Environment-backed engine configuration and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

_DOTENV_LOADED = False

ENV_SEED = "CODENAMES_SEED"
ENV_HISTORY_LIMIT = "CODENAMES_HISTORY_LIMIT"
ENV_WORD_LIST = "CODENAMES_WORD_LIST"
ENV_RECENT_EVENTS = "CODENAMES_RECENT_EVENTS"
ENV_LOG_LEVEL = "CODENAMES_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def load_dotenv(path: str | Path = ".env", *, force: bool = False) -> None:
    """Load environment variables from a .env file without overriding existing values."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED and not force:
        return

    dotenv_path = Path(path)
    if not dotenv_path.exists():
        _DOTENV_LOADED = True
        return

    for raw_line in dotenv_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[7:].strip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if value.startswith(("'", '"')) and value.endswith(("'", '"')) and len(value) >= 2:
            value = value[1:-1]
        os.environ.setdefault(key, value)

    _DOTENV_LOADED = True


def getenv_any(*names: str, default: str | None = None) -> str | None:
    """Return first defined env var from a list of candidate names."""
    load_dotenv()
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


def _optional_int(name: str) -> int | None:
    raw = getenv_any(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer; received {raw!r}") from exc


@dataclass(frozen=True)
class EngineConfig:
    """Runtime configuration shared by the engine and the local server."""

    seed: int | None = None
    history_limit: int | None = None
    word_list_path: str | None = None
    recent_events: int = 5
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.history_limit is not None and self.history_limit < 1:
            raise ValueError("history_limit must be >= 1 when set.")
        if self.recent_events < 0:
            raise ValueError("recent_events must be >= 0.")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build configuration from CODENAMES_* environment variables."""
        recent_events = _optional_int(ENV_RECENT_EVENTS)
        return cls(
            seed=_optional_int(ENV_SEED),
            history_limit=_optional_int(ENV_HISTORY_LIMIT),
            word_list_path=getenv_any(ENV_WORD_LIST),
            recent_events=5 if recent_events is None else recent_events,
            log_level=(getenv_any(ENV_LOG_LEVEL, default="INFO") or "INFO").upper(),
        )


def configure_logging(level: str | int = "INFO") -> None:
    """Install one stream handler on the root logger (idempotent)."""
    root = logging.getLogger()
    root.setLevel(level)
    if any(getattr(handler, "_codenames_handler", False) for handler in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler._codenames_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
