"""Injectable randomness for board generation and baseline clue sources."""

from __future__ import annotations

import hashlib
import random
import time


def time_based_seed() -> int:
    """Generate a positive time-derived seed when the caller does not provide one."""
    seed = int(time.time_ns() & 0x7FFFFFFF)
    return seed if seed != 0 else 1


def make_rng(seed: int | None = None) -> random.Random:
    """Return a dedicated ``random.Random``; unseeded sources use a time-based seed."""
    return random.Random(time_based_seed() if seed is None else seed)


def derive_seed(seed: int, *parts: str) -> int:
    """Derive a stable child seed so independent consumers never share a stream."""
    material = ":".join([str(seed), *parts]).encode("utf-8")
    return int.from_bytes(hashlib.sha256(material).digest()[:8], byteorder="big", signed=False)
