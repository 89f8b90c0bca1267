"""Word catalog used to draw Codenames boards."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

DEFAULT_WORDS: tuple[str, ...] = (
    # Animals
    "CAT", "DOG", "LION", "BEAR", "EAGLE", "SHARK", "HORSE", "WHALE", "TIGER", "RABBIT",
    # Nature
    "TREE", "OCEAN", "MOUNTAIN", "RIVER", "CLOUD", "MOON", "STAR", "SUN", "RAIN", "SNOW",
    # Objects
    "PHONE", "BOOK", "KEY", "RING", "WATCH", "CROWN", "SWORD", "SHIELD", "HAMMER", "NAIL",
    # Places
    "PARK", "SCHOOL", "HOSPITAL", "BANK", "HOTEL", "CASTLE", "BRIDGE", "TOWER", "TEMPLE", "MARKET",
    # Food
    "PIZZA", "BREAD", "APPLE", "ORANGE", "CHEESE", "HONEY", "SALT", "SUGAR", "WATER", "COFFEE",
    # Actions and concepts
    "JUMP", "DANCE", "SING", "DREAM", "SLEEP", "FIGHT", "LOVE", "PEACE", "TIME", "SPACE",
    # Body
    "HAND", "FOOT", "HEAD", "HEART", "EYE", "EAR", "MOUTH", "TOOTH",
    # Colors and descriptors
    "GOLD", "SILVER", "DIAMOND", "CRYSTAL", "SHADOW", "LIGHT", "DARK", "BRIGHT", "COLD", "HOT",
)


def _normalize(words: Iterable[str]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for raw in words:
        word = str(raw).strip().upper()
        if word:
            seen.setdefault(word, None)
    return tuple(seen)


@dataclass(frozen=True)
class WordCatalog:
    """Fixed, deduplicated set of candidate board words.

    Words are stripped and upper-cased on construction; blanks are dropped and
    repeats keep their first position.
    """

    words: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "words", _normalize(self.words))

    @classmethod
    def from_file(cls, path: str | Path) -> "WordCatalog":
        """Load a catalog from a text file with one word per line.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
        """
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Word list file not found: {file_path}")
        catalog = cls(tuple(file_path.read_text(encoding="utf-8").splitlines()))
        logger.info("Loaded %d words from %s", catalog.size(), file_path)
        return catalog

    def size(self) -> int:
        return len(self.words)

    def has_at_least(self, count: int) -> bool:
        return len(self.words) >= count

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.strip().upper() in self.words

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)


DEFAULT_CATALOG = WordCatalog(DEFAULT_WORDS)
