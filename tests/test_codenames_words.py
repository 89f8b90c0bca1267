"""Word catalog normalization and loading."""

from __future__ import annotations

import pytest

from codenames.codenames_board import BOARD_SIZE
from codenames.codenames_words import DEFAULT_CATALOG, DEFAULT_WORDS, WordCatalog


def test_default_catalog_is_large_enough_and_unique() -> None:
    assert DEFAULT_CATALOG.has_at_least(BOARD_SIZE)
    assert DEFAULT_CATALOG.size() == len(set(DEFAULT_WORDS)) == len(DEFAULT_WORDS)


def test_catalog_normalizes_and_deduplicates() -> None:
    catalog = WordCatalog(("apple", " Apple ", "", "pear", "APPLE", "  "))

    assert catalog.words == ("APPLE", "PEAR")
    assert catalog.size() == 2
    assert len(catalog) == 2
    assert "apple" in catalog
    assert "plum" not in catalog
    assert list(catalog) == ["APPLE", "PEAR"]


def test_has_at_least_boundaries() -> None:
    catalog = WordCatalog(("a", "b", "c"))

    assert catalog.has_at_least(0)
    assert catalog.has_at_least(3)
    assert not catalog.has_at_least(4)


def test_from_file_reads_one_word_per_line(tmp_path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("castle\n\nriver\ncastle\n", encoding="utf-8")

    catalog = WordCatalog.from_file(path)

    assert catalog.words == ("CASTLE", "RIVER")


def test_from_file_missing_path_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        WordCatalog.from_file(tmp_path / "missing.txt")
