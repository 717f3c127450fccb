"""Shared fixtures for Spelling Bee tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from beehive.dictionary import Dictionary

WORDS = [
    # l, o, p, t, z, n family
    "loop", "pool", "loot", "zloty", "polo", "plot", "lotto", "lop",
    "toll", "poll", "pollution", "lotion", "photo", "onto", "noon",
    # letter-equivalent anagrams
    "face", "cafe", "aced", "decaf", "faced",
    # a..g family
    "badge", "cabbage", "bagged", "fade", "deaf", "bead", "dab", "gab",
    "aa", "baa",
]


@pytest.fixture
def small_dictionary() -> Dictionary:
    """Hand-picked words indexed in memory. No file I/O."""
    return Dictionary.from_words(WORDS)


@pytest.fixture
def wordlist_file(tmp_path: Path) -> Path:
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return path
