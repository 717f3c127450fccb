"""Letter-key dictionary index: words grouped by the distinct letters they use."""

from __future__ import annotations

import json
from collections import defaultdict
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from beehive.constants import DEFAULT_INDEX_PATH, DEFAULT_WORDLIST_PATH


def letter_key(letters: str) -> str:
    """Return the sorted distinct letters of *letters*, e.g. "balloon" -> "ablno"."""
    return "".join(sorted(set(letters)))


def read_words(path: str | Path) -> Iterator[str]:
    """Yield the words of a newline-delimited word list, skipping blank lines."""
    with open(path, encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word:
                yield word


def build_index(words: Iterable[str]) -> dict[str, str]:
    """Group words by letter key.

    Each value holds every word sharing that key exactly once, sorted and
    joined by single spaces.
    """
    groups: dict[str, set[str]] = defaultdict(set)
    for word in words:
        groups[letter_key(word)].add(word)
    return {key: " ".join(sorted(group)) for key, group in groups.items()}


def save_index(index: Mapping[str, str], path: str | Path) -> None:
    """Write the index as a JSON object with sorted keys."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(dict(index), f, sort_keys=True, indent=0)
        f.write("\n")


def load_index(path: str | Path) -> dict[str, str]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ValueError(f"{path} is not a letter-key index (expected an object of strings)")
    return data


class Dictionary:
    """Read-only mapping from letter key to the words that use exactly those letters."""

    def __init__(self, index: Mapping[str, str]) -> None:
        self._index = MappingProxyType(dict(index))
        self._word_count = sum(len(words.split()) for words in self._index.values())

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Dictionary:
        return cls(build_index(words))

    @classmethod
    def load(cls, path: str | Path) -> Dictionary:
        """Load a prebuilt ``.json`` index, or build one from a raw word list."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Dictionary not found at {path}")
        if path.suffix == ".json":
            return cls(load_index(path))
        return cls.from_words(read_words(path))

    def get(self, key: str) -> str | None:
        """Return the space-delimited words for *key*, or None when no word matches."""
        return self._index.get(key)

    def words_for(self, key: str) -> list[str]:
        return (self._index.get(key) or "").split()

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._index)

    @property
    def word_count(self) -> int:
        return self._word_count


def load_default_dictionary() -> Dictionary:
    """Load the index from the data/ directory, building it from the word list if needed."""
    if DEFAULT_INDEX_PATH.exists():
        return Dictionary.load(DEFAULT_INDEX_PATH)
    if DEFAULT_WORDLIST_PATH.exists():
        return Dictionary.load(DEFAULT_WORDLIST_PATH)
    raise FileNotFoundError(
        f"Dictionary not found at {DEFAULT_INDEX_PATH}. "
        f"Download a word list to {DEFAULT_WORDLIST_PATH} "
        "and run `beehive build` on it"
    )
