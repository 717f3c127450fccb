"""Spelling Bee solver: probe the dictionary with every candidate key."""

from __future__ import annotations

from typing import Iterable

from beehive.combinations import key_combinations
from beehive.constants import MIN_WORD_LENGTH
from beehive.dictionary import Dictionary


def find_answers(keys: Iterable[str], dictionary: Dictionary,
                 min_length: int = MIN_WORD_LENGTH) -> list[str]:
    """Collect the words for each key, keeping those at least *min_length* long.

    Keys missing from the dictionary contribute nothing. The result is
    sorted and free of duplicates.
    """
    answers: set[str] = set()
    for key in keys:
        answers.update(w for w in dictionary.words_for(key) if len(w) >= min_length)
    return sorted(answers)


def solve(queen: str, workers: str, dictionary: Dictionary,
          min_length: int = MIN_WORD_LENGTH) -> list[str]:
    """Every dictionary word made only of the puzzle letters that uses *queen*."""
    return find_answers(key_combinations(queen, workers), dictionary, min_length)


def is_pangram(word: str, queen: str, workers: str) -> bool:
    """True if *word* uses every one of the puzzle letters."""
    return set(word) == set(queen + workers)
