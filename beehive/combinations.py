"""Candidate letter keys for every subset of the worker letters."""

from __future__ import annotations

from typing import Iterator

from beehive.dictionary import letter_key


def next_combination(indices: list[int], n: int) -> bool:
    """Advance *indices* in place to the next k-combination of range(n).

    Finds the rightmost index below its maximum (n - k + i), increments it
    and resets every index after it to consecutive values. Returns False,
    leaving *indices* untouched, when the last combination has been reached.
    """
    k = len(indices)
    for i in range(k - 1, -1, -1):
        if indices[i] < n - k + i:
            indices[i] += 1
            for j in range(i + 1, k):
                indices[j] = indices[j - 1] + 1
            return True
    return False


def position_subsets(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every subset of positions range(n) exactly once.

    Subsets come in increasing size, starting with the empty one, and in
    lexicographic order within each size: 2**n subsets in total.
    """
    for k in range(n + 1):
        indices = list(range(k))
        while True:
            yield tuple(indices)
            if not next_combination(indices, n):
                break


def key_combinations(queen: str, workers: str) -> set[str]:
    """Letter keys of the queen combined with each subset of worker positions.

    Worker positions are distinct even when letters repeat, so duplicate
    keys collapse here instead of producing duplicate lookups.
    """
    return {
        letter_key(queen + "".join(workers[i] for i in subset))
        for subset in position_subsets(len(workers))
    }
