"""Tests for subset enumeration and candidate key generation."""

from __future__ import annotations

from itertools import combinations
from math import comb

import pytest

from beehive.combinations import key_combinations, next_combination, position_subsets
from beehive.dictionary import letter_key


class TestNextCombination:
    def test_advances_rightmost(self) -> None:
        indices = [0, 1, 2]
        assert next_combination(indices, 6)
        assert indices == [0, 1, 3]

    def test_resets_following_indices(self) -> None:
        indices = [0, 4, 5]
        assert next_combination(indices, 6)
        assert indices == [1, 2, 3]

    def test_last_combination(self) -> None:
        indices = [3, 4, 5]
        assert not next_combination(indices, 6)
        assert indices == [3, 4, 5]

    def test_empty_has_no_successor(self) -> None:
        assert not next_combination([], 6)

    def test_full_set_has_no_successor(self) -> None:
        assert not next_combination(list(range(6)), 6)


class TestPositionSubsets:
    def test_count(self) -> None:
        assert len(list(position_subsets(6))) == 64

    def test_no_duplicates(self) -> None:
        subsets = list(position_subsets(6))
        assert len(set(subsets)) == len(subsets)

    @pytest.mark.parametrize("k", range(7))
    def test_matches_itertools_per_size(self, k: int) -> None:
        ours = [s for s in position_subsets(6) if len(s) == k]
        assert len(ours) == comb(6, k)
        assert ours == list(combinations(range(6), k))

    def test_increasing_size(self) -> None:
        sizes = [len(s) for s in position_subsets(6)]
        assert sizes == sorted(sizes)
        assert sizes[0] == 0
        assert sizes[-1] == 6

    def test_zero_positions(self) -> None:
        assert list(position_subsets(0)) == [()]


class TestKeyCombinations:
    def test_complete_for_distinct_letters(self) -> None:
        expected = {
            letter_key("a" + "".join(subset))
            for k in range(7)
            for subset in combinations("bcdefg", k)
        }
        keys = key_combinations("a", "bcdefg")
        assert len(expected) == 64
        assert keys == expected

    def test_every_key_contains_queen(self) -> None:
        for key in key_combinations("l", "pztoon"):
            assert "l" in key

    def test_keys_sorted_and_distinct(self) -> None:
        for key in key_combinations("l", "pztoon"):
            assert key == letter_key(key)

    def test_queen_alone_included(self) -> None:
        assert "a" in key_combinations("a", "bcdefg")

    def test_all_letters_included(self) -> None:
        assert "abcdefg" in key_combinations("a", "bcdefg")

    def test_repeated_worker_collapses(self) -> None:
        # Two o's: 2**5 distinct letter sets from the five distinct workers
        keys = key_combinations("l", "pztoon")
        assert len(keys) == 32

    def test_worker_equal_to_queen_collapses(self) -> None:
        keys = key_combinations("a", "aabbcc")
        assert keys == {"a", "ab", "ac", "abc"}

    def test_at_most_64(self) -> None:
        for queen, workers in [("a", "bcdefg"), ("e", "eeeeee"), ("z", "abcxyz")]:
            assert len(key_combinations(queen, workers)) <= 64

    def test_all_same_letter(self) -> None:
        assert key_combinations("e", "eeeeee") == {"e"}
