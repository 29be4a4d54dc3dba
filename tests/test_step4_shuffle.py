#!/usr/bin/env python
"""Step 4: Shuffle - unit tests"""

import random
from collections import Counter

import pytest

from bioideas.S4_shuffle import shuffle


class TestShuffle:
    """Fisher-Yates shuffle"""

    def test_same_multiset(self):
        """Output is a permutation of the input"""
        items = list(range(50)) + [7, 7]
        assert Counter(shuffle(items)) == Counter(items)

    def test_input_untouched(self):
        """The input list is not reordered"""
        items = list(range(20))
        shuffle(items, rng=random.Random(1))
        assert items == list(range(20))

    def test_seeded_is_reproducible(self):
        """Same seed, same order"""
        items = list(range(30))
        assert shuffle(items, rng=random.Random(42)) == shuffle(items, rng=random.Random(42))

    def test_actually_shuffles(self):
        """Some seed moves something"""
        items = list(range(30))
        assert any(shuffle(items, rng=random.Random(seed)) != items for seed in range(5))

    def test_small_inputs(self):
        """Empty and single-item inputs"""
        assert shuffle([]) == []
        assert shuffle(["only"]) == ["only"]

    def test_accepts_tuple(self):
        """Any sequence; a list comes back"""
        assert sorted(shuffle((3, 1, 2))) == [1, 2, 3]


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
