"""Tests for GA operators."""

from __future__ import annotations

import numpy as np
import pytest

from ga_strings.ga.operators import crossover_single_point, mutation, select_parents
from ga_strings.models.config import SelectionStrategy
from ga_strings.models.individual import Individual


class TestCrossoverSinglePoint:
    def test_same_parents_produce_same_children(self, rng):
        ch1, ch2 = crossover_single_point("abcdef", "abcdef", rng)
        assert ch1 == "abcdef"
        assert ch2 == "abcdef"

    def test_children_have_parent_length(self, rng):
        ch1, ch2 = crossover_single_point("aaaaaa", "bbbbbb", rng)
        assert len(ch1) == 6
        assert len(ch2) == 6

    def test_split_is_strictly_inside(self):
        rng = np.random.default_rng(0)
        for _ in range(200):
            ch1, ch2 = crossover_single_point("aaaa", "bbbb", rng)
            # Each child starts with one parent and ends with the other
            assert ch1[0] == "a" and ch1[-1] == "b"
            assert ch2[0] == "b" and ch2[-1] == "a"

    def test_children_are_complementary(self, rng):
        p1, p2 = "ABCDEFGH", "abcdefgh"
        ch1, ch2 = crossover_single_point(p1, p2, rng)
        split = next(i for i, c in enumerate(ch1) if c.islower())
        assert ch1 == p1[:split] + p2[split:]
        assert ch2 == p2[:split] + p1[split:]

    def test_every_interior_split_occurs(self):
        rng = np.random.default_rng(3)
        splits = set()
        for _ in range(300):
            ch1, _ = crossover_single_point("aaaaa", "bbbbb", rng)
            splits.add(ch1.index("b"))
        assert splits == {1, 2, 3, 4}

    def test_length_one_is_noop(self, rng):
        ch1, ch2 = crossover_single_point("X", "Y", rng)
        assert (ch1, ch2) == ("X", "Y")

    def test_two_symbols_always_split_in_middle(self, rng):
        ch1, ch2 = crossover_single_point("AB", "CD", rng)
        assert (ch1, ch2) == ("AD", "CB")


class TestMutation:
    def test_disabled_returns_unchanged(self, rng):
        assert mutation("hello", "xyz", rng, mutation_rate=1.0, enabled=False) == "hello"

    def test_zero_rate_returns_unchanged(self, rng):
        assert mutation("hello", "xyz", rng, mutation_rate=0.0) == "hello"

    def test_full_rate_draws_from_pool(self, rng):
        result = mutation("hello world", "xyz", rng, mutation_rate=1.0)
        assert len(result) == 11
        assert set(result) <= set("xyz")

    def test_partial_rate_changes_some_positions(self):
        rng = np.random.default_rng(42)
        dna = "a" * 1000
        result = mutation(dna, "b", rng, mutation_rate=0.1)
        changed = sum(1 for c in result if c == "b")
        assert 50 < changed < 150

    def test_empty_sequence(self, rng):
        assert mutation("", "abc", rng, mutation_rate=1.0) == ""


class TestSelectParents:
    @pytest.fixture
    def survivors(self) -> list[Individual]:
        return [Individual(dna="AA", fitness=2), Individual(dna="AB", fitness=1)]

    @pytest.fixture
    def population(self, survivors) -> list[Individual]:
        return survivors + [Individual(dna="zz", fitness=0) for _ in range(20)]

    def test_elitism_uses_survivors_only(self, survivors, population, rng):
        for _ in range(100):
            p1, p2 = select_parents(SelectionStrategy.ELITISM, survivors, population, rng)
            assert p1 in survivors
            assert p2 in survivors

    def test_semi_elitism_first_parent_from_survivors(self, survivors, population, rng):
        second_parents = set()
        for _ in range(100):
            p1, p2 = select_parents(SelectionStrategy.SEMI_ELITISM, survivors, population, rng)
            assert p1 in survivors
            second_parents.add(p2.dna)
        assert "zz" in second_parents

    def test_random_draws_from_population(self, survivors, population, rng):
        firsts = set()
        for _ in range(100):
            p1, _ = select_parents(SelectionStrategy.RANDOM, survivors, population, rng)
            firsts.add(p1.dna)
        assert "zz" in firsts
