"""Tests for the partition module."""

import random
from collections import Counter

import pytest

from team_randomizer.partition import partition_players, shuffle_in_place, team_name


PLAYERS_12 = [f"Player {i}" for i in range(1, 13)]


class TestShuffle:
    """Test cases for the Fisher-Yates shuffle."""

    def test_is_permutation(self):
        """Test that shuffling keeps every element exactly once."""
        items = list(range(20))
        shuffle_in_place(items, random.Random(7))
        assert sorted(items) == list(range(20))

    def test_seeded_is_reproducible(self):
        """Test that the same seed gives the same order."""
        first = list(range(10))
        second = list(range(10))
        shuffle_in_place(first, random.Random(42))
        shuffle_in_place(second, random.Random(42))
        assert first == second

    def test_swap_sequence(self):
        """Test the swaps against a scripted random source."""

        class ScriptedRandom:
            def __init__(self, picks):
                self.picks = list(picks)
                self.calls = []

            def randint(self, a, b):
                self.calls.append((a, b))
                return self.picks.pop(0)

        items = ['a', 'b', 'c', 'd']
        rng = ScriptedRandom([0, 1, 0])
        shuffle_in_place(items, rng)

        # i=3 swaps with 0, i=2 swaps with 1, i=1 swaps with 0
        assert rng.calls == [(0, 3), (0, 2), (0, 1)]
        assert items == ['c', 'd', 'b', 'a']

    def test_all_orderings_reachable(self):
        """Test that every ordering of three items shows up with similar frequency."""
        rng = random.Random(1234)
        counts = Counter()
        for _ in range(6000):
            items = ['a', 'b', 'c']
            shuffle_in_place(items, rng)
            counts[tuple(items)] += 1

        assert len(counts) == 6
        for count in counts.values():
            assert 800 < count < 1200

    def test_empty_and_single(self):
        empty = []
        single = ['a']
        shuffle_in_place(empty, random.Random())
        shuffle_in_place(single, random.Random())
        assert empty == []
        assert single == ['a']


class TestPartitionPlayers:
    """Test cases for partition_players."""

    def test_three_teams_of_four(self):
        """Test that 12 players split into 3 full, disjoint teams."""
        teams = partition_players(PLAYERS_12, 3, 4, random.Random(3))

        assert len(teams) == 3
        assert [team.name for team in teams] == ['Team 1', 'Team 2', 'Team 3']
        for team in teams:
            assert len(team.members) == 4

        members = [member for team in teams for member in team.members]
        assert len(members) == 12
        assert set(members) == set(PLAYERS_12)

    def test_input_not_modified(self):
        players = list(PLAYERS_12)
        partition_players(players, 3, 4, random.Random(3))
        assert players == PLAYERS_12

    def test_chunks_follow_shuffled_order(self):
        """Test that teams are consecutive slices of the shuffled roster."""
        shuffled = list(PLAYERS_12)
        shuffle_in_place(shuffled, random.Random(99))

        teams = partition_players(PLAYERS_12, 4, 3, random.Random(99))

        assert [m for team in teams for m in team.members] == shuffled

    def test_repeated_draws_each_cover_roster(self):
        """Test that different draws may differ but each is complete."""
        rng = random.Random(5)
        draws = set()
        for _ in range(10):
            teams = partition_players(PLAYERS_12, 3, 4, rng)
            members = [m for team in teams for m in team.members]
            assert sorted(members) == sorted(PLAYERS_12)
            draws.add(tuple(tuple(team.members) for team in teams))

        assert len(draws) > 1

    @pytest.mark.parametrize("count", [11, 13, 0])
    def test_wrong_roster_size(self, count):
        """Test that incomplete or oversized rosters are refused."""
        players = [f"Player {i}" for i in range(count)]
        with pytest.raises(ValueError, match="Cannot create teams"):
            partition_players(players, 3, 4, random.Random())

    def test_invalid_shape(self):
        with pytest.raises(ValueError, match="Invalid team shape"):
            partition_players([], 0, 4, random.Random())

    def test_team_name(self):
        assert team_name(0) == "Team 1"
        assert team_name(9) == "Team 10"
