"""Derived roster metrics."""


def total_players_needed(num_teams: int, team_size: int) -> int:
    """Number of players required to fill every team."""
    return num_teams * team_size


def players_remaining(num_teams: int, team_size: int, roster_size: int) -> int:
    """Open slots left before the roster is complete, never negative."""
    return max(0, total_players_needed(num_teams, team_size) - roster_size)
