"""Random partition of a complete roster into equally sized teams."""

import random
from typing import List, MutableSequence, Sequence

from .models import Team


TEAM_NAME_FORMAT = "Team {number}"


def shuffle_in_place(items: MutableSequence, rng: random.Random) -> None:
    """Fisher-Yates shuffle.

    Walks from the last index down to 1, swapping each element with one
    picked uniformly from ``[0, i]``, so every ordering is equally likely.

    Args:
        items: Sequence to shuffle in place
        rng: Random source; only ``randint`` is used
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


def team_name(index: int) -> str:
    """Display name for the team at the given zero-based position."""
    return TEAM_NAME_FORMAT.format(number=index + 1)


def partition_players(
    players: Sequence[str],
    num_teams: int,
    team_size: int,
    rng: random.Random
) -> List[Team]:
    """Split players into ``num_teams`` random teams of ``team_size``.

    The input is not modified.

    Args:
        players: Unique player names; exactly ``num_teams * team_size``
        num_teams: Number of teams to create
        team_size: Players per team
        rng: Random source

    Returns:
        Teams in order, named "Team 1", "Team 2", ...

    Raises:
        ValueError: If the number of players does not fill every team exactly
    """
    if num_teams < 1 or team_size < 1:
        raise ValueError(f"Invalid team shape: {num_teams} teams of {team_size}")

    needed = num_teams * team_size
    if len(players) != needed:
        raise ValueError(
            f"Cannot create teams: {len(players)} players for "
            f"{num_teams} teams of {team_size} ({needed} needed)"
        )

    shuffled = list(players)
    shuffle_in_place(shuffled, rng)

    return [
        Team(name=team_name(k), members=shuffled[k * team_size:(k + 1) * team_size])
        for k in range(num_teams)
    ]
