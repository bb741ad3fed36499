"""Roster management for Team Randomizer."""

import logging
from typing import Dict, Iterable, List

from .models import Outcome
from .validators import is_valid_player_name, normalize_player_name


logger = logging.getLogger(__name__)


class Roster:
    """Ordered list of unique, normalized player names.

    Capacity is not stored here; every mutating call receives the current
    ``total_needed`` so the roster can never grow past it. None of the
    methods raise: failures come back as ``Outcome`` codes.
    """

    def __init__(self):
        self._players: List[str] = []

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, name) -> bool:
        return normalize_player_name(name) in self._players

    @property
    def players(self) -> List[str]:
        return list(self._players)

    def add_player(self, name: str, capacity: int) -> Outcome:
        """Append a player if there is room and they are not already listed.

        Args:
            name: Raw player name
            capacity: Current number of players needed

        Returns:
            SUCCESS, or one of these with the roster unchanged:
            INVALID_NAME when the name is empty or longer than
            MAX_NAME_LENGTH characters, CAPACITY_REJECTED when the roster is
            full, DUPLICATE_REJECTED when the name is already listed
        """
        normalized = normalize_player_name(name)
        if not is_valid_player_name(normalized):
            return Outcome.INVALID_NAME
        if len(self._players) >= capacity:
            return Outcome.CAPACITY_REJECTED
        if normalized in self._players:
            return Outcome.DUPLICATE_REJECTED

        self._players.append(normalized)
        logger.debug(f"Added {normalized} ({len(self._players)}/{capacity})")
        return Outcome.SUCCESS

    def add_players(self, names: Iterable[str], capacity: int) -> Dict[str, List[str]]:
        """Add several players in order, as when a list is pasted in.

        Stops adding once the roster is full; names left over are reported
        as rejected.

        Args:
            names: Raw player names
            capacity: Current number of players needed

        Returns:
            Dictionary with the ``added``, ``duplicates``, ``invalid`` and
            ``rejected`` names
        """
        summary = {'added': [], 'duplicates': [], 'invalid': [], 'rejected': []}

        for name in names:
            outcome = self.add_player(name, capacity)
            normalized = normalize_player_name(name)
            if outcome is Outcome.SUCCESS:
                summary['added'].append(normalized)
            elif outcome is Outcome.DUPLICATE_REJECTED:
                summary['duplicates'].append(normalized)
            elif outcome is Outcome.CAPACITY_REJECTED:
                summary['rejected'].append(normalized)
            else:
                summary['invalid'].append(name)

        return summary

    def remove_player(self, name: str) -> Outcome:
        """Remove a player by name; NOT_FOUND if they are not listed."""
        normalized = normalize_player_name(name)
        if normalized not in self._players:
            return Outcome.NOT_FOUND

        self._players.remove(normalized)
        logger.debug(f"Removed {normalized}")
        return Outcome.SUCCESS

    def set_players(self, names: Iterable[str], capacity: int) -> Outcome:
        """Replace the roster wholesale.

        Names are normalized, empty ones dropped, duplicates collapsed with
        the first occurrence winning, and the result truncated to capacity.

        Args:
            names: Raw player names
            capacity: Current number of players needed

        Returns:
            TRUNCATED if names had to be cut off to fit (the cut-down list is
            still applied), else SUCCESS
        """
        unique: List[str] = []
        for name in names:
            normalized = normalize_player_name(name)
            if is_valid_player_name(normalized) and normalized not in unique:
                unique.append(normalized)

        self._players = unique[:max(0, capacity)]
        logger.debug(f"Roster replaced with {len(self._players)} players")

        if len(unique) > capacity:
            return Outcome.TRUNCATED
        return Outcome.SUCCESS

    def clear(self) -> None:
        """Remove every player."""
        self._players = []

    def prune(self, capacity: int) -> List[str]:
        """Drop the newest players beyond capacity.

        Returns:
            The players that were removed, in roster order
        """
        capacity = max(0, capacity)
        removed = self._players[capacity:]
        if removed:
            self._players = self._players[:capacity]
            logger.debug(f"Pruned {len(removed)} players to fit {capacity}: {removed}")
        return removed
