"""Core team generation state for Team Randomizer."""

import logging
import random
from typing import Any, Dict, Iterable, List, Optional, Union

from .config import Config
from .metrics import players_remaining, total_players_needed
from .models import Outcome, Team
from .partition import partition_players
from .roster import Roster


logger = logging.getLogger(__name__)

SAMPLE_PLAYERS = [
    'Alex Torres',
    'Belén Ruiz',
    'Carlos Díaz',
    'Daniela Soto',
    'Elena Márquez',
    'Federico Ríos',
    'Gabriela Molina',
    'Hernán Vega',
    'Ivana López',
    'Julián Paredes',
    'Karina Santos',
    'Lucas Navarro',
    'Marina Castro',
    'Nicolás Álvarez',
    'Olivia Ramos',
    'Pablo Herrera',
    'Renata Flores',
    'Santiago Núñez',
    'Tamara Iglesias',
    'Valentín Luna',
]


class TeamGenerator:
    """Holds the team shape, the roster and the last generated teams.

    The caller owns the instance and drives it one action at a time. Every
    mutating method returns an ``Outcome`` instead of raising, leaving the
    wording of any feedback to the caller.

    Any change to the roster discards the generated teams. A rejected
    mutation or a refused draw leaves them in place.
    """

    def __init__(self, config: Optional[Config] = None, rng: Optional[random.Random] = None):
        """Initialize the generator.

        Args:
            config: Team shape; defaults to 2 teams of 2
            rng: Random source for shuffling; an unseeded one by default
        """
        self.config = config if config is not None else Config()
        self.rng = rng if rng is not None else random.Random()
        self.roster = Roster()
        self._teams: List[Team] = []

    @property
    def num_teams(self) -> int:
        return self.config.num_teams

    @property
    def team_size(self) -> int:
        return self.config.team_size

    @property
    def players(self) -> List[str]:
        return self.roster.players

    @property
    def teams(self) -> List[Team]:
        return list(self._teams)

    def total_players_needed(self) -> int:
        return total_players_needed(self.num_teams, self.team_size)

    def players_remaining(self) -> int:
        return players_remaining(self.num_teams, self.team_size, len(self.roster))

    def is_ready(self) -> bool:
        """True when the roster holds exactly the number of players needed."""
        return len(self.roster) == self.total_players_needed()

    def set_num_teams(self, value: Any) -> bool:
        """Change the team count, pruning the roster if it no longer fits."""
        return self._change_shape(self.config.set_num_teams, value)

    def set_team_size(self, value: Any) -> bool:
        """Change the team size, pruning the roster if it no longer fits."""
        return self._change_shape(self.config.set_team_size, value)

    def _change_shape(self, setter, value: Any) -> bool:
        previous = (self.num_teams, self.team_size)
        if not setter(value):
            return False

        if (self.num_teams, self.team_size) != previous:
            # Old teams no longer match the shape
            self._teams = []
            removed = self.roster.prune(self.total_players_needed())
            if removed:
                logger.info(f"Removed {len(removed)} players that no longer fit: {', '.join(removed)}")
        return True

    def add_player(self, name: str) -> Outcome:
        outcome = self.roster.add_player(name, self.total_players_needed())
        if outcome:
            self._teams = []
        return outcome

    def add_players(self, names: Iterable[str]) -> Dict[str, List[str]]:
        """Add pasted names in order; see ``Roster.add_players``."""
        summary = self.roster.add_players(names, self.total_players_needed())
        if summary['added']:
            self._teams = []
        return summary

    def remove_player(self, name: str) -> Outcome:
        outcome = self.roster.remove_player(name)
        if outcome:
            self._teams = []
        return outcome

    def set_players(self, names: Iterable[str]) -> Outcome:
        """Replace the roster and discard any generated teams."""
        self._teams = []
        return self.roster.set_players(names, self.total_players_needed())

    def clear_roster(self) -> None:
        """Empty the roster and discard any generated teams."""
        self.roster.clear()
        self._teams = []

    def load_sample_players(self) -> Outcome:
        """Replace the roster with the demonstration list, cut to capacity.

        The demonstration list is longer than most shapes need, so a
        TRUNCATED result is expected and reported as SUCCESS.
        """
        self.set_players(SAMPLE_PLAYERS)
        return Outcome.SUCCESS

    def generate_teams(self) -> Union[List[Team], Outcome]:
        """Randomly split the roster into teams.

        Returns:
            The new teams, or PRECONDITION_FAILURE (with any previous teams
            kept) when the roster is not exactly full
        """
        try:
            teams = partition_players(self.roster.players, self.num_teams, self.team_size, self.rng)
        except ValueError as e:
            logger.debug(f"Generation refused: {e}")
            return Outcome.PRECONDITION_FAILURE

        self._teams = teams
        logger.debug(f"Generated {len(teams)} teams of {self.team_size}")
        return self.teams

    def clear_teams(self) -> None:
        """Discard the generated teams; roster and shape stay as they are."""
        self._teams = []

    def reset(self) -> None:
        """Clear teams and roster and restore the default shape."""
        self._teams = []
        self.roster.clear()
        self.config.reset()

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the current state.

        Returns:
            Dictionary with roster and team statistics
        """
        return {
            'total_players': len(self.roster),
            'num_teams': self.num_teams,
            'team_size': self.team_size,
            'players_needed': self.total_players_needed(),
            'players_remaining': self.players_remaining(),
            'ready': self.is_ready(),
            'teams': {team.name: list(team.members) for team in self._teams}
        }
