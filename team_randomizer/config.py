"""Configuration management for Team Randomizer."""

import logging
from pathlib import Path
from typing import Any, List

import yaml

from .metrics import total_players_needed
from .validators import clamp_shape_value


logger = logging.getLogger(__name__)

MIN_TEAMS = 2
MAX_TEAMS = 10
MIN_TEAM_SIZE = 2
MAX_TEAM_SIZE = 11
DEFAULT_NUM_TEAMS = 2
DEFAULT_TEAM_SIZE = 2


class Config:
    """Team shape: how many teams and how many players in each."""

    def __init__(self, num_teams: int = DEFAULT_NUM_TEAMS, team_size: int = DEFAULT_TEAM_SIZE):
        """Initialize configuration, clamping the given shape into range."""
        self.num_teams: int = DEFAULT_NUM_TEAMS
        self.team_size: int = DEFAULT_TEAM_SIZE
        self.initial_players: List[str] = []
        self.set_num_teams(num_teams)
        self.set_team_size(team_size)

    @property
    def total_needed(self) -> int:
        return total_players_needed(self.num_teams, self.team_size)

    def set_num_teams(self, value: Any) -> bool:
        """Set the number of teams.

        Out-of-range values are clamped into [2, 10].

        Args:
            value: New team count; int, float or numeric string

        Returns:
            False if the value was not numeric and the count was left alone
        """
        clamped = clamp_shape_value(value, MIN_TEAMS, MAX_TEAMS)
        if clamped is None:
            logger.debug(f"Ignoring non-numeric team count: {value!r}")
            return False
        self.num_teams = clamped
        return True

    def set_team_size(self, value: Any) -> bool:
        """Set the number of players per team.

        Out-of-range values are clamped into [2, 11].

        Args:
            value: New team size; int, float or numeric string

        Returns:
            False if the value was not numeric and the size was left alone
        """
        clamped = clamp_shape_value(value, MIN_TEAM_SIZE, MAX_TEAM_SIZE)
        if clamped is None:
            logger.debug(f"Ignoring non-numeric team size: {value!r}")
            return False
        self.team_size = clamped
        return True

    def reset(self) -> None:
        """Restore the default shape."""
        self.num_teams = DEFAULT_NUM_TEAMS
        self.team_size = DEFAULT_TEAM_SIZE

    def load_from_file(self, config_path: Path) -> None:
        """Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If the config file doesn't exist
            yaml.YAMLError: If the YAML file is invalid
            ValueError: If the configuration structure is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)

        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a YAML dictionary")

        teams_config = config_data.get('teams', {})
        if not isinstance(teams_config, dict):
            raise ValueError("teams must be a dictionary")

        if 'count' in teams_config:
            if not self.set_num_teams(teams_config['count']):
                raise ValueError("teams.count must be a number")

        if 'size' in teams_config:
            if not self.set_team_size(teams_config['size']):
                raise ValueError("teams.size must be a number")

        # Players are kept raw; the roster normalizes them on load
        if 'players' in config_data:
            players = config_data['players']
            if isinstance(players, str):
                players = [players]
            if not isinstance(players, list):
                raise ValueError("players must be a list of names")
            self.initial_players = [str(name) for name in players if name is not None]

        logger.debug(
            f"Loaded {config_path}: {self.num_teams} teams of {self.team_size}, "
            f"{len(self.initial_players)} players"
        )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary representation of the configuration
        """
        config_dict = {
            'teams': {
                'count': self.num_teams,
                'size': self.team_size
            }
        }

        if self.initial_players:
            config_dict['players'] = list(self.initial_players)

        return config_dict

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a YAML file.

        Args:
            config_path: Path where to save the configuration
        """
        config_dict = self.to_dict()

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=True, allow_unicode=True)
