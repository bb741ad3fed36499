"""Team Randomizer - A tool to split players into equally sized random teams."""

__version__ = "0.1.0"

from .config import Config
from .generator import TeamGenerator
from .models import Outcome, Team

__all__ = ["TeamGenerator", "Config", "Outcome", "Team"]
