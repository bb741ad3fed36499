"""Formatting and export of generated teams."""

from pathlib import Path
from typing import Sequence
from urllib.parse import quote

import pandas as pd
import yaml

from .models import Team


WHATSAPP_URL = "https://wa.me/?text="


def format_teams_text(teams: Sequence[Team]) -> str:
    """Render teams as plain text for copying or sharing.

    Each team is its name followed by one member per line; teams are
    separated by a blank line.
    """
    return "\n\n".join(
        f"{team.name}:\n" + "\n".join(team.members) for team in teams
    )


def whatsapp_link(teams: Sequence[Team]) -> str:
    """Build a WhatsApp share link carrying the formatted teams."""
    text = format_teams_text(teams)
    if not text:
        return ""
    return WHATSAPP_URL + quote(text, safe="")


def save_teams_yaml(teams: Sequence[Team], output_path: Path) -> None:
    """Save teams to YAML, keeping team order and member order.

    Args:
        teams: Generated teams
        output_path: Path where to save the YAML file
    """
    yaml_data = {'teams': [team.to_dict() for team in teams]}

    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


def save_teams_csv(teams: Sequence[Team], output_path: Path) -> None:
    """Save teams to CSV with one row per player.

    Args:
        teams: Generated teams
        output_path: Path where to save the CSV file
    """
    rows = [(team.name, member) for team in teams for member in team.members]
    df = pd.DataFrame(rows, columns=['team', 'player'])
    df.to_csv(output_path, index=False)


def save_teams(teams: Sequence[Team], output_path: Path) -> None:
    """Save teams in the format implied by the file extension.

    Raises:
        ValueError: If the extension is not .csv, .yaml or .yml
    """
    suffix = output_path.suffix.lower()
    if suffix == '.csv':
        save_teams_csv(teams, output_path)
    elif suffix in ('.yaml', '.yml'):
        save_teams_yaml(teams, output_path)
    else:
        raise ValueError(f"Unsupported output format: {output_path.suffix or '(none)'}")
