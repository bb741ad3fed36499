"""Command-line interface for Team Randomizer."""

import logging
import random
import sys
import time
from pathlib import Path
from typing import Optional

import click
import yaml

from team_randomizer.config import Config
from team_randomizer.generator import TeamGenerator
from team_randomizer.messages import LEVEL_COLORS, bulk_message, message_for, progress_message
from team_randomizer.models import Outcome
from team_randomizer.share import format_teams_text, save_teams, whatsapp_link
from team_randomizer.validators import load_names_file, normalize_player_name, split_names


class ColoredFormatter(logging.Formatter):
  """Formatter that colours records by level."""

  LEVEL_COLORS = {
    "DEBUG": "blue",
    "INFO": None,
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red",
  }

  def format(self, record: logging.LogRecord) -> str:
    message = record.getMessage()
    color = self.LEVEL_COLORS.get(record.levelname)
    return click.style(message, fg=color) if color else message


def setup_logging(verbose: bool = False) -> None:
  """Send log records to stdout; DEBUG when verbose."""
  handler = logging.StreamHandler(sys.stdout)
  handler.setFormatter(ColoredFormatter())

  root_logger = logging.getLogger()
  root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
  root_logger.handlers.clear()
  root_logger.addHandler(handler)


def echo_message(text: str, level: str) -> None:
  click.secho(text, fg=LEVEL_COLORS.get(level))


def echo_outcome(outcome: Outcome, **context) -> None:
  echo_message(*message_for(outcome, **context))


def echo_teams(generator: TeamGenerator) -> None:
  for team in generator.teams:
    click.secho(f"{team.name}:", fg="green", bold=True)
    for member in team.members:
      click.echo(f"  {member}")
    click.echo()


def echo_progress(generator: TeamGenerator) -> None:
  click.secho(
    f"{len(generator.roster)} of {generator.total_players_needed()} players loaded",
    fg="blue",
  )


def build_generator(config_file: Optional[Path], teams: Optional[int], size: Optional[int],
                    seed: Optional[int]) -> TeamGenerator:
  """Create a generator from an optional config file and option overrides."""
  config = Config()
  if config_file is not None:
    try:
      config.load_from_file(config_file)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
      click.secho(f"Error: {e}", fg="red")
      sys.exit(1)

  rng = random.Random(seed) if seed is not None else None
  generator = TeamGenerator(config, rng)
  if teams is not None:
    generator.set_num_teams(teams)
  if size is not None:
    generator.set_team_size(size)
  if config.initial_players:
    outcome = generator.set_players(config.initial_players)
    if outcome is Outcome.TRUNCATED:
      echo_outcome(outcome, capacity=generator.total_players_needed())
  return generator


@click.group()
def cli():
  """Team Randomizer CLI for splitting players into random teams."""
  pass


@cli.command()
@click.option("--teams", "num_teams", type=int, help="Number of teams (2-10)")
@click.option("--size", "team_size", type=int, help="Players per team (2-11)")
@click.option("--config", "config_file", type=click.Path(path_type=Path), help="YAML configuration file")
@click.option("--input", "input_files", type=click.Path(exists=True, path_type=Path),
              multiple=True, help="Text or CSV file with player names")
@click.option("--player", "player_names", multiple=True, help="Player name (repeatable)")
@click.option("--sample", is_flag=True, help="Load the demonstration player list")
@click.option("--output", "output_file", type=click.Path(path_type=Path), help="Save teams to .yaml or .csv")
@click.option("--whatsapp", is_flag=True, help="Print a WhatsApp share link")
@click.option("--seed", type=int, help="Seed for a reproducible draw")
@click.option("--verbose", is_flag=True, help="Enable verbose (DEBUG level) logging")
def generate(num_teams: Optional[int], team_size: Optional[int], config_file: Optional[Path],
             input_files: tuple, player_names: tuple, sample: bool, output_file: Optional[Path],
             whatsapp: bool, seed: Optional[int], verbose: bool):
  """Load players and split them into random teams."""
  setup_logging(verbose)
  generator = build_generator(config_file, num_teams, team_size, seed)

  if sample:
    generator.load_sample_players()
    click.secho("Sample players loaded.", fg="blue")

  names = list(player_names)
  for path in input_files:
    try:
      names.extend(load_names_file(path))
    except (FileNotFoundError, ValueError) as e:
      click.secho(f"Error: {e}", fg="red")
      sys.exit(1)

  if names:
    summary = generator.add_players(names)
    for name in summary['duplicates']:
      echo_outcome(Outcome.DUPLICATE_REJECTED, name=name)
    if summary['invalid']:
      click.secho(f"Skipped {len(summary['invalid'])} invalid names", fg="yellow")
    if summary['rejected']:
      click.secho(f"Player limit reached; skipped: {', '.join(summary['rejected'])}", fg="yellow")

  echo_progress(generator)
  result = generator.generate_teams()
  if result is Outcome.PRECONDITION_FAILURE:
    echo_outcome(result, remaining=generator.players_remaining())
    sys.exit(1)

  echo_teams(generator)

  if output_file is not None:
    try:
      save_teams(generator.teams, output_file)
    except ValueError as e:
      click.secho(f"Error: {e}", fg="red")
      sys.exit(1)
    click.secho(f"Saved teams to {output_file}", fg="green")

  if whatsapp:
    click.echo(whatsapp_link(generator.teams))


@cli.command("init-config")
@click.argument("config_file", type=click.Path(path_type=Path))
@click.option("--teams", "num_teams", type=int, default=2, help="Number of teams (2-10)")
@click.option("--size", "team_size", type=int, default=2, help="Players per team (2-11)")
def init_config(config_file: Path, num_teams: int, team_size: int):
  """Write a configuration file with the given team shape."""
  if config_file.exists() and not click.confirm(f"{config_file} exists; overwrite?", default=False):
    click.secho(f"Skipping {config_file}", fg="green")
    return

  config = Config(num_teams, team_size)
  config.save_to_file(config_file)
  click.secho(
    f"Wrote {config_file}: {config.num_teams} teams of {config.team_size}", fg="green"
  )


WIZARD_HELP = """Type a name to add it, or a command:
  :remove NAME  remove a player
  :list         show the roster
  :paste        add several names, one per line, ending with an empty line
  :sample       load the demonstration list
  :clear        empty the roster
  :done         generate the teams
  :quit         exit"""

RESULTS_HELP = """Commands:
  :share        print the teams as text
  :whatsapp     print a WhatsApp share link
  :regenerate   draw the teams again
  :back         go back to the player list
  :reset        start over with the default settings
  :quit         exit"""


def wizard_settings(generator: TeamGenerator) -> None:
  click.secho("Step 1 of 3: team settings", fg="blue", bold=True)
  while not generator.set_num_teams(click.prompt("Number of teams (2-10)", default=str(generator.num_teams))):
    click.secho("Please enter a number.", fg="red")
  while not generator.set_team_size(click.prompt("Players per team (2-11)", default=str(generator.team_size))):
    click.secho("Please enter a number.", fg="red")
  click.secho(
    f"{generator.num_teams} teams of {generator.team_size}: "
    f"{generator.total_players_needed()} players needed",
    fg="green",
  )


def wizard_players(generator: TeamGenerator) -> bool:
  """Collect players until the roster is complete; False to quit."""
  click.secho("Step 2 of 3: players", fg="blue", bold=True)
  click.echo(WIZARD_HELP)
  while True:
    remaining = generator.players_remaining()
    prompt = f"Player ({remaining} left)" if remaining else "Roster complete; :done to generate"
    entry = click.prompt(prompt, default="", show_default=False).strip()

    if not entry:
      continue
    if entry == ":quit":
      return False
    if entry == ":done":
      if generator.is_ready():
        return True
      echo_outcome(Outcome.PRECONDITION_FAILURE, remaining=remaining)
    elif entry == ":list":
      for index, name in enumerate(generator.players, 1):
        click.echo(f"  {index}. {name}")
      echo_progress(generator)
    elif entry == ":sample":
      generator.load_sample_players()
      click.secho("Sample loaded. You can generate the teams now.", fg="blue")
    elif entry == ":clear":
      generator.clear_roster()
      click.secho("Player list cleared.", fg="blue")
    elif entry == ":paste":
      lines = []
      while (line := click.prompt("", default="", show_default=False, prompt_suffix="")):
        lines.append(line)
      summary = generator.add_players(split_names("\n".join(lines)))
      echo_message(*bulk_message(summary, generator.players_remaining(), generator.total_players_needed()))
    elif entry.startswith(":remove"):
      name = entry[len(":remove"):].strip()
      outcome = generator.remove_player(name)
      if outcome:
        click.secho("Player removed.", fg="blue")
      else:
        echo_outcome(outcome, name=name or None)
    elif entry.startswith(":"):
      click.secho(f"Unknown command: {entry}", fg="red")
    else:
      outcome = generator.add_player(entry)
      if outcome:
        notice = progress_message(generator.players_remaining(), generator.total_players_needed())
        if notice:
          echo_message(*notice)
      else:
        echo_outcome(outcome, name=normalize_player_name(entry))


def wizard_results(generator: TeamGenerator, delay: float) -> str:
  """Show generated teams; returns the next step: 'players', 'settings' or 'quit'."""
  click.secho("Step 3 of 3: teams", fg="blue", bold=True)
  click.secho("Generating teams...", fg="blue")
  time.sleep(delay)
  result = generator.generate_teams()
  if result is Outcome.PRECONDITION_FAILURE:
    echo_outcome(result, remaining=generator.players_remaining())
    return "players"
  click.secho("Teams generated.", fg="green")
  echo_teams(generator)
  click.echo(RESULTS_HELP)

  while True:
    entry = click.prompt("Command", default=":quit").strip()
    if entry == ":share":
      click.echo(format_teams_text(generator.teams))
    elif entry == ":whatsapp":
      click.echo(whatsapp_link(generator.teams))
    elif entry == ":regenerate":
      generator.generate_teams()
      echo_teams(generator)
    elif entry == ":back":
      generator.clear_teams()
      return "players"
    elif entry == ":reset":
      generator.reset()
      click.secho("Settings reset.", fg="blue")
      return "settings"
    elif entry == ":quit":
      return "quit"
    else:
      click.secho(f"Unknown command: {entry}", fg="red")


@cli.command()
@click.option("--seed", type=int, help="Seed for a reproducible draw")
@click.option("--delay", type=float, default=1.6, help="Seconds to pause before showing teams")
@click.option("--verbose", is_flag=True, help="Enable verbose (DEBUG level) logging")
def wizard(seed: Optional[int], delay: float, verbose: bool):
  """Step through settings, players and results interactively."""
  setup_logging(verbose)
  generator = TeamGenerator(rng=random.Random(seed) if seed is not None else None)

  step = "settings"
  while step != "quit":
    if step == "settings":
      wizard_settings(generator)
      step = "players"
    elif step == "players":
      step = "results" if wizard_players(generator) else "quit"
    else:
      step = wizard_results(generator, delay)


def main():
  cli()


if __name__ == "__main__":
  main()
