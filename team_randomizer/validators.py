"""Validation and normalization utilities for Team Randomizer."""

import math
import re
from pathlib import Path
from typing import Any, List, Optional

import pandas as pd


MAX_NAME_LENGTH = 100
SEPARATOR_RE = re.compile(r"[,;]+")


def normalize_player_name(name: Any) -> str:
    """Normalize a raw player name.

    Surrounding whitespace is trimmed, inner runs of whitespace collapse to
    a single space and every word is capitalized (first letter upper, rest
    lower). Non-string input normalizes to the empty string.

    Args:
        name: Raw name as typed or loaded

    Returns:
        The normalized name, possibly empty
    """
    if not isinstance(name, str):
        return ""
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split())


def is_valid_player_name(name: str) -> bool:
    """Check whether an already normalized name can join a roster."""
    return bool(name) and len(name) <= MAX_NAME_LENGTH


def clamp_shape_value(value: Any, minimum: int, maximum: int) -> Optional[int]:
    """Coerce a team shape value into ``[minimum, maximum]``.

    Accepts integers, floats and numeric strings (form fields hand over
    strings). Fractions are truncated.

    Args:
        value: Raw value
        minimum: Lowest valid value
        maximum: Highest valid value

    Returns:
        The clamped integer, or None when the value is not numeric
    """
    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            value = float(value)
        except ValueError:
            return None

    if isinstance(value, float):
        if math.isnan(value):
            return None
        if math.isinf(value):
            return maximum if value > 0 else minimum
        value = int(value)

    if not isinstance(value, int):
        return None

    return max(minimum, min(maximum, value))


def split_names(text: str) -> List[str]:
    """Split pasted text into raw names.

    Names are separated by newlines, commas or semicolons. Blank entries
    are dropped; normalization is left to the roster.
    """
    names = []
    for line in text.splitlines():
        for chunk in SEPARATOR_RE.split(line):
            if chunk.strip():
                names.append(chunk)
    return names


def load_names_file(path: Path) -> List[str]:
    """Load raw player names from a text or CSV file.

    Text files hold one name per line (commas and semicolons also separate
    names). CSV files are read with pandas; the ``name`` column is used if
    present, otherwise the first column.

    Args:
        path: Path to the names file

    Returns:
        List of raw names in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file contains no names
    """
    if not path.exists():
        raise FileNotFoundError(f"Names file not found: {path}")

    if path.suffix.lower() == ".csv":
        names = _load_names_csv(path)
    else:
        with open(path, 'r', encoding='utf-8') as f:
            names = split_names(f.read())

    if not names:
        raise ValueError(f"No player names found in {path}")

    return names


def _load_names_csv(csv_path: Path) -> List[str]:
    try:
        df = pd.read_csv(csv_path, dtype=str)
    except pd.errors.EmptyDataError:
        raise ValueError("Names CSV file is empty")
    except Exception as e:
        raise ValueError(f"Failed to read CSV file: {e}")

    if df.shape[1] == 0:
        raise ValueError("Names CSV must contain at least 1 column")

    columns = {str(column).strip().lower(): column for column in df.columns}
    column = columns.get('name', df.columns[0])

    return [value for value in df[column].dropna().tolist() if value.strip()]
