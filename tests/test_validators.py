"""Tests for the validators module."""

import tempfile
from pathlib import Path

import pandas as pd
import pytest

from team_randomizer.validators import (
    clamp_shape_value,
    is_valid_player_name,
    load_names_file,
    normalize_player_name,
    split_names,
)


class TestNormalizePlayerName:
    """Test cases for player name normalization."""

    def test_trims_and_collapses_whitespace(self):
        """Test that surrounding and repeated whitespace is removed."""
        assert normalize_player_name("  juan   perez ") == "Juan Perez"

    def test_capitalizes_each_word(self):
        """Test that each word gets an upper first letter and lower rest."""
        assert normalize_player_name("aNA gOMEZ") == "Ana Gomez"
        assert normalize_player_name("nicolás álvarez") == "Nicolás Álvarez"

    def test_whitespace_only(self):
        """Test that blank input normalizes to the empty string."""
        assert normalize_player_name("   ") == ""
        assert normalize_player_name("\t\n") == ""

    def test_non_string(self):
        """Test that non-string input normalizes to the empty string."""
        assert normalize_player_name(None) == ""
        assert normalize_player_name(42) == ""

    def test_valid_name_length(self):
        """Test the name validity check."""
        assert is_valid_player_name("Ana")
        assert not is_valid_player_name("")
        assert not is_valid_player_name("A" * 101)


class TestClampShapeValue:
    """Test cases for team shape clamping."""

    def test_in_range(self):
        assert clamp_shape_value(5, 2, 10) == 5

    def test_clamps_to_bounds(self):
        assert clamp_shape_value(1, 2, 10) == 2
        assert clamp_shape_value(11, 2, 10) == 10
        assert clamp_shape_value(float('inf'), 2, 10) == 10

    def test_parses_strings(self):
        assert clamp_shape_value("7", 2, 10) == 7
        assert clamp_shape_value("3.5", 2, 10) == 3

    def test_rejects_non_numeric(self):
        assert clamp_shape_value("seven", 2, 10) is None
        assert clamp_shape_value("", 2, 10) is None
        assert clamp_shape_value(None, 2, 10) is None
        assert clamp_shape_value(True, 2, 10) is None
        assert clamp_shape_value([3], 2, 10) is None


class TestSplitNames:
    """Test cases for splitting pasted text."""

    def test_newlines_and_commas(self):
        """Test that lines, commas and semicolons all separate names."""
        text = "Ana Gomez\nLuis Diaz, Eva Ruiz\n\n  \nTom Alvarez;Belén Ruiz"
        assert [n.strip() for n in split_names(text)] == [
            'Ana Gomez', 'Luis Diaz', 'Eva Ruiz', 'Tom Alvarez', 'Belén Ruiz'
        ]

    def test_empty_text(self):
        assert split_names("") == []


class TestLoadNamesFile:
    """Test cases for loading names from files."""

    def test_text_file(self):
        """Test loading a plain text file."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.txt', delete=False, encoding='utf-8') as f:
            f.write("ana gomez\nluis diaz\n\neva ruiz\n")
            path = Path(f.name)

        try:
            assert load_names_file(path) == ['ana gomez', 'luis diaz', 'eva ruiz']
        finally:
            path.unlink()

    def test_csv_with_name_column(self):
        """Test that the name column is picked from a CSV."""
        df = pd.DataFrame({'id': [1, 2], 'Name': ['Ana Gomez', 'Luis Diaz']})

        with tempfile.NamedTemporaryFile(mode='w', suffix='.csv', delete=False) as f:
            df.to_csv(f.name, index=False)
            path = Path(f.name)

        try:
            assert load_names_file(path) == ['Ana Gomez', 'Luis Diaz']
        finally:
            path.unlink()

    def test_csv_first_column(self):
        """Test that the first column is used without a name column."""
        df = pd.DataFrame({'player': ['Ana Gomez', None, 'Eva Ruiz'], 'team': ['a', 'b', 'c']})

        with tempfile.NamedTemporaryFile(mode='w', suffix='.csv', delete=False) as f:
            df.to_csv(f.name, index=False)
            path = Path(f.name)

        try:
            assert load_names_file(path) == ['Ana Gomez', 'Eva Ruiz']
        finally:
            path.unlink()

    def test_empty_csv(self):
        """Test loading an empty CSV file."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.csv', delete=False) as f:
            f.write("")
            path = Path(f.name)

        try:
            with pytest.raises(ValueError, match="empty"):
                load_names_file(path)
        finally:
            path.unlink()

    def test_blank_text_file(self):
        """Test that a file without names is rejected."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.txt', delete=False) as f:
            f.write("\n   \n")
            path = Path(f.name)

        try:
            with pytest.raises(ValueError, match="No player names"):
                load_names_file(path)
        finally:
            path.unlink()

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_names_file(Path('/nonexistent/names.txt'))
