"""Tests for the id slug helper and the known events table."""

import pytest
import sys
import os

# Add parent directory to path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from gdq_schedule import KNOWN_EVENTS, get_id, get_known_event
from gdq_schedule.config import _optional_float


class TestGetId:
    """Test slug generation."""

    @pytest.mark.parametrize('value, expected', [
        (' Hello, World! ', 'hello-world'),
        ('Friday 12', 'friday-12'),
        ('Super Mario 64 -- 120 Star', 'super-mario-64-120-star'),
        ('(Bonus) [Game]', 'bonus-game'),
        ('Don’t Starve', 'don-t-starve'),
        ('Donâ€™t Starve', 'don-t-starve'),
        ('snake_case.name/path', 'snake-case-name-path'),
        ('already-slugged', 'already-slugged'),
        ('Pokémon', 'pokémon'),
    ])
    def test_slugs(self, value, expected):
        """Test punctuation runs collapse to single hyphens."""
        assert get_id(value) == expected

    def test_none(self):
        """Test that a missing value gives an empty id."""
        assert get_id(None) == ''
        assert get_id() == ''

    def test_only_punctuation(self):
        """Test that a value made only of separators gives an empty id."""
        assert get_id(' !?-- ') == ''

    def test_non_string(self):
        """Test that other values are stringified first."""
        assert get_id(46) == '46'


class TestKnownEvents:
    """Test the known events table."""

    def test_agdq_2024(self):
        """Test the AGDQ 2024 entry."""
        event = get_known_event(46)

        assert event.name == 'Awesome Games Done Quick 2024'
        assert event.short_name == 'AGDQ 2024'
        assert KNOWN_EVENTS[46] is event

    def test_unknown_id(self):
        """Test that unknown ids give None."""
        assert get_known_event(47) is None


class TestConfig:
    """Test parsing of optional numeric settings."""

    @pytest.mark.parametrize('raw, expected', [(None, None), ('', None), ('  ', None), ('30', 30.0), ('2.5', 2.5)])
    def test_optional_float(self, raw, expected):
        """Test timeout parsing."""
        assert _optional_float(raw) == expected
