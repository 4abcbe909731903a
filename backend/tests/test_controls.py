"""
Tests for key mapping.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import UP, DOWN, LEFT, RIGHT
from services.controls import direction_for_key, is_restart_key


@pytest.mark.parametrize("key,expected", [
    ("ArrowUp", UP),
    ("ArrowDown", DOWN),
    ("ArrowLeft", LEFT),
    ("ArrowRight", RIGHT),
    ("up", UP),
    ("down", DOWN),
    ("left", LEFT),
    ("right", RIGHT),
    ("UP", UP),
])
def test_arrow_keys_map_to_directions(key, expected):
    assert direction_for_key(key) == expected


@pytest.mark.parametrize("key", ["a", "w", "Enter", "space", "Escape", "", None])
def test_other_keys_are_ignored(key):
    assert direction_for_key(key) is None


@pytest.mark.parametrize("key", ["Enter", "return", " ", "space"])
def test_restart_keys(key):
    assert is_restart_key(key) is True


@pytest.mark.parametrize("key", ["ArrowUp", "r", "escape", "", None])
def test_non_restart_keys(key):
    assert is_restart_key(key) is False
