"""
Keyboard mapping for the input collaborator.

Key names come from whatever frontend is in use: browser-style names
("ArrowUp", "Enter", " ") and pygame key names ("up", "return", "space")
are both accepted.
"""

from typing import Optional

from domain.constants import UP, DOWN, LEFT, RIGHT

KEY_DIRECTIONS = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}

RESTART_KEYS = {"enter", "return", "space"}


def _normalize(key_name: str) -> str:
    if key_name == " ":
        return "space"
    name = key_name.strip().lower()
    if name.startswith("arrow"):
        name = name[len("arrow"):]
    return name


def direction_for_key(key_name: Optional[str]) -> Optional[str]:
    """Return the direction for an arrow key, or None for any other key."""
    if not key_name:
        return None
    return KEY_DIRECTIONS.get(_normalize(key_name))


def is_restart_key(key_name: Optional[str]) -> bool:
    """True for the keys that trigger "Play Again" on the game-over screen."""
    if not key_name:
        return False
    return _normalize(key_name) in RESTART_KEYS
