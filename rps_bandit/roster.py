"""Registry of every player that can take part in a match."""

from .opponents import OPPONENT_CLASSES
from .policies import POLICY_CLASSES, Player

ALL_PLAYER_CLASSES = POLICY_CLASSES + OPPONENT_CLASSES


def get_player_by_name(name: str) -> Player:
    """Get a fresh player instance by name (case-insensitive)."""
    name_lower = name.lower()
    for cls in ALL_PLAYER_CLASSES:
        if cls.name.lower() == name_lower:
            return cls()
    available = ", ".join(cls.name for cls in ALL_PLAYER_CLASSES)
    raise ValueError(f"Unknown player: '{name}'. Available: {available}")
