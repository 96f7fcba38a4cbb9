"""
Difficulty configuration for Minesweeper games.

Maps difficulty identifiers to board settings.
"""
import math
import numbers
from dataclasses import dataclass
from typing import Dict, Optional

from .errors import ConfigurationError


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


# ============================================================================
# Settings
# ============================================================================

@dataclass(frozen=True)
class Settings:
    """
    Settings for a Minesweeper board.

    Attributes:
        columns: Number of columns.
        rows: Number of rows.
        bomb_odds: Fraction of tiles seeded with bombs.
    """

    columns: int = 9
    rows: int = 9
    bomb_odds: float = 10 / 81

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure settings values are valid."""
        if not (isinstance(self.columns, numbers.Integral)
                and isinstance(self.rows, numbers.Integral)):
            raise ConfigurationError("Board dimensions must be integers")
        if self.columns < 1 or self.rows < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if not 0 <= self.bomb_odds <= 1:
            raise ConfigurationError("Bomb odds must be between 0 and 1")

    @property
    def tiles_count(self) -> int:
        """Total number of tiles on the board."""
        return self.columns * self.rows

    @property
    def bombs_count(self) -> int:
        """Number of bombs placed on a board with these settings."""
        return round_half_up(self.bomb_odds * self.tiles_count)


# Preset difficulty levels
BEGINNER = Settings(9, 9, 10 / 81)
INTERMEDIATE = Settings(16, 16, 40 / 256)
EXPERT = Settings(30, 16, 99 / 480)

DIFFICULTIES: Dict[str, Settings] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


def resolve_settings(
    difficulty_id: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Settings:
    """
    Find the settings for a new board.

    Args:
        difficulty_id: Key into DIFFICULTIES.
        settings: Explicit settings, used instead of the table when given.

    Returns:
        Settings to generate the board from.

    Raises:
        ConfigurationError: If no settings are given and the identifier
            is unknown.
    """
    if settings is not None:
        return settings
    found = DIFFICULTIES.get(difficulty_id)
    if found is None:
        raise ConfigurationError(f"Unknown difficulty '{difficulty_id}'")
    return found
