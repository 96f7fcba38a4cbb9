"""
Tile module for Minesweeper game.

Represents individual tiles on the game board with their content
(bomb/blank) and what the player has done to them
(covered/open/flag/hit bomb).
"""
from enum import Enum
from dataclasses import dataclass, replace
from typing import Tuple


# ============================================================================
# Constants
# ============================================================================

class TileBombState(Enum):
    """What a tile holds."""

    BLANK = "blank"
    BOMB = "bomb"


class TileUserState(Enum):
    """Possible visual states of a tile."""

    COVERED = "covered"
    OPEN = "open"
    FLAG = "flag"
    HIT_BOMB = "hitBomb"


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass(frozen=True)
class Tile:
    """
    Represents a single tile in the Minesweeper grid.

    Tiles are never changed in place: reveal and flag operations return
    a replacement tile.

    Attributes:
        bomb_state: Whether this tile holds a bomb.
        user_state: Current visual state.
    """

    bomb_state: TileBombState = TileBombState.BLANK
    user_state: TileUserState = TileUserState.COVERED

    def uncovered(self) -> "Tile":
        """
        Return this tile opened by the player.

        Returns:
            A HIT_BOMB tile if this tile holds a bomb, an OPEN tile otherwise.
        """
        if self.has_bomb:
            return replace(self, user_state=TileUserState.HIT_BOMB)
        return replace(self, user_state=TileUserState.OPEN)

    def flag_toggled(self) -> Tuple["Tile", int]:
        """
        Toggle the flag on this tile.

        Returns:
            Tuple of (replacement tile, change in flag count). Open and
            hit tiles are returned unchanged with a change of 0.
        """
        if self.user_state == TileUserState.COVERED:
            return replace(self, user_state=TileUserState.FLAG), 1
        if self.user_state == TileUserState.FLAG:
            return replace(self, user_state=TileUserState.COVERED), -1
        return self, 0

    @property
    def has_bomb(self) -> bool:
        """Check if tile holds a bomb."""
        return self.bomb_state == TileBombState.BOMB

    @property
    def is_covered(self) -> bool:
        """Check if tile is covered."""
        return self.user_state == TileUserState.COVERED

    @property
    def is_open(self) -> bool:
        """Check if tile is open."""
        return self.user_state == TileUserState.OPEN

    @property
    def is_flagged(self) -> bool:
        """Check if tile is flagged."""
        return self.user_state == TileUserState.FLAG

    @property
    def is_resolved(self) -> bool:
        """Check if tile is open or a hit bomb."""
        return self.user_state in (TileUserState.OPEN, TileUserState.HIT_BOMB)

    def to_observation(self, proximity: int) -> int:
        """
        Convert tile to observation value for agents.

        Args:
            proximity: Neighbor bomb count for this tile.

        Returns:
            -1: Covered tile
            -2: Flagged tile
            0-8: Open tile with neighbor bomb count
            9: Hit bomb (game over state)
        """
        if self.user_state == TileUserState.COVERED:
            return -1
        if self.user_state == TileUserState.FLAG:
            return -2
        if self.user_state == TileUserState.HIT_BOMB:
            return 9
        return proximity
