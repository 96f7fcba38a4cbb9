"""
Minesweeper game core.

Board generation, immutable game snapshots and the reveal/flag/restart
transitions between them.
"""
from .tile import Tile, TileBombState, TileUserState
from .errors import ConfigurationError
from .difficulty import (
    Settings,
    DIFFICULTIES,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    resolve_settings,
)
from .board import generate, count_proximities, neighbors
from .game import (
    GameState,
    GameSnapshot,
    PLAYABLE_STATES,
    restart,
    begin_restart,
    begin_reveal,
    reveal,
    toggle_flag,
)
from .tween import tween_settings, load
from .environment import MinesweeperEnv, to_observation, render_ansi

__all__ = [
    "Tile",
    "TileBombState",
    "TileUserState",
    "ConfigurationError",
    "Settings",
    "DIFFICULTIES",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "resolve_settings",
    "generate",
    "count_proximities",
    "neighbors",
    "GameState",
    "GameSnapshot",
    "PLAYABLE_STATES",
    "restart",
    "begin_restart",
    "begin_reveal",
    "reveal",
    "toggle_flag",
    "tween_settings",
    "load",
    "MinesweeperEnv",
    "to_observation",
    "render_ansi",
]
