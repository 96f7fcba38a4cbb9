"""
Board generator for Minesweeper game.

Builds a fresh grid of covered tiles with shuffled bomb placement and
the matching proximity grid.
"""
import random
from typing import List, Optional, Tuple

import numpy as np

from .difficulty import Settings
from .tile import Tile, TileBombState, TileUserState


Board = Tuple[Tuple[Tile, ...], ...]
Proximities = Tuple[Tuple[int, ...], ...]

NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


# ============================================================================
# Neighbor Utilities (Low-level)
# ============================================================================

def is_valid_position(row: int, col: int, rows: int, columns: int) -> bool:
    """Check if position is within board bounds."""
    return 0 <= row < rows and 0 <= col < columns


def neighbors(
    row: int, col: int, rows: int, columns: int
) -> List[Tuple[int, int]]:
    """
    Get valid neighboring tile positions.

    Args:
        row: Row index of center tile.
        col: Column index of center tile.
        rows: Number of rows on the board.
        columns: Number of columns on the board.

    Returns:
        List of (row, col) tuples for in-bounds neighbors.
    """
    return [
        (row + delta_row, col + delta_col)
        for delta_row, delta_col in NEIGHBOR_OFFSETS
        if is_valid_position(row + delta_row, col + delta_col, rows, columns)
    ]


def count_proximities(bomb_mask: np.ndarray) -> np.ndarray:
    """
    Count bombs among the up to 8 neighbors of every tile.

    Args:
        bomb_mask: 2D boolean array, True where a bomb is placed.

    Returns:
        2D integer array of the same shape. Bomb tiles get a count too.
    """
    rows, columns = bomb_mask.shape
    padded = np.pad(bomb_mask.astype(np.int8), 1)
    counts = np.zeros((rows, columns), dtype=np.int8)
    for delta_row, delta_col in NEIGHBOR_OFFSETS:
        counts += padded[
            1 + delta_row:1 + delta_row + rows,
            1 + delta_col:1 + delta_col + columns,
        ]
    return counts


# ============================================================================
# Board Generation
# ============================================================================

def shuffled_bombs(
    settings: Settings, rng: Optional[random.Random] = None
) -> List[bool]:
    """
    Shuffle bomb markers for every tile in row-major order.

    Args:
        settings: Board settings.
        rng: Random source with a shuffle method.

    Returns:
        One flag per tile, True where a bomb goes.
    """
    rng = rng or random
    bombs_count = settings.bombs_count
    markers = [True] * bombs_count + [False] * (settings.tiles_count - bombs_count)
    rng.shuffle(markers)
    return markers


def generate(
    settings: Settings, rng: Optional[random.Random] = None
) -> Tuple[Board, Proximities, int]:
    """
    Generate a fresh board of covered tiles.

    Args:
        settings: Board dimensions and bomb odds.
        rng: Random source for bomb placement (default: module random).

    Returns:
        Tuple of (board, proximities, bombs_count).
    """
    markers = shuffled_bombs(settings, rng)
    bomb_mask = np.array(markers, dtype=bool).reshape(settings.rows, settings.columns)

    board = tuple(
        tuple(
            Tile(
                bomb_state=TileBombState.BOMB if has_bomb else TileBombState.BLANK,
                user_state=TileUserState.COVERED,
            )
            for has_bomb in row
        )
        for row in bomb_mask.tolist()
    )
    proximities = tuple(
        tuple(row) for row in count_proximities(bomb_mask).tolist()
    )
    return board, proximities, settings.bombs_count
