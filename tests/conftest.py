"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Callable, List

import numpy as np
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import (
    GameSnapshot,
    GameState,
    Settings,
    Tile,
    TileBombState,
    count_proximities,
    restart,
)


# ============================================================================
# Snapshot Fixtures
# ============================================================================

def build_snapshot(layout: List[str], **overrides) -> GameSnapshot:
    """
    Build a fresh snapshot from rows of text, '*' marking a bomb.

    Keyword arguments override snapshot fields.
    """
    bomb_mask = np.array([[char == "*" for char in line] for line in layout], dtype=bool)
    rows, columns = bomb_mask.shape
    bombs_count = int(bomb_mask.sum())

    fields = dict(
        game_state=GameState.FRESH,
        columns=columns,
        rows=rows,
        board=tuple(
            tuple(
                Tile(TileBombState.BOMB if has_bomb else TileBombState.BLANK)
                for has_bomb in row
            )
            for row in bomb_mask.tolist()
        ),
        proximities=tuple(tuple(row) for row in count_proximities(bomb_mask).tolist()),
        bombs_count=bombs_count,
        settings=Settings(columns, rows, bombs_count / (columns * rows)),
    )
    fields.update(overrides)
    return GameSnapshot(**fields)


@pytest.fixture
def snapshot_from_layout() -> Callable[..., GameSnapshot]:
    """Factory building snapshots from text layouts."""
    return build_snapshot


@pytest.fixture
def center_bomb_snapshot() -> GameSnapshot:
    """3x3 board with a single bomb in the middle."""
    return build_snapshot([
        "...",
        ".*.",
        "...",
    ])


@pytest.fixture
def wall_snapshot() -> GameSnapshot:
    """5x5 board with a column of bombs down the middle, past the first move."""
    return build_snapshot([
        "..*..",
        "..*..",
        "..*..",
        "..*..",
        "..*..",
    ], game_state=GameState.PLAYING, moves_count=1, started_at=0.0)


@pytest.fixture
def beginner_game() -> GameSnapshot:
    """Seeded beginner game."""
    return restart("beginner", rng=random.Random(1234))


# ============================================================================
# External Collaborator Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def clock() -> Callable[[], float]:
    """Clock that always reads 1000.0."""
    return lambda: 1000.0


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def beginner_settings() -> Settings:
    """Beginner difficulty settings."""
    return Settings(9, 9, 10 / 81)


@pytest.fixture
def dense_settings() -> Settings:
    """Small board where about half the tiles hold bombs."""
    return Settings(5, 5, 0.5)
