"""
Game module for Minesweeper.

Holds the immutable game snapshot and the transitions that produce a new
snapshot from the previous one: restart, reveal and flag.
"""
import logging
import random
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .board import Board, Proximities, generate, is_valid_position, neighbors
from .difficulty import Settings, resolve_settings
from .errors import ConfigurationError
from .tile import Tile

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    FRESH = "fresh"
    BEGINNING_MOVE = "beginningMove"
    PLAYING = "playing"
    GAME_OVER = "gameOver"
    WINNER = "winner"
    RESTARTING = "restarting"


PLAYABLE_STATES = frozenset(
    (GameState.FRESH, GameState.PLAYING, GameState.BEGINNING_MOVE)
)


# ============================================================================
# Snapshot
# ============================================================================

@dataclass(frozen=True)
class GameSnapshot:
    """
    Complete state of one game at one point in time.

    Every transition returns a new snapshot; a snapshot is never changed
    after it is created.

    Attributes:
        game_state: Current state of the game.
        columns: Number of columns.
        rows: Number of rows.
        board: Row-major grid of tiles.
        proximities: Neighbor bomb counts, fixed for the life of the board.
        bombs_count: Bombs placed on the board.
        uncovered_count: Bomb-free tiles opened so far.
        flags_count: Tiles currently flagged.
        moves_count: Reveal actions taken so far.
        started_at: Time of the first reveal, or None.
        finished_at: Time the game was won or lost, or None.
        settings: Settings the board was generated from.
    """

    game_state: GameState
    columns: int
    rows: int
    board: Board
    proximities: Proximities
    bombs_count: int
    uncovered_count: int = 0
    flags_count: int = 0
    moves_count: int = 0
    started_at: Optional[float] = None
    finished_at: Optional[float] = None
    settings: Optional[Settings] = None

    @property
    def is_playable(self) -> bool:
        """Check if reveals are accepted in the current state."""
        return self.game_state in PLAYABLE_STATES

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WINNER

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.game_state == GameState.GAME_OVER

    def tile(self, row: int, col: int) -> Optional[Tile]:
        """Get tile at position, or None if invalid."""
        if not is_valid_position(row, col, self.rows, self.columns):
            return None
        return self.board[row][col]


# ============================================================================
# Restart
# ============================================================================

def restart(
    difficulty_id: Optional[str] = None,
    settings: Optional[Settings] = None,
    rng: Optional[random.Random] = None,
) -> GameSnapshot:
    """
    Start a new game.

    Args:
        difficulty_id: Key into the difficulty table.
        settings: Explicit settings, used instead of the table when given.
        rng: Random source for bomb placement.

    Returns:
        Fresh snapshot with all counters at zero.

    Raises:
        ConfigurationError: If the difficulty is unknown and no settings
            are given.
    """
    settings = resolve_settings(difficulty_id, settings)
    board, proximities, bombs_count = generate(settings, rng)
    logger.debug(
        "New %dx%d board with %d bombs",
        settings.columns, settings.rows, bombs_count,
    )
    return GameSnapshot(
        game_state=GameState.FRESH,
        columns=settings.columns,
        rows=settings.rows,
        board=board,
        proximities=proximities,
        bombs_count=bombs_count,
        settings=settings,
    )


def begin_restart(snapshot: GameSnapshot) -> GameSnapshot:
    """Mark the game as restarting; no moves are accepted until replaced."""
    return replace(snapshot, game_state=GameState.RESTARTING)


# ============================================================================
# Reveal
# ============================================================================

def begin_reveal(snapshot: GameSnapshot, now: Clock = time.time) -> GameSnapshot:
    """
    Enter the transient beginning-move state.

    Stamps started_at when the game leaves the fresh state. Returns the
    snapshot unchanged if the game is not playable.
    """
    if not snapshot.is_playable:
        return snapshot

    started_at = snapshot.started_at
    if snapshot.game_state == GameState.FRESH:
        started_at = now()

    return replace(
        snapshot, game_state=GameState.BEGINNING_MOVE, started_at=started_at
    )


def _safe_first_board(
    snapshot: GameSnapshot, row: int, col: int, rng: Optional[random.Random]
) -> Tuple[Board, Proximities]:
    """Regenerate the board until the tile at (row, col) holds no bomb."""
    board, proximities = snapshot.board, snapshot.proximities
    if not board[row][col].has_bomb:
        return board, proximities

    settings = snapshot.settings or Settings(
        snapshot.columns,
        snapshot.rows,
        snapshot.bombs_count / (snapshot.columns * snapshot.rows),
    )
    if settings.bombs_count >= settings.tiles_count:
        raise ConfigurationError("Board has no bomb-free tile for the first move")

    attempts = 0
    while board[row][col].has_bomb:
        board, proximities, _ = generate(settings, rng)
        attempts += 1
    logger.debug("Regenerated board %d times to keep first move safe", attempts)

    # Flags placed before the first move stay where the player put them.
    board = tuple(
        tuple(
            replace(tile, user_state=old_tile.user_state)
            for tile, old_tile in zip(board_row, old_row)
        )
        for board_row, old_row in zip(board, snapshot.board)
    )
    return board, proximities


def _flood_reveal(
    board: List[List[Tile]],
    proximities: Proximities,
    row: int,
    col: int,
) -> Tuple[bool, int, int]:
    """
    Open tiles starting at (row, col), expanding across zero proximities.

    Writes replacement tiles into board in place.

    Returns:
        Tuple of (hit_bomb, tiles opened, change in flag count).
    """
    rows, columns = len(board), len(board[0])
    opened = 0
    flags_delta = 0
    pending = [(row, col)]

    while pending:
        current_row, current_col = pending.pop()
        previous = board[current_row][current_col]
        if previous.is_resolved:
            continue

        uncovered = previous.uncovered()
        board[current_row][current_col] = uncovered
        if previous.is_flagged:
            flags_delta -= 1
        if uncovered.has_bomb:
            return True, opened, flags_delta

        opened += 1

        if proximities[current_row][current_col] == 0:
            pending.extend(neighbors(current_row, current_col, rows, columns))

    return False, opened, flags_delta


def reveal(
    snapshot: GameSnapshot,
    row: int,
    col: int,
    now: Clock = time.time,
    rng: Optional[random.Random] = None,
) -> GameSnapshot:
    """
    Reveal the tile at the given position.

    On the first move the board is regenerated until the tile is
    bomb-free. Revealing a tile with no neighboring bombs opens its
    neighbors too, spreading across the whole zero region.

    Args:
        snapshot: Current game.
        row: Row index to reveal.
        col: Column index to reveal.
        now: Clock used for started_at and finished_at.
        rng: Random source for first-move regeneration.

    Returns:
        New snapshot, or the same snapshot if the move has no effect
        (game not playable, position out of bounds, tile already open).

    Raises:
        ConfigurationError: If the first move cannot be made safe because
            every tile holds a bomb. Regenerating such a board would never
            end, so this guards the loop rather than reporting a failed
            difficulty lookup.
    """
    if not snapshot.is_playable:
        return snapshot
    target = snapshot.tile(row, col)
    if target is None or target.is_resolved:
        return snapshot

    snapshot = begin_reveal(snapshot, now)

    board, proximities = snapshot.board, snapshot.proximities
    if snapshot.moves_count == 0:
        board, proximities = _safe_first_board(snapshot, row, col, rng)

    new_board = [list(board_row) for board_row in board]
    hit_bomb, opened, flags_delta = _flood_reveal(new_board, proximities, row, col)

    uncovered_count = snapshot.uncovered_count + opened
    won = uncovered_count + snapshot.bombs_count == snapshot.columns * snapshot.rows

    if hit_bomb:
        game_state = GameState.GAME_OVER
    elif won:
        game_state = GameState.WINNER
    else:
        game_state = GameState.PLAYING

    finished_at = None
    if game_state != GameState.PLAYING:
        finished_at = now()
        logger.debug("Game finished as %s after %d moves",
                     game_state.value, snapshot.moves_count + 1)

    return replace(
        snapshot,
        board=tuple(tuple(board_row) for board_row in new_board),
        proximities=proximities,
        game_state=game_state,
        uncovered_count=uncovered_count,
        flags_count=snapshot.flags_count + flags_delta,
        moves_count=snapshot.moves_count + 1,
        finished_at=finished_at,
    )


# ============================================================================
# Flag
# ============================================================================

def toggle_flag(snapshot: GameSnapshot, row: int, col: int) -> GameSnapshot:
    """
    Toggle flag on a tile.

    Allowed in any game state. Open tiles, hit bombs and out-of-bounds
    positions return the same snapshot.
    """
    target = snapshot.tile(row, col)
    if target is None:
        return snapshot

    toggled, flags_delta = target.flag_toggled()
    if flags_delta == 0:
        return snapshot

    board = tuple(
        tuple(toggled if index == col else tile for index, tile in enumerate(board_row))
        if row_index == row else board_row
        for row_index, board_row in enumerate(snapshot.board)
    )
    return replace(
        snapshot, board=board, flags_count=snapshot.flags_count + flags_delta
    )
