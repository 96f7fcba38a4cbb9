"""
Gymnasium environment wrapper for Minesweeper.

Reads game snapshots as observations and drives the game with reveal
actions, giving agents a standard RL interface.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .difficulty import Settings, resolve_settings
from .game import GameSnapshot, reveal, restart


# ============================================================================
# Read Model
# ============================================================================

def to_observation(snapshot: GameSnapshot) -> np.ndarray:
    """
    Get board state as numpy array.

    Returns:
        2D numpy array where:
            -1 = covered
            -2 = flagged
            0-8 = open with neighbor bomb count
            9 = hit bomb
    """
    obs = np.zeros((snapshot.rows, snapshot.columns), dtype=np.int8)
    for row in range(snapshot.rows):
        for col in range(snapshot.columns):
            obs[row, col] = snapshot.board[row][col].to_observation(
                snapshot.proximities[row][col]
            )
    return obs


def render_ansi(snapshot: GameSnapshot) -> str:
    """Render board as ASCII string."""
    symbols = {-1: ".", -2: "F", 9: "*", 0: " "}
    return "\n".join(
        " ".join(symbols.get(int(val), str(val)) for val in obs_row)
        for obs_row in to_observation(snapshot)
    )


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array as produced by to_observation().

    Actions:
        Discrete action space of size columns * rows.
        Action i reveals the tile at (i // columns, i % columns).

    Rewards:
        - +1 for revealing a safe tile
        - +10 for winning the game
        - -10 for hitting a bomb
        - -0.1 for an action with no effect (already open tile)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        difficulty_id: Optional[str] = "beginner",
        settings: Optional[Settings] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty_id: Difficulty to play (default: beginner).
            settings: Explicit settings, used instead of the difficulty.
            render_mode: How to render the environment.
        """
        super().__init__()

        self.settings = resolve_settings(difficulty_id, settings)
        self.render_mode = render_mode
        self._rng = random.Random()
        self.snapshot = restart(settings=self.settings, rng=self._rng)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.settings.rows, self.settings.columns),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.settings.tiles_count)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible bomb placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng = random.Random(seed)
        self.snapshot = restart(settings=self.settings, rng=self._rng)
        self._steps = 0

        return to_observation(self.snapshot), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Tile index to reveal (row * columns + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        previous = self.snapshot
        self.snapshot = reveal(previous, row, col, rng=self._rng)
        reward = self._calculate_reward(previous, self.snapshot)

        terminated = not self.snapshot.is_playable
        return to_observation(self.snapshot), reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.settings.columns)

    @staticmethod
    def _calculate_reward(previous: GameSnapshot, current: GameSnapshot) -> float:
        """Calculate reward for the transition between two snapshots."""
        if current is previous:
            return -0.1
        if current.is_won:
            return 10.0
        if current.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.snapshot.uncovered_count,
            "total_safe": self.settings.tiles_count - self.snapshot.bombs_count,
            "game_state": self.snapshot.game_state.name,
            "flags": self.snapshot.flags_count,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_ansi(self.snapshot)
        if self.render_mode == "human":
            print(render_ansi(self.snapshot))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = covered or flagged tile.
        """
        obs = to_observation(self.snapshot)
        return ((obs == -1) | (obs == -2)).flatten()
