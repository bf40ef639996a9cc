"""
Gymnasium environment wrapper for Minesweeper.

Exposes the board through the standard reset/step interface so that
scripted or learning players can drive it.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, UncoverResult
from .console import format_grid


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = covered cell
        - -2 = flagged cell
        - 0-8 = uncovered cell with adjacent bomb count
        - 9 = uncovered bomb

    Actions:
        Discrete action space of size grid_size * grid_size.
        Action i uncovers the cell at (i // grid_size, i % grid_size).

    Rewards:
        - +1 for uncovering a safe cell
        - +10 for winning the game
        - -10 for hitting a bomb
        - -0.1 for invalid action (already uncovered)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 bombs).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.board = self._new_board()

        size = self.config.grid_size
        self.observation_space = spaces.Box(
            low=-2, high=9, shape=(size, size), dtype=np.int8
        )
        self.action_space = spaces.Discrete(size * size)

        self._steps = 0
        self._hit_bomb = False

    def _new_board(self) -> Board:
        # Invalid moves are scored, not printed
        return Board(
            config=self.config, rng=self.np_random, diagnostics=lambda _: None
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly mined board.

        Args:
            seed: Random seed for reproducible bomb placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board = self._new_board()
        self._steps = 0
        self._hit_bomb = False

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Uncover one cell.

        Args:
            action: Cell index to uncover (row * grid_size + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = divmod(int(action), self.config.grid_size)
        self._steps += 1

        if self._hit_bomb or self.board.is_cleared:
            # Finished boards refuse further moves
            reward = -0.1
        else:
            reward = self._calculate_reward(self.board.uncover(row, col))
        terminated = self._hit_bomb or self.board.is_cleared

        return (
            self.board.get_observation(),
            reward,
            terminated,
            False,
            self._get_info(),
        )

    def _calculate_reward(self, result: UncoverResult) -> float:
        if result in (UncoverResult.FAILURE, UncoverResult.FLAGGED):
            return -0.1
        if result == UncoverResult.BOMB:
            self._hit_bomb = True
            return -10.0
        if self.board.is_cleared:
            return 10.0
        return 1.0

    @property
    def game_state(self) -> str:
        if self._hit_bomb:
            return "LOST"
        if self.board.is_cleared:
            return "WON"
        return "PLAYING"

    def _get_info(self) -> Dict[str, Any]:
        return {
            "steps": self._steps,
            "uncovered": self.board.uncovered_count,
            "total_safe": self.board.total_count - self.board.bomb_count,
            "game_state": self.game_state,
        }

    def render(self) -> Optional[str]:
        """Render the player's view of the board."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        return "\n".join(format_grid(self.board.render_player_view()))

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of cells that can be uncovered.

        Returns:
            int8 array where 1 = valid action, usable as
            ``action_space.sample(mask=...)``.
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for row, col in self.board.get_valid_actions():
            mask[row * self.config.grid_size + col] = 1
        return mask
