"""
Board module for Minesweeper game.

Implements the mine field: bomb placement, neighbor counts,
uncovering (with flood reveal of blank regions), flagging and
progress accounting.
"""
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

import numpy as np

from .cell import CellState, CellValue, to_display_symbol, to_observation


# ============================================================================
# Constants
# ============================================================================

MAX_PLACEMENT_ATTEMPTS = 1_000


class UncoverResult(Enum):
    """Outcome of uncovering a cell."""

    FAILURE = auto()
    BLANK = auto()
    NUMBER = auto()
    BOMB = auto()
    FLAGGED = auto()


class FlagResult(Enum):
    """Outcome of toggling a flag."""

    FAILURE = auto()
    SUCCESS = auto()
    ALREADY_UNCOVERED = auto()


class BoardView(Enum):
    """Which picture of the board to render."""

    PLAYER = auto()
    REVEALED = auto()


# ============================================================================
# Errors
# ============================================================================

class InvalidConfigurationError(ValueError):
    """Grid size or bomb count cannot form a playable board."""


class PlacementExhaustedError(RuntimeError):
    """No free cell for a bomb was found within the attempt limit."""


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a square Minesweeper board.

    Attributes:
        grid_size: Number of rows (and columns).
        num_bombs: Total bombs to place.
    """

    grid_size: int = 9
    num_bombs: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.grid_size < 1:
            raise InvalidConfigurationError(
                f"Grid size must be greater than 0, got {self.grid_size}"
            )
        if self.num_bombs < 1:
            raise InvalidConfigurationError(
                f"Bombs number must be greater than 0, got {self.num_bombs}"
            )
        if self.num_bombs >= self.total_cells:
            raise InvalidConfigurationError(
                f"Bombs number must be less than the number of cells "
                f"({self.total_cells}), got {self.num_bombs}"
            )

    @property
    def total_cells(self) -> int:
        return self.grid_size * self.grid_size


# Preset difficulty levels
BEGINNER = BoardConfig(9, 10)
INTERMEDIATE = BoardConfig(16, 40)
EXPERT = BoardConfig(24, 99)

PRESETS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the mine layout (fixed once built) and the visibility layer
    (changed only through uncover/toggle_flag). Bombs are placed as
    soon as the board is created.

    Attributes:
        config: Board dimensions and bomb count.
        rng: Source of random integers for bomb placement. Anything
            with a numpy-style ``integers(low, high)`` method works.
        diagnostics: Sink for human-readable soft-failure messages.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: np.random.Generator = field(
        default_factory=np.random.default_rng, repr=False
    )
    diagnostics: Callable[[str], None] = field(default=print, repr=False)
    _layout: List[List[CellValue]] = field(default_factory=list, repr=False)
    _visibility: List[List[CellState]] = field(
        default_factory=list, repr=False
    )
    _uncovered_count: int = 0

    def __post_init__(self) -> None:
        """Build the mine layout after dataclass creation."""
        self._init_visibility()
        self._layout = self._build_layout()

    @classmethod
    def create(
        cls,
        grid_size: int,
        num_bombs: int,
        rng: Optional[np.random.Generator] = None,
        diagnostics: Callable[[str], None] = print,
    ) -> "Board":
        """
        Construct a board of ``grid_size`` x ``grid_size`` with ``num_bombs``.

        Raises:
            InvalidConfigurationError: On a non-positive size or bomb
                count, or when bombs would fill every cell.
            PlacementExhaustedError: When bomb placement gives up.
        """
        config = BoardConfig(grid_size, num_bombs)
        if rng is None:
            rng = np.random.default_rng()
        return cls(config=config, rng=rng, diagnostics=diagnostics)

    # ========================================================================
    # Layout Construction (Low-level)
    # ========================================================================

    def _init_visibility(self) -> None:
        """Cover every cell."""
        size = self.config.grid_size
        self._visibility = [
            [CellState.COVERED for _ in range(size)] for _ in range(size)
        ]
        self._uncovered_count = 0

    def _build_layout(self) -> List[List[CellValue]]:
        """Place bombs and derive neighbor counts."""
        size = self.config.grid_size
        counts = [[0] * size for _ in range(size)]
        bombs = set()

        for _ in range(self.config.num_bombs):
            row, col = self._pick_empty_position(bombs)
            bombs.add((row, col))
            for neighbor_row, neighbor_col in self._get_neighbors(row, col):
                if (neighbor_row, neighbor_col) not in bombs:
                    counts[neighbor_row][neighbor_col] += 1

        return [
            [
                CellValue.bomb() if (row, col) in bombs
                else CellValue.count(counts[row][col])
                for col in range(size)
            ]
            for row in range(size)
        ]

    def _pick_empty_position(self, bombs: set) -> Tuple[int, int]:
        """Sample random cells until one without a bomb turns up."""
        size = self.config.grid_size
        for _ in range(MAX_PLACEMENT_ATTEMPTS):
            row = int(self.rng.integers(0, size))
            col = int(self.rng.integers(0, size))
            if (row, col) not in bombs:
                return row, col

        raise PlacementExhaustedError(
            "Could not find an empty cell to place a bomb. "
            "Please provide different board settings."
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        size = self.config.grid_size
        return 0 <= row < size and 0 <= col < size

    def _validate_position(self, row: int, col: int) -> bool:
        """Like _is_valid_position, but reports rejected input."""
        if self._is_valid_position(row, col):
            return True
        self.diagnostics(
            f"Input is outside of the board. '{row}' and '{col}' "
            f"must be in [0, {self.config.grid_size - 1}] range"
        )
        return False

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def uncover(self, row: int, col: int) -> UncoverResult:
        """
        Uncover the cell at the given position.

        A blank cell floods outward through its connected blank region,
        also uncovering the numbered cells bordering it.

        Args:
            row: Row index to uncover.
            col: Column index to uncover.

        Returns:
            FAILURE for out-of-range or already uncovered cells,
            FLAGGED if the cell is flagged (nothing changes), otherwise
            BOMB, BLANK or NUMBER for the value of the chosen cell.
        """
        if not self._validate_position(row, col):
            return UncoverResult.FAILURE

        state = self._visibility[row][col]
        if state == CellState.FLAGGED:
            return UncoverResult.FLAGGED
        if state == CellState.UNCOVERED:
            self.diagnostics(f"[{row},{col}] already uncovered")
            return UncoverResult.FAILURE

        value = self._layout[row][col]
        if value.is_blank:
            self._flood_uncover(row, col)
        else:
            self._uncover_cell(row, col)

        if value.is_bomb:
            return UncoverResult.BOMB
        if value.is_blank:
            return UncoverResult.BLANK
        return UncoverResult.NUMBER

    def _flood_uncover(self, row: int, col: int) -> None:
        """Uncover a blank region and its numbered border."""
        pending = deque([(row, col)])
        while pending:
            current_row, current_col = pending.pop()
            if self._visibility[current_row][current_col] == CellState.UNCOVERED:
                continue

            self._uncover_cell(current_row, current_col)
            if not self._layout[current_row][current_col].is_blank:
                continue

            for neighbor in self._get_neighbors(current_row, current_col):
                neighbor_row, neighbor_col = neighbor
                if self._visibility[neighbor_row][neighbor_col] != CellState.UNCOVERED:
                    pending.append(neighbor)

    def _uncover_cell(self, row: int, col: int) -> None:
        """Mark a single cell uncovered, counting it once."""
        if self._visibility[row][col] != CellState.UNCOVERED:
            self._uncovered_count += 1
        self._visibility[row][col] = CellState.UNCOVERED

    def toggle_flag(self, row: int, col: int) -> FlagResult:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            SUCCESS if the flag was placed or removed, ALREADY_UNCOVERED
            for an uncovered cell, FAILURE for an out-of-range position.
        """
        if not self._validate_position(row, col):
            return FlagResult.FAILURE

        state = self._visibility[row][col]
        if state == CellState.UNCOVERED:
            return FlagResult.ALREADY_UNCOVERED

        if state == CellState.FLAGGED:
            self._visibility[row][col] = CellState.COVERED
        else:
            self._visibility[row][col] = CellState.FLAGGED
        return FlagResult.SUCCESS

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def grid_size(self) -> int:
        return self.config.grid_size

    @property
    def uncovered_count(self) -> int:
        """Number of cells currently uncovered."""
        return self._uncovered_count

    @property
    def total_count(self) -> int:
        """Number of cells on the board."""
        return self.config.total_cells

    @property
    def bomb_count(self) -> int:
        """Number of bombs on the board."""
        return self.config.num_bombs

    @property
    def remaining_count(self) -> int:
        """Safe cells still waiting to be uncovered."""
        return sum(
            state != CellState.UNCOVERED and not value.is_bomb
            for states, values in zip(self._visibility, self._layout)
            for state, value in zip(states, values)
        )

    @property
    def flag_count(self) -> int:
        return sum(
            state == CellState.FLAGGED
            for states in self._visibility
            for state in states
        )

    @property
    def is_cleared(self) -> bool:
        """Check if every safe cell has been uncovered."""
        return self.remaining_count == 0

    def get_cell_value(self, row: int, col: int) -> Optional[CellValue]:
        """Get layout value at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._layout[row][col]

    def get_cell_state(self, row: int, col: int) -> Optional[CellState]:
        """Get visibility at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._visibility[row][col]

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be uncovered.

        Returns:
            List of covered (row, col) positions. Flagged cells are left
            out since they must be unflagged first.
        """
        actions = []
        for row in range(self.grid_size):
            for col in range(self.grid_size):
                if self._visibility[row][col] == CellState.COVERED:
                    actions.append((row, col))
        return actions

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = covered
                -2 = flagged
                0-8 = uncovered with adjacent count
                9 = uncovered bomb
        """
        obs = np.zeros((self.grid_size, self.grid_size), dtype=np.int8)
        for row in range(self.grid_size):
            for col in range(self.grid_size):
                obs[row, col] = to_observation(
                    self._visibility[row][col], self._layout[row][col]
                )
        return obs

    # ========================================================================
    # Rendering
    # ========================================================================

    def render(self, view: BoardView = BoardView.PLAYER) -> List[List[str]]:
        """
        Render the board as rows of display symbols.

        Args:
            view: PLAYER shows what the player has uncovered; REVEALED
                shows every cell's value regardless of visibility.

        Returns:
            Row-major list of rows, one glyph per cell.
        """
        if view == BoardView.REVEALED:
            return [
                [value.to_symbol() for value in values]
                for values in self._layout
            ]
        return [
            [
                to_display_symbol(state, value)
                for state, value in zip(states, values)
            ]
            for states, values in zip(self._visibility, self._layout)
        ]

    def render_player_view(self) -> List[List[str]]:
        return self.render(BoardView.PLAYER)

    def render_revealed_view(self) -> List[List[str]]:
        return self.render(BoardView.REVEALED)
