"""
Cell module for Minesweeper game.

Separates what is under a cell (bomb or neighbor count) from what the
player currently sees of it (covered/flagged/uncovered).
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

COVERED_SYMBOL = "?"
FLAG_SYMBOL = "X"
BOMB_SYMBOL = "*"
BLANK_SYMBOL = " "

MAX_NEIGHBORS = 8


class CellState(Enum):
    """Player-facing state of a cell."""

    COVERED = auto()
    UNCOVERED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Value
# ============================================================================

@dataclass(frozen=True)
class CellValue:
    """
    Content of a single cell in the mine layout.

    Either a bomb, or the number of bombs among the up-to-8 neighbors.

    Attributes:
        is_bomb: Whether this cell holds a bomb.
        adjacent_bombs: Count of bombs in neighboring cells (0-8).
            Always 0 for a bomb cell.
    """

    is_bomb: bool = False
    adjacent_bombs: int = 0

    def __post_init__(self) -> None:
        if self.is_bomb and self.adjacent_bombs:
            raise ValueError("Bomb cells carry no neighbor count")
        if not 0 <= self.adjacent_bombs <= MAX_NEIGHBORS:
            raise ValueError(
                f"Neighbor count must be in [0, {MAX_NEIGHBORS}], "
                f"got {self.adjacent_bombs}"
            )

    @classmethod
    def bomb(cls) -> "CellValue":
        """Create a bomb cell."""
        return cls(is_bomb=True)

    @classmethod
    def count(cls, adjacent_bombs: int) -> "CellValue":
        """Create a safe cell with the given neighbor count."""
        return cls(adjacent_bombs=adjacent_bombs)

    @property
    def is_blank(self) -> bool:
        """Safe cell with no neighboring bombs."""
        return not self.is_bomb and self.adjacent_bombs == 0

    @property
    def is_number(self) -> bool:
        """Safe cell touching at least one bomb."""
        return not self.is_bomb and self.adjacent_bombs > 0

    def to_symbol(self) -> str:
        """Display glyph of the value itself, ignoring visibility."""
        if self.is_bomb:
            return BOMB_SYMBOL
        if self.adjacent_bombs == 0:
            return BLANK_SYMBOL
        return str(self.adjacent_bombs)

    def to_observation(self) -> int:
        """Numeric encoding: 9 for a bomb, otherwise the neighbor count."""
        if self.is_bomb:
            return 9
        return self.adjacent_bombs


def to_display_symbol(state: CellState, value: CellValue) -> str:
    """
    Glyph the player sees for a cell.

    Args:
        state: Visibility of the cell.
        value: Underlying layout value.

    Returns:
        Masking glyph when covered, flag glyph when flagged,
        otherwise the value's own glyph.
    """
    if state == CellState.COVERED:
        return COVERED_SYMBOL
    if state == CellState.FLAGGED:
        return FLAG_SYMBOL
    return value.to_symbol()


def to_observation(state: CellState, value: CellValue) -> int:
    """
    Convert a cell to an observation value.

    Returns:
        -1: Covered cell
        -2: Flagged cell
        0-8: Uncovered cell with adjacent bomb count
        9: Uncovered bomb (game over state)
    """
    if state == CellState.COVERED:
        return -1
    if state == CellState.FLAGGED:
        return -2
    return value.to_observation()
