"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, List, Tuple

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Console


# ============================================================================
# Helpers
# ============================================================================

class ScriptedRng:
    """Stand-in for numpy's Generator that returns preset integers."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = iter(values)
        self.calls = 0

    def integers(self, low: int, high: int) -> int:
        self.calls += 1
        value = next(self._values)
        assert low <= value < high
        return value


def board_with_bombs(
    grid_size: int, bombs: List[Tuple[int, int]], messages: List[str] = None
) -> Board:
    """Build a board whose bombs land exactly at the given positions."""
    values = [coordinate for position in bombs for coordinate in position]
    sink = messages.append if messages is not None else (lambda _: None)
    return Board(
        config=BoardConfig(grid_size, len(bombs)),
        rng=ScriptedRng(values),
        diagnostics=sink,
    )


class ScriptedConsole(Console):
    """Console fed from a list of lines, collecting everything written."""

    def __init__(self, lines: Iterable[str]) -> None:
        self.output: List[str] = []
        self._lines = iter(lines)
        super().__init__(input_fn=self._next_line, output_fn=self.output.append)

    def _next_line(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    @property
    def text(self) -> str:
        return "".join(self.output)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def messages() -> List[str]:
    """Collected diagnostic messages."""
    return []


@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 bombs."""
    return Board(rng=np.random.default_rng(1234))


@pytest.fixture
def corner_board(messages: List[str]) -> Board:
    """5x5 board with a single bomb in the top-left corner."""
    return board_with_bombs(5, [(0, 0)], messages)


@pytest.fixture
def wall_board(messages: List[str]) -> Board:
    """
    5x5 board with bombs filling column 2.

    Columns 0 and 4 are blank, columns 1 and 3 are numbers, so the
    board splits into two separate flood regions.
    """
    return board_with_bombs(5, [(row, 2) for row in range(5)], messages)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 10)
