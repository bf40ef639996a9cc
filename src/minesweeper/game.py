"""
Turn loop for a single console game.

Asks the player for operations, applies them to a Board and reports
the outcome once the game is won, lost or cancelled.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .board import Board, FlagResult, UncoverResult
from .console import Console


# ============================================================================
# Constants
# ============================================================================

class Operation(Enum):
    """Player operations, numbered as typed at the prompt."""

    UNCOVER = 0
    FLAG = 1
    CANCEL = 2


class EndGameState(Enum):
    """How a game ended."""

    WON = "won"
    LOST = "lost"
    CANCELLED = "cancelled"


END_GAME_MESSAGES = {
    EndGameState.WON: "You won the game!",
    EndGameState.LOST: "Bomb! You lost the game :(",
    EndGameState.CANCELLED: "Game was cancelled",
}

OPERATION_PROMPT = (
    "Select operation (0 = uncover, 1 = flag / unflag, 2 = cancel game): "
)


@dataclass
class GameResult:
    """Final tallies of a finished game."""

    state: EndGameState
    total_fields: int
    uncovered_fields: int
    bomb_fields: int


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One game of Minesweeper played through a Console.

    The board's diagnostics are expected to go to the same console,
    which `from_console` arranges.
    """

    def __init__(self, board: Board, console: Console) -> None:
        self.board = board
        self.console = console

    @classmethod
    def from_console(
        cls,
        console: Console,
        rng: Optional[np.random.Generator] = None,
    ) -> "GameSession":
        """
        Ask the player for the board settings and build the session.

        Raises:
            InvalidConfigurationError: If the settings are unplayable.
            PlacementExhaustedError: If bombs could not be placed.
        """
        grid_size = console.read_non_negative_int("Enter grid size: ")
        num_bombs = console.read_non_negative_int("Enter bombs number: ")
        board = Board.create(
            grid_size, num_bombs, rng=rng, diagnostics=console.write_line
        )
        return cls(board, console)

    def play(self) -> GameResult:
        """Run the turn loop to completion and report the result."""
        self.console.write_line("Board initialised! Let's start the game!")
        state = self._loop()
        self._display_result(state)
        return GameResult(
            state=state,
            total_fields=self.board.total_count,
            uncovered_fields=self.board.uncovered_count,
            bomb_fields=self.board.bomb_count,
        )

    def _loop(self) -> EndGameState:
        while True:
            self.console.write_grid(self.board.render_player_view())
            self.console.write_line()

            operation = self._read_operation()
            state = self._apply(operation)
            if state is not None:
                return state
            if self.board.is_cleared:
                return EndGameState.WON

    def _read_operation(self) -> Operation:
        while True:
            number = self.console.read_non_negative_int(OPERATION_PROMPT)
            try:
                return Operation(number)
            except ValueError:
                self.console.write_line(f"Invalid operation: {number}")

    def _apply(self, operation: Operation) -> Optional[EndGameState]:
        """Apply one operation; returns an end state if the game is over."""
        if operation == Operation.CANCEL:
            return EndGameState.CANCELLED

        row, col = self._read_position()
        if operation == Operation.UNCOVER:
            result = self.board.uncover(row, col)
            if result == UncoverResult.FLAGGED:
                self.console.write_line("Cannot uncover flagged field")
            elif result == UncoverResult.BOMB:
                return EndGameState.LOST
        else:
            result = self.board.toggle_flag(row, col)
            if result == FlagResult.ALREADY_UNCOVERED:
                self.console.write_line("Cannot flag uncovered field")
        return None

    def _read_position(self) -> Tuple[int, int]:
        row = self.console.read_non_negative_int("Select row: ")
        col = self.console.read_non_negative_int("Select column: ")
        return row, col

    def _display_result(self, state: EndGameState) -> None:
        self.console.write_grid(self.board.render_revealed_view())
        self.console.write_line(END_GAME_MESSAGES[state])

        uncovered = self.board.uncovered_count
        total = self.board.total_count
        self.console.write_line(f"Uncovered {uncovered} out of {total}")
        if self.board.remaining_count > 0:
            self.console.write_line(
                f"Fields without bombs to uncover: {self.board.remaining_count}"
            )
        self.console.write_line(f"Total bombs {self.board.bomb_count}")
