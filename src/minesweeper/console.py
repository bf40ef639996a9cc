"""
Console input/output for the text game.

Reads non-negative integers from the player and draws boards as
bordered, numbered text grids.
"""
import sys
from typing import Callable, List, Optional, Sequence


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class Console:
    """
    Thin wrapper over text input and output.

    Both ends are injectable so a game can be driven from a script.
    """

    def __init__(
        self,
        input_fn: Callable[[], str] = input,
        output_fn: Callable[[str], None] = _write_stdout,
    ) -> None:
        """
        Initialize the console.

        Args:
            input_fn: Returns one line of player input. Raises EOFError
                when input is exhausted.
            output_fn: Writes text as-is, without adding a newline.
        """
        self._input_fn = input_fn
        self._output_fn = output_fn

    def write(self, text: str = "") -> None:
        self._output_fn(text)

    def write_line(self, text: str = "") -> None:
        self._output_fn(text + "\n")

    def read_non_negative_int(self, prompt: str) -> int:
        """Prompt until the player enters a non-negative integer."""
        while True:
            self.write(prompt)
            raw = self._input_fn().strip()
            value = _parse_non_negative_int(raw)
            if value is not None:
                return value
            self.write_line(
                f"Invalid number: '{raw}'. Must be a non-negative integer.\n"
            )

    def write_grid(self, rows: Sequence[Sequence[str]]) -> None:
        for line in format_grid(rows):
            self.write_line(line)


def _parse_non_negative_int(raw: str) -> Optional[int]:
    try:
        value = int(raw)
    except ValueError:
        return None
    if value < 0:
        return None
    return value


def format_grid(rows: Sequence[Sequence[str]]) -> List[str]:
    """
    Lay out a grid of symbols with row/column numbers and borders.

    Example for a 2x2 grid::

         |0|1|
         -----
        0|?|?|
        1|?|X|
         -----

    Args:
        rows: Row-major symbols, one per cell.

    Returns:
        Text lines, without trailing newlines.
    """
    size = len(rows)
    # one symbol + one separator per column, plus the row-number gutter
    border = " " + "-" * (size * 2 + 1)

    lines = [" |" + "".join(f"{col}|" for col in range(size)), border]
    for index, symbols in enumerate(rows):
        lines.append(f"{index}|" + "".join(f"{symbol}|" for symbol in symbols))
    lines.append(border)
    return lines
