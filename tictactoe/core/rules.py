from __future__ import annotations

from numbers import Integral
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .state import EMPTY, BoardArray, ConfigurationError, Player

MIN_ROW_SIZE = 3
MIN_FIELDS_TO_WIN = 3

Line = Tuple[int, ...]


def is_integer(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate_dimensions(row_size: object, fields_to_win: object = None) -> Tuple[int, int]:
    """Return ``(row_size, fields_to_win)`` as plain ints or raise ConfigurationError.

    ``fields_to_win`` defaults to ``row_size`` (a full line is needed to win).
    """
    if not is_integer(row_size) or row_size < MIN_ROW_SIZE:
        raise ConfigurationError(f"row_size must be an integer >= {MIN_ROW_SIZE}, got {row_size!r}")
    row_size = int(row_size)
    if fields_to_win is None:
        fields_to_win = row_size
    if not is_integer(fields_to_win) or not MIN_FIELDS_TO_WIN <= fields_to_win <= row_size:
        raise ConfigurationError(
            f"fields_to_win must be an integer >= {MIN_FIELDS_TO_WIN} and <= row_size ({row_size}), "
            f"got {fields_to_win!r}"
        )
    return row_size, int(fields_to_win)


def row_line(index: int, row_size: int) -> Line:
    start = (index // row_size) * row_size
    return tuple(range(start, start + row_size))


def column_line(index: int, row_size: int) -> Line:
    return tuple(range(index % row_size, row_size * row_size, row_size))


def main_trace(index: int, row_size: int) -> Line:
    """Diagonal through ``index`` running top-left to bottom-right (constant row - col)."""
    row, col = divmod(index, row_size)
    step = min(row, col)
    r, c = row - step, col - step
    line: List[int] = []
    while r < row_size and c < row_size:
        line.append(r * row_size + c)
        r += 1
        c += 1
    return tuple(line)


def anti_trace(index: int, row_size: int) -> Line:
    """Diagonal through ``index`` running top-right to bottom-left (constant row + col)."""
    row, col = divmod(index, row_size)
    step = min(row, row_size - 1 - col)
    r, c = row - step, col + step
    line: List[int] = []
    while r < row_size and c >= 0:
        line.append(r * row_size + c)
        r += 1
        c -= 1
    return tuple(line)


def lines_through(index: int, row_size: int, fields_to_win: int) -> List[Line]:
    lines = [row_line(index, row_size), column_line(index, row_size)]
    for trace in (main_trace(index, row_size), anti_trace(index, row_size)):
        # Shorter traces can never hold a winning run.
        if len(trace) >= fields_to_win:
            lines.append(trace)
    return lines


def find_run(board: BoardArray, line: Sequence[int], player: Player, fields_to_win: int) -> Optional[Line]:
    owned = board[list(line)] == int(player)
    for offset in range(len(line) - fields_to_win + 1):
        if owned[offset : offset + fields_to_win].all():
            return tuple(line[offset : offset + fields_to_win])
    return None


def find_winning_run(
    board: BoardArray,
    index: int,
    player: Player,
    row_size: int,
    fields_to_win: int,
) -> Optional[Line]:
    for line in lines_through(index, row_size, fields_to_win):
        run = find_run(board, line, player, fields_to_win)
        if run is not None:
            return run
    return None


def is_board_full(board: BoardArray) -> bool:
    return not np.any(board == EMPTY)
