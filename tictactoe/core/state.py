from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

BoardArray = NDArray[np.int8]

EMPTY = 0


class Player(IntEnum):
    CROSS = 1
    NOUGHT = 2

    @property
    def symbol(self) -> str:
        return "X" if self is Player.CROSS else "O"

    def other(self) -> "Player":
        return Player.NOUGHT if self is Player.CROSS else Player.CROSS


class GameStatus(Enum):
    RUNNING = "running"
    OVER = "over"


class TicTacToeError(Exception):
    """Base class for engine failures."""


class ConfigurationError(TicTacToeError, ValueError):
    """Board dimensions or win length are invalid."""


class OutOfBoundsError(TicTacToeError, IndexError):
    """A move index falls outside the board."""


@dataclass(frozen=True)
class EngineSnapshot:
    row_size: int
    fields_to_win: int
    cells: Tuple[Optional[Player], ...]
    turn: Player
    state: GameStatus
    winner: Optional[Player] = None
    solution: Optional[Tuple[int, ...]] = None

    @property
    def occupied_count(self) -> int:
        return sum(1 for cell in self.cells if cell is not None)


def cell_to_player(value: int) -> Optional[Player]:
    if value == EMPTY:
        return None
    return Player(int(value))


def new_board(board_size: int) -> BoardArray:
    return np.zeros((board_size,), dtype=np.int8)
