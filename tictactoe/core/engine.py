from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from .rules import find_winning_run, is_board_full, is_integer, validate_dimensions
from .state import (
    EMPTY,
    EngineSnapshot,
    GameStatus,
    OutOfBoundsError,
    Player,
    cell_to_player,
    new_board,
)

logger = logging.getLogger(__name__)


class GameEngine:
    """State and rules for a single N x N game.

    The board is mutated only through :meth:`attempt_move`. Moves on an
    occupied cell or after the game is over are silently ignored; an index
    outside the board raises :class:`OutOfBoundsError`.
    """

    def __init__(self, row_size: int = 3, fields_to_win: Optional[int] = None) -> None:
        self._row_size, self._fields_to_win = validate_dimensions(row_size, fields_to_win)
        self._board_size = self._row_size * self._row_size
        self._board = new_board(self._board_size)
        self._state = GameStatus.RUNNING
        self._turn = Player.CROSS
        self._winner: Optional[Player] = None
        self._solution: Optional[Tuple[int, ...]] = None

    @property
    def row_size(self) -> int:
        return self._row_size

    @property
    def board_size(self) -> int:
        return self._board_size

    @property
    def fields_to_win(self) -> int:
        return self._fields_to_win

    @property
    def state(self) -> GameStatus:
        return self._state

    @property
    def turn(self) -> Player:
        return self._turn

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def solution(self) -> Optional[Tuple[int, ...]]:
        return self._solution

    @property
    def is_over(self) -> bool:
        return self._state is GameStatus.OVER

    @property
    def cells(self) -> Tuple[Optional[Player], ...]:
        return tuple(cell_to_player(value) for value in self._board)

    @property
    def board(self) -> np.ndarray:
        """Read-only view of the raw board (0 empty, otherwise Player value)."""
        view = self._board.view()
        view.flags.writeable = False
        return view

    def occupant(self, index: int) -> Optional[Player]:
        self._check_index(index)
        return cell_to_player(self._board[index])

    def empty_cells(self) -> List[int]:
        return [int(i) for i in np.flatnonzero(self._board == EMPTY)]

    def snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            row_size=self._row_size,
            fields_to_win=self._fields_to_win,
            cells=self.cells,
            turn=self._turn,
            state=self._state,
            winner=self._winner,
            solution=self._solution,
        )

    def attempt_move(self, index: int) -> None:
        self._check_index(index)
        index = int(index)

        if self._state is not GameStatus.RUNNING:
            logger.debug("Move %d ignored: game is over.", index)
            return
        if self._board[index] != EMPTY:
            logger.debug("Move %d ignored: cell already occupied.", index)
            return

        mover = self._turn
        self._board[index] = int(mover)
        logger.debug("%s marked cell %d.", mover.name, index)

        run = find_winning_run(self._board, index, mover, self._row_size, self._fields_to_win)
        if run is not None:
            self._state = GameStatus.OVER
            self._winner = mover
            self._solution = run
            logger.debug("%s wins with %s.", mover.name, run)
        elif is_board_full(self._board):
            self._state = GameStatus.OVER
            logger.debug("Board full with no winner: draw.")

        if self._state is GameStatus.RUNNING:
            self._turn = mover.other()

    def _check_index(self, index: object) -> None:
        if not is_integer(index) or not 0 <= index < self._board_size:
            raise OutOfBoundsError(f"index must be an integer in [0, {self._board_size}), got {index!r}")

    def __repr__(self) -> str:
        rows = []
        for start in range(0, self._board_size, self._row_size):
            row = self._board[start : start + self._row_size]
            rows.append(" ".join(Player(int(v)).symbol if v != EMPTY else "." for v in row))
        board_str = "\n".join(rows)
        return (
            f"GameEngine(row_size={self._row_size}, fields_to_win={self._fields_to_win}, "
            f"turn={self._turn.name}, state={self._state.value})\n"
            f"{board_str}"
        )
