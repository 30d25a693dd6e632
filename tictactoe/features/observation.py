from __future__ import annotations

import numpy as np

from tictactoe.core import GameEngine

BOARD_CHANNELS = 3  # mover marks, opponent marks, empty


def build_board_tensor(engine: GameEngine) -> np.ndarray:
    """Return board tensor with shape (3, n, n) channel-first, from the side to move."""
    n = engine.row_size
    board = np.asarray(engine.board).reshape(n, n)
    tensor = np.zeros((BOARD_CHANNELS, n, n), dtype=np.float32)
    tensor[0] = board == int(engine.turn)
    tensor[1] = board == int(engine.turn.other())
    tensor[2] = board == 0
    return tensor


def legal_move_mask(engine: GameEngine) -> np.ndarray:
    mask = np.zeros((engine.board_size,), dtype=np.int8)
    if engine.is_over:
        return mask
    mask[engine.empty_cells()] = 1
    return mask
