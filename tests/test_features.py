import numpy as np

from tictactoe.core import GameEngine
from tictactoe.features import BOARD_CHANNELS, build_board_tensor, legal_move_mask


def test_board_tensor_initial_board():
    engine = GameEngine(4)
    tensor = build_board_tensor(engine)

    assert tensor.shape == (BOARD_CHANNELS, 4, 4)
    assert tensor.dtype == np.float32
    assert tensor[0].sum() == 0
    assert tensor[1].sum() == 0
    assert tensor[2].sum() == 16


def test_board_tensor_is_from_side_to_move():
    engine = GameEngine()
    engine.attempt_move(0)  # CROSS, NOUGHT to move
    tensor = build_board_tensor(engine)

    # Channel 0 holds the mover's (NOUGHT) marks, channel 1 the opponent's.
    assert tensor[0].sum() == 0
    assert tensor[1, 0, 0] == 1.0
    assert tensor[2, 0, 0] == 0.0

    engine.attempt_move(5)
    tensor = build_board_tensor(engine)
    assert tensor[0, 0, 0] == 1.0
    assert tensor[1, 1, 2] == 1.0


def test_legal_move_mask_tracks_empty_cells():
    engine = GameEngine()
    engine.attempt_move(4)
    mask = legal_move_mask(engine)

    assert mask.shape == (9,)
    assert mask[4] == 0
    assert np.count_nonzero(mask) == 8


def test_legal_move_mask_empty_after_game_over():
    engine = GameEngine()
    for index in [0, 3, 1, 4, 2]:
        engine.attempt_move(index)

    assert engine.is_over
    assert np.count_nonzero(legal_move_mask(engine)) == 0
