"""Feature extraction helpers for tic-tac-toe engines."""

from .observation import BOARD_CHANNELS, build_board_tensor, legal_move_mask

__all__ = [
    "BOARD_CHANNELS",
    "build_board_tensor",
    "legal_move_mask",
]
