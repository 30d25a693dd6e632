"""Core game logic for N x N tic-tac-toe."""

from .engine import GameEngine
from .rules import (
    MIN_FIELDS_TO_WIN,
    MIN_ROW_SIZE,
    anti_trace,
    column_line,
    find_run,
    find_winning_run,
    is_board_full,
    lines_through,
    main_trace,
    row_line,
    validate_dimensions,
)
from .state import (
    ConfigurationError,
    EngineSnapshot,
    GameStatus,
    OutOfBoundsError,
    Player,
    TicTacToeError,
)

__all__ = [
    "GameEngine",
    "GameStatus",
    "Player",
    "EngineSnapshot",
    "TicTacToeError",
    "ConfigurationError",
    "OutOfBoundsError",
    "MIN_ROW_SIZE",
    "MIN_FIELDS_TO_WIN",
    "validate_dimensions",
    "row_line",
    "column_line",
    "main_trace",
    "anti_trace",
    "lines_through",
    "find_run",
    "find_winning_run",
    "is_board_full",
]
