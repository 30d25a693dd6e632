"""N x N tic-tac-toe rules engine."""

from . import core, env, features
from .config import GameConfig, load_game_config
from .core import (
    ConfigurationError,
    EngineSnapshot,
    GameEngine,
    GameStatus,
    OutOfBoundsError,
    Player,
    TicTacToeError,
)
from .env import TicTacToeEnv
from .features import BOARD_CHANNELS, build_board_tensor, legal_move_mask

__all__ = [
    "core",
    "env",
    "features",
    "GameEngine",
    "GameStatus",
    "Player",
    "EngineSnapshot",
    "TicTacToeError",
    "ConfigurationError",
    "OutOfBoundsError",
    "GameConfig",
    "load_game_config",
    "TicTacToeEnv",
    "BOARD_CHANNELS",
    "build_board_tensor",
    "legal_move_mask",
]
