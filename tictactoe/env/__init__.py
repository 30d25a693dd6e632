from .gym_env import TicTacToeEnv

__all__ = ["TicTacToeEnv"]
