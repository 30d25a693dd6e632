from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from tictactoe.core import GameEngine, validate_dimensions
from tictactoe.features import BOARD_CHANNELS, build_board_tensor, legal_move_mask


class TicTacToeEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        row_size: int = 3,
        fields_to_win: Optional[int] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._row_size, self._fields_to_win = validate_dimensions(row_size, fields_to_win)
        self.render_mode = render_mode
        self._engine = GameEngine(self._row_size, self._fields_to_win)
        self._configure_spaces()

    @property
    def engine(self) -> GameEngine:
        return self._engine

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        if options:
            row_size = options.get("row_size", self._row_size)
            fields_to_win = options.get("fields_to_win", None if "row_size" in options else self._fields_to_win)
            self._row_size, self._fields_to_win = validate_dimensions(row_size, fields_to_win)
            self._configure_spaces()
        self._engine = GameEngine(self._row_size, self._fields_to_win)
        return build_board_tensor(self._engine), self._build_info(accepted=False)

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        before = self._engine.snapshot()
        mover = self._engine.turn
        self._engine.attempt_move(int(action_index))
        accepted = self._engine.snapshot() != before

        reward = 1.0 if accepted and self._engine.winner is mover else 0.0
        terminated = self._engine.is_over
        truncated = False
        return build_board_tensor(self._engine), reward, terminated, truncated, self._build_info(accepted)

    def legal_action_mask(self) -> np.ndarray:
        return legal_move_mask(self._engine)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._render_ascii()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _configure_spaces(self) -> None:
        board_shape = (BOARD_CHANNELS, self._row_size, self._row_size)
        self.observation_space = spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32)
        self.action_space = spaces.Discrete(self._row_size * self._row_size)

    def _build_info(self, accepted: bool) -> Dict:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "accepted": accepted,
            "winner": self._engine.winner,
            "solution": self._engine.solution,
        }

    def _render_ascii(self) -> str:
        rows = []
        cells = self._engine.cells
        n = self._row_size
        for start in range(0, len(cells), n):
            rows.append("".join(cell.symbol if cell is not None else "." for cell in cells[start : start + n]))
        return "\n".join(rows)
