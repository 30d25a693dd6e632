from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from tictactoe.core import ConfigurationError, GameEngine, validate_dimensions


@dataclass(frozen=True)
class GameConfig:
    row_size: int = 3
    fields_to_win: Optional[int] = None

    def __post_init__(self) -> None:
        validate_dimensions(self.row_size, self.fields_to_win)

    def create_engine(self) -> GameEngine:
        return GameEngine(row_size=self.row_size, fields_to_win=self.fields_to_win)

    @classmethod
    def from_dict(cls, data: Dict) -> "GameConfig":
        if not isinstance(data, dict):
            raise ConfigurationError(f"game config must be a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"unknown game config keys: {', '.join(map(str, unknown))}")
        return cls(**data)


def load_yaml_config(path: Union[str, Path]) -> Dict:
    path = Path(path)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def load_game_config(path: Union[str, Path]) -> GameConfig:
    """Read a YAML file into a GameConfig; a missing or empty file gives the defaults."""
    return GameConfig.from_dict(load_yaml_config(path))
