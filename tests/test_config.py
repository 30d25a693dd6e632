import pytest

from tictactoe import ConfigurationError, GameConfig, GameStatus, load_game_config


def test_missing_file_gives_defaults(tmp_path):
    config = load_game_config(tmp_path / "absent.yaml")
    assert config == GameConfig()
    engine = config.create_engine()
    assert engine.row_size == 3
    assert engine.fields_to_win == 3


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "game.yaml"
    path.write_text("", encoding="utf-8")
    assert load_game_config(path) == GameConfig()


def test_load_custom_board(tmp_path):
    path = tmp_path / "game.yaml"
    path.write_text("row_size: 5\nfields_to_win: 3\n", encoding="utf-8")

    config = load_game_config(path)
    engine = config.create_engine()

    assert config.row_size == 5
    assert engine.board_size == 25
    assert engine.fields_to_win == 3
    assert engine.state is GameStatus.RUNNING


def test_invalid_dimensions_fail_at_load(tmp_path):
    path = tmp_path / "game.yaml"
    path.write_text("row_size: 4\nfields_to_win: 5\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_game_config(path)


def test_unknown_keys_rejected(tmp_path):
    path = tmp_path / "game.yaml"
    path.write_text("row_size: 4\nplayers: 3\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="players"):
        load_game_config(path)


def test_non_mapping_document_rejected(tmp_path):
    path = tmp_path / "game.yaml"
    path.write_text("- 3\n- 4\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_game_config(path)


def test_config_validates_on_construction():
    with pytest.raises(ConfigurationError):
        GameConfig(row_size=2)
