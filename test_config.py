import pytest
from pydantic import ValidationError

import config
from config import KnightSwapConfig, LoggingSettings, ScoreSettings, SearchSettings


@pytest.fixture(autouse=True)
def fresh_config():
    config.reset_config()
    yield
    config.reset_config()


def test_defaults():
    cfg = KnightSwapConfig()
    assert cfg.search.max_nodes is None
    assert cfg.scores.score_file == "scores.json"
    assert cfg.scores.leaderboard_size == 10
    assert cfg.scores.default_player_name == "Guest"
    assert cfg.logging.log_level == "INFO"


def test_from_env(monkeypatch):
    monkeypatch.setenv("KNIGHTSWAP_MAX_NODES", "500")
    monkeypatch.setenv("KNIGHTSWAP_SCORE_FILE", "data/best.json")
    monkeypatch.setenv("KNIGHTSWAP_LOG_LEVEL", "debug")
    monkeypatch.setenv("KNIGHTSWAP_UNICODE", "false")
    cfg = config.get_config()
    assert cfg.search.max_nodes == 500
    assert cfg.scores.score_file == "data/best.json"
    assert cfg.logging.log_level == "DEBUG"
    assert cfg.ui.use_unicode is False
    assert config.get_config() is cfg


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        LoggingSettings(log_level="LOUD")
    with pytest.raises(ValidationError):
        ScoreSettings(leaderboard_size=0)
    with pytest.raises(ValidationError):
        SearchSettings(max_nodes=-5)


def test_blank_player_name_defaults_to_guest():
    assert ScoreSettings(default_player_name="  ").default_player_name == "Guest"


def test_file_round_trip(tmp_path):
    path = str(tmp_path / "config.json")
    cfg = KnightSwapConfig()
    cfg.update_from_dict({"search": {"max_nodes": 42}, "scores": {"leaderboard_size": 5}, "bogus": {"x": 1}})
    cfg.save_to_file(path)

    loaded = config.load_config_from_file(path)
    assert loaded.search.max_nodes == 42
    assert loaded.scores.leaderboard_size == 5
    assert loaded.config_file == path
    assert config.get_config() is loaded


def test_ensure_dirs_creates_score_directory(tmp_path):
    cfg = KnightSwapConfig(scores=ScoreSettings(score_file=str(tmp_path / "a" / "scores.json")))
    config.ensure_dirs(cfg)
    assert (tmp_path / "a").is_dir()


def test_update_from_dict_validates_values():
    cfg = KnightSwapConfig()
    with pytest.raises(ValidationError):
        cfg.update_from_dict({"scores": {"leaderboard_size": 0}})
    with pytest.raises(ValidationError):
        cfg.update_from_dict({"logging": {"log_level": "bogus"}})
    assert cfg.scores.leaderboard_size == 10
    assert cfg.logging.log_level == "INFO"

    cfg.update_from_dict({"logging": {"log_level": "warning"}})
    assert cfg.logging.log_level == "WARNING"
