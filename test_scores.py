import json

import pytest
from pydantic import ValidationError

from knightswap.scores import PlayerScore, RankedPlayerScore, ScoreBoard


@pytest.fixture
def score_path(tmp_path):
    return str(tmp_path / "scores.json")


def test_missing_file_starts_empty(score_path):
    board = ScoreBoard(score_path)
    assert len(board) == 0
    assert board.top_scores(10) == []


def test_add_new_player_is_saved(score_path):
    board = ScoreBoard(score_path)
    assert board.add_or_update("alice", 20)
    with open(score_path, encoding="utf-8") as f:
        data = json.load(f)
    assert data == [{"playerName": "alice", "bestScore": 20}]


def test_update_only_when_strictly_better(score_path):
    board = ScoreBoard(score_path)
    board.add_or_update("alice", 20)
    assert not board.add_or_update("alice", 25)
    assert board.get_player_score("alice").best_score == 20
    assert not board.add_or_update("alice", 20)
    assert board.add_or_update("alice", 16)
    assert board.get_player_score("alice").best_score == 16
    assert len(board) == 1


def test_scores_reload_from_disk(score_path):
    board = ScoreBoard(score_path)
    board.add_or_update("alice", 18)
    board.add_or_update("bob", 16)

    reloaded = ScoreBoard(score_path)
    assert reloaded.to_dict() == {"alice": 18, "bob": 16}


def test_top_scores_sorted_and_limited(score_path):
    board = ScoreBoard(score_path)
    for name, moves in [("a", 30), ("b", 16), ("c", 22), ("d", 16), ("e", 40)]:
        board.add_or_update(name, moves)
    top = board.top_scores(3)
    assert [s.player_name for s in top] == ["b", "d", "c"]
    assert board.top_scores(0) == []
    assert len(board.top_scores(100)) == 5


def test_ranked_scores(score_path):
    board = ScoreBoard(score_path)
    board.add_or_update("a", 30)
    board.add_or_update("b", 16)
    ranked = board.ranked_scores(5)
    assert ranked[0] == RankedPlayerScore(board.get_player_score("b"), 1)
    assert [r.rank for r in ranked] == [1, 2]


def test_get_unknown_player(score_path):
    assert ScoreBoard(score_path).get_player_score("nobody") is None


@pytest.mark.parametrize("content", ["", "{not json", '{"playerName": "x"}', '[{"playerName": "x"}]'])
def test_corrupt_file_starts_empty(score_path, content):
    with open(score_path, "w", encoding="utf-8") as f:
        f.write(content)
    assert len(ScoreBoard(score_path)) == 0


def test_save_creates_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "scores.json"
    board = ScoreBoard(str(path))
    board.add_or_update("alice", 20)
    assert path.exists()


def test_player_score_model():
    score = PlayerScore(player_name="alice", best_score=18)
    assert str(score) == "alice: 18 score"
    assert score.model_dump(by_alias=True) == {"playerName": "alice", "bestScore": 18}
    assert PlayerScore.model_validate({"playerName": "bob", "bestScore": 3}).player_name == "bob"
    with pytest.raises(ValidationError):
        PlayerScore(player_name="alice", best_score=-1)
    with pytest.raises(ValidationError):
        PlayerScore(player_name="", best_score=1)


def test_failed_implicit_save_keeps_change_in_memory(tmp_path):
    board = ScoreBoard(str(tmp_path))
    assert board.add_or_update("alice", 5) is True
    assert board.get_player_score("alice").best_score == 5
    assert board.add_or_update("alice", 3) is True
    assert board.to_dict() == {"alice": 3}


def test_explicit_save_raises_on_failure(tmp_path):
    board = ScoreBoard(str(tmp_path))
    board.add_or_update("alice", 5)
    with pytest.raises(OSError):
        board.save()


def test_file_holding_object_starts_empty(score_path):
    with open(score_path, "w", encoding="utf-8") as f:
        json.dump({"playerName": "x", "bestScore": 4}, f)
    assert len(ScoreBoard(score_path)) == 0


def test_invalid_entry_starts_empty(score_path):
    with open(score_path, "w", encoding="utf-8") as f:
        json.dump([{"playerName": "ok", "bestScore": 2}, {"playerName": "x", "bestScore": -1}], f)
    board = ScoreBoard(score_path)
    assert len(board) == 0
    assert board.get_player_score("ok") is None
