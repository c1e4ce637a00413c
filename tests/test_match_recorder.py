"""Tests for fire-and-forget match persistence."""

import gc
import json
import warnings

import pytest

from milhao_app.core.models import GameStatus, MatchResult
from milhao_app.core.services.match_recorder import InMemoryMatchSink, JsonLinesMatchSink, MatchRecorder


class BrokenSink:
    async def record(self, result: MatchResult) -> None:
        raise ConnectionError("sink offline")


@pytest.fixture
def result() -> MatchResult:
    return MatchResult(
        user_id="player-1",
        game_id="show-do-milhao",
        score=5_000,
        level=6,
        status=GameStatus.STOPPED,
    )


def test_to_record_shape(result):
    assert result.to_record() == {
        "user_id": "player-1",
        "game_id": "show-do-milhao",
        "score": 5_000,
        "metadata": {"level": 6, "status": "stopped"},
    }


def test_recorder_delivers_to_sink(result):
    sink = InMemoryMatchSink()
    recorder = MatchRecorder(sink)
    recorder.submit(result).result(timeout=2)
    recorder.shutdown()
    assert sink.results == [result]


def test_sink_failure_is_contained(result, caplog):
    recorder = MatchRecorder(BrokenSink())
    future = recorder.submit(result)
    recorder.shutdown(wait=True)
    assert isinstance(future.exception(), ConnectionError)
    assert "Failed to record match result" in caplog.text


def test_submit_after_shutdown_leaves_no_pending_coroutine(result):
    recorder = MatchRecorder(InMemoryMatchSink())
    recorder.shutdown()
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        with pytest.raises(RuntimeError):
            recorder.submit(result)
        gc.collect()
    assert not [w for w in caught if "was never awaited" in str(w.message)]


def test_json_lines_sink_appends(tmp_path, result):
    path = tmp_path / "results" / "matches.jsonl"
    recorder = MatchRecorder(JsonLinesMatchSink(path))
    recorder.submit(result).result(timeout=2)
    recorder.submit(result).result(timeout=2)
    recorder.shutdown()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    record = json.loads(lines[0])
    assert record["score"] == 5_000
    assert record["metadata"] == {"level": 6, "status": "stopped"}
    assert "finished_at" in record
