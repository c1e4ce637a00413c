"""Tests for the thread-safe game facade."""

import asyncio
import random
import threading
import time

import pytest

from milhao_app.core.game_manager import GameManager
from milhao_app.core.models import GameEndReason, GameStatus, LifelineKind
from milhao_app.core.services.match_recorder import InMemoryMatchSink, MatchRecorder


def wait_until(predicate, timeout: float = 3.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


@pytest.fixture
def sink() -> InMemoryMatchSink:
    return InMemoryMatchSink()


@pytest.fixture
def manager(pool, sink):
    game_manager = GameManager(
        pool,
        match_recorder=MatchRecorder(sink),
        player_id="tester",
        rng=random.Random(3),
        timer_interval=0.01,
    )
    yield game_manager
    game_manager.shutdown()


@pytest.fixture
def slow_manager(pool, sink):
    game_manager = GameManager(pool, match_recorder=MatchRecorder(sink), timer_interval=60)
    yield game_manager
    game_manager.shutdown()


def correct_index(manager: GameManager) -> int:
    return manager.get_snapshot().question.correct_option_index


def test_start_runs_the_countdown(slow_manager):
    assert slow_manager.start_game()
    assert slow_manager.is_timer_running()
    assert slow_manager.get_snapshot().is_started


def test_start_fails_without_questions(empty_pool):
    game_manager = GameManager(empty_pool)
    assert not game_manager.start_game()
    assert not game_manager.is_timer_running()
    game_manager.shutdown()


def test_timeout_ends_the_game(manager, sink):
    manager.start_game()
    assert wait_until(lambda: manager.get_snapshot().status is GameStatus.LOST)
    snapshot = manager.get_snapshot()
    assert snapshot.end_reason is GameEndReason.TIMEOUT
    assert snapshot.time_left == 0
    assert not manager.is_timer_running()
    assert wait_until(lambda: len(sink.results) == 1)


def test_answer_stops_the_countdown_for_good(slow_manager):
    slow_manager.start_game()
    wrong = (correct_index(slow_manager) + 1) % 4
    assert slow_manager.answer(wrong)
    assert not slow_manager.is_timer_running()
    assert slow_manager.get_snapshot().status is GameStatus.LOST


def test_intents_after_the_end_are_ignored(slow_manager):
    slow_manager.start_game()
    slow_manager.stop()
    assert not slow_manager.answer(0)
    assert not slow_manager.stop()
    assert not slow_manager.use_lifeline(LifelineKind.CROWD_VOTE)


def test_result_is_recorded_once(slow_manager, sink):
    slow_manager.start_game()
    slow_manager.answer(correct_index(slow_manager))
    slow_manager.stop()
    slow_manager.stop()
    assert wait_until(lambda: len(sink.results) == 1)
    time.sleep(0.05)
    assert len(sink.results) == 1
    result = sink.results[0]
    assert result.status is GameStatus.STOPPED
    assert result.level == 2
    assert result.score == 0
    assert result.game_id == "show-do-milhao"


def test_each_game_is_recorded(slow_manager, sink):
    for _ in range(2):
        slow_manager.start_game()
        slow_manager.stop()
    assert wait_until(lambda: len(sink.results) == 2)


def test_player_id_is_recorded(manager, sink):
    manager.start_game()
    manager.stop()
    assert wait_until(lambda: len(sink.results) == 1)
    assert sink.results[0].user_id == "tester"


def test_reroll_restarts_the_countdown(slow_manager):
    slow_manager.start_game()
    before = slow_manager.get_snapshot().question.id
    assert slow_manager.use_lifeline(LifelineKind.REROLL)
    assert slow_manager.get_snapshot().question.id != before
    assert slow_manager.is_timer_running()


def test_listeners_receive_snapshots(slow_manager):
    received = []
    slow_manager.subscribe(received.append)
    slow_manager.start_game()
    slow_manager.use_lifeline(LifelineKind.EXPERT_HINT)
    slow_manager.close_lifeline_modal()
    assert len(received) == 3
    assert received[1].lifeline_result is not None
    assert received[2].lifeline_result is None

    slow_manager.unsubscribe(received.append)
    slow_manager.stop()
    assert len(received) == 3


def test_failing_listener_does_not_break_intents(slow_manager):
    def broken(snapshot):
        raise RuntimeError("boom")

    slow_manager.subscribe(broken)
    assert slow_manager.start_game()
    assert slow_manager.stop()


def test_concurrent_answers_apply_once(slow_manager):
    slow_manager.start_game()
    wrong = (correct_index(slow_manager) + 1) % 4
    outcomes = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        outcomes.append(slow_manager.answer(wrong))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert outcomes.count(True) == 1


def test_add_questions_grows_the_pool(slow_manager, make_question):
    before = slow_manager.get_question_count()
    slow_manager.add_questions([make_question("extra")])
    assert slow_manager.get_question_count() == before + 1


def test_ticks_from_a_stopped_run_are_ignored(slow_manager):
    slow_manager.start_game()
    stale_run = threading.Event()
    stale_run.set()
    slow_manager._handle_tick(stale_run)
    assert slow_manager.get_snapshot().time_left == 30

    live_run = threading.Event()
    slow_manager._handle_tick(live_run)
    assert slow_manager.get_snapshot().time_left == 29


def test_save_questions_without_a_source_is_not_stored(slow_manager, make_question):
    added = slow_manager.add_questions([make_question("extra")])
    assert asyncio.run(slow_manager.save_questions(added)) is False
