"""Tests for the background countdown timer."""

import threading
import time

import pytest

from milhao_app.core.services.countdown import CountdownTimer


def wait_until(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


def test_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        CountdownTimer(lambda run: None, interval=0)


def test_ticks_until_stopped():
    ticks = []
    timer = CountdownTimer(ticks.append, interval=0.01)
    timer.start()
    assert timer.is_running()
    assert wait_until(lambda: len(ticks) >= 3)
    timer.stop()
    assert not timer.is_running()

    settled = len(ticks)
    time.sleep(0.05)
    assert len(ticks) <= settled + 1


def test_restart_cancels_the_previous_run():
    runs = []
    timer = CountdownTimer(runs.append, interval=0.01)
    first = timer.start()
    second = timer.restart()
    assert first.is_set()
    assert not second.is_set()
    assert wait_until(lambda: second in runs)
    timer.stop()
    assert second.is_set()


def test_failing_callback_does_not_kill_the_timer():
    calls = []
    done = threading.Event()

    def on_tick(run):
        calls.append(run)
        if len(calls) >= 3:
            done.set()
        raise RuntimeError("listener bug")

    timer = CountdownTimer(on_tick, interval=0.01)
    timer.start()
    assert done.wait(2.0)
    timer.stop()
