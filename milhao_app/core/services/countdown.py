"""Repeating one-second timer driving the question countdown."""

from __future__ import annotations

import logging
from threading import Event, Lock, Thread
from typing import Callable

from milhao_app.constants.game_constants import TIMER_TICK_SECONDS

logger = logging.getLogger(__name__)

TickCallback = Callable[[Event], None]


class CountdownTimer:
    """Calls ``on_tick`` every ``interval`` seconds on a background thread.

    Each start creates a new run with its own stop event, which is handed to
    the callback. A stopped run never ticks again, but a tick that was
    already in flight can still arrive; callers holding their own lock check
    ``run.is_set()`` under it to discard such ticks.
    """

    def __init__(self, on_tick: TickCallback, interval: float = TIMER_TICK_SECONDS) -> None:
        if interval <= 0:
            raise ValueError("Timer interval must be positive.")
        self._on_tick = on_tick
        self._interval = interval
        self._lock = Lock()
        self._run: Event | None = None

    def start(self) -> Event:
        """Start a new run, cancelling the current one if any."""
        with self._lock:
            if self._run is not None:
                self._run.set()
            run = Event()
            self._run = run
        thread = Thread(target=self._loop, args=(run,), name="CountdownTimer", daemon=True)
        thread.start()
        return run

    def restart(self) -> Event:
        return self.start()

    def stop(self) -> None:
        with self._lock:
            if self._run is not None:
                self._run.set()
                self._run = None

    def is_running(self) -> bool:
        with self._lock:
            return self._run is not None and not self._run.is_set()

    def _loop(self, run: Event) -> None:
        while not run.wait(self._interval):
            try:
                self._on_tick(run)
            except Exception:  # Keep ticking after listener errors
                logger.exception("Countdown tick handler failed.")
