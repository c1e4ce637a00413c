"""Business logic for running the game, shared between UI, API and timer."""

from __future__ import annotations

import logging
import random
from threading import Event, Lock
from typing import Callable

from milhao_app.constants.game_constants import GAME_ID, TIMER_TICK_SECONDS
from milhao_app.core.models import (
    GameSnapshot,
    GameStatus,
    LifelineKind,
    MatchResult,
    Question,
)
from milhao_app.core.services.countdown import CountdownTimer
from milhao_app.core.services.game_session import GameSession
from milhao_app.core.services.match_recorder import MatchRecorder
from milhao_app.core.services.question_pool import QuestionPool

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[GameSnapshot], None]


class GameManager:
    """Facade for game services: QuestionPool, GameSession, countdown and recorder.

    All intents and timer ticks are applied under one lock, so an answer and
    an expiring countdown can never both take effect.
    """

    def __init__(
        self,
        pool: QuestionPool,
        match_recorder: MatchRecorder | None = None,
        player_id: str = "anonymous",
        rng: random.Random | None = None,
        timer_interval: float = TIMER_TICK_SECONDS,
    ) -> None:
        self._lock = Lock()

        # Services
        self._pool = pool
        self._session = GameSession(pool, rng=rng)
        self._timer = CountdownTimer(self._handle_tick, interval=timer_interval)
        self._recorder = match_recorder
        self._player_id = player_id

        self._listeners: list[SnapshotListener] = []
        self._timer_generation: int | None = None
        self._result_recorded: bool = False

    # --- Game intents ---

    def start_game(self) -> bool:
        """Start (or restart) a game. False when no first question is available."""
        with self._lock:
            started = self._session.start()
            self._result_recorded = False
            self._timer_generation = None
            self._sync_timer()
            snapshot = self._session.snapshot()
        self._notify(snapshot)
        return started

    def answer(self, option_index: int) -> bool:
        return self._apply(lambda: self._session.answer(option_index))

    def stop(self) -> bool:
        return self._apply(self._session.stop)

    def use_lifeline(self, kind: LifelineKind) -> bool:
        return self._apply(lambda: self._session.use_lifeline(kind))

    def close_lifeline_modal(self) -> bool:
        return self._apply(self._session.close_lifeline_modal)

    # --- Reads ---

    def get_snapshot(self) -> GameSnapshot:
        with self._lock:
            return self._session.snapshot()

    def is_timer_running(self) -> bool:
        return self._timer.is_running()

    # --- Question pool ---

    async def reload_questions(self) -> int:
        """Reload the pool from its source; the running game keeps its question."""
        questions = await self._pool.load()
        return len(questions)

    def add_questions(self, questions: list[Question]) -> list[Question]:
        with self._lock:
            return self._pool.add_questions(questions)

    async def save_questions(self, questions: list[Question]) -> bool:
        """Persist questions to the pool's source; False when it is read-only."""
        return await self._pool.save_questions(questions)

    def get_question_count(self) -> int:
        with self._lock:
            return self._pool.get_question_count()

    def is_using_fallback_questions(self) -> bool:
        with self._lock:
            return self._pool.is_using_fallback()

    # --- Observers ---

    def subscribe(self, listener: SnapshotListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def unsubscribe(self, listener: SnapshotListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def shutdown(self) -> None:
        self._timer.stop()
        if self._recorder is not None:
            self._recorder.shutdown(wait=False)

    # --- Internals ---

    def _apply(self, transition: Callable[[], bool]) -> bool:
        with self._lock:
            changed = transition()
            if not changed:
                return False
            self._after_transition()
            snapshot = self._session.snapshot()
        self._notify(snapshot)
        return True

    def _handle_tick(self, run: Event) -> None:
        with self._lock:
            if run.is_set():
                return
            if not self._session.tick():
                return
            self._after_transition()
            snapshot = self._session.snapshot()
        self._notify(snapshot)

    def _after_transition(self) -> None:
        self._sync_timer()
        if self._session.status is not GameStatus.PLAYING and not self._result_recorded:
            self._result_recorded = True
            self._record_result()

    def _sync_timer(self) -> None:
        """Keep the countdown aligned with the question in play."""
        if not self._session.is_ticking():
            self._timer.stop()
            self._timer_generation = None
            return
        generation = self._session.question_generation
        if generation != self._timer_generation:
            self._timer_generation = generation
            self._timer.restart()

    def _record_result(self) -> None:
        if self._recorder is None:
            return
        result = MatchResult(
            user_id=self._player_id,
            game_id=GAME_ID,
            score=self._session.accumulated_money,
            level=self._session.current_level,
            status=self._session.status,
        )
        try:
            self._recorder.submit(result)
        except RuntimeError as exc:
            logger.error("Could not queue match result: %s", exc)

    def _notify(self, snapshot: GameSnapshot) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Snapshot listener failed.")
