"""State machine for a single playthrough of the prize ladder."""

from __future__ import annotations

import logging
import random

from milhao_app.constants.game_constants import (
    REROLL_BUDGET,
    TIME_LIMIT_SECONDS,
    TOTAL_LEVELS,
    WIN_PRIZE,
)
from milhao_app.core import prize_ladder
from milhao_app.core.models import (
    GameEndReason,
    GameSnapshot,
    GameStatus,
    LifelineKind,
    LifelineResult,
    LifelineState,
    Question,
)
from milhao_app.core.services import lifelines
from milhao_app.core.services.question_pool import QuestionPool

logger = logging.getLogger(__name__)


class GameSession:
    """Owns level, prizes, lifelines and the countdown for one game.

    Every transition checks that the game is still being played before it
    touches anything, so once a game is won, lost or stopped it stays that
    way until ``start`` is called again. Transitions return True when they
    changed the state and False when they were ignored.
    """

    def __init__(
        self,
        pool: QuestionPool,
        rng: random.Random | None = None,
        time_limit_seconds: int = TIME_LIMIT_SECONDS,
        reroll_budget: int = REROLL_BUDGET,
    ) -> None:
        self._pool = pool
        self._rng = rng or random.Random()
        self._time_limit_seconds = time_limit_seconds
        self._reroll_budget = reroll_budget

        self._started: bool = False
        self._question_generation: int = 0
        self._reset_fields()

    def _reset_fields(self) -> None:
        first = prize_ladder.entry_for(1)
        self._status = GameStatus.PLAYING
        self._end_reason: GameEndReason | None = None
        self._current_level = 1
        self._accumulated_money = 0
        self._current_prize = first.prize
        self._stop_prize = 0
        self._wrong_prize = 0
        self._lifelines: dict[LifelineKind, LifelineState] = lifelines.initial_lifelines(self._reroll_budget)
        self._eliminated_options: frozenset[int] = frozenset()
        self._lifeline_result: LifelineResult | None = None
        self._time_left = self._time_limit_seconds
        self._current_question: Question | None = None
        self._used_question_ids: set[str] = set()

    # --- Lifecycle ---

    def start(self) -> bool:
        """Reset everything and draw the level-1 question.

        Returns False, leaving the session unstarted, when the pool cannot
        supply a first question.
        """
        self._reset_fields()
        first_question = self._pool.select_for_level(1, self._used_question_ids)
        if first_question is None:
            self._started = False
            logger.warning("Cannot start a game: no question available for level 1.")
            return False
        self._started = True
        self._set_question(first_question)
        logger.info("Game started with question %s.", first_question.id)
        return True

    def is_started(self) -> bool:
        return self._started

    def is_playing(self) -> bool:
        return self._started and self._status is GameStatus.PLAYING

    def is_ticking(self) -> bool:
        """True while the countdown should run."""
        return self.is_playing() and self._current_question is not None

    # --- Transitions ---

    def answer(self, option_index: int) -> bool:
        if not self.is_ticking():
            return False

        question = self._current_question
        if option_index != question.correct_option_index:
            self._finish(GameStatus.LOST, GameEndReason.WRONG_ANSWER, self._wrong_prize)
            return True

        if self._current_level == TOTAL_LEVELS:
            self._finish(GameStatus.WON, GameEndReason.WON, WIN_PRIZE)
            return True

        self._advance()
        return True

    def stop(self) -> bool:
        if not self.is_playing():
            return False
        self._finish(GameStatus.STOPPED, GameEndReason.STOPPED, self._stop_prize)
        return True

    def use_lifeline(self, kind: LifelineKind) -> bool:
        lifeline = self._lifelines[kind]
        if not lifeline.available or not self.is_ticking():
            return False

        question = self._current_question
        if kind is LifelineKind.ELIMINATE_TWO:
            self._eliminated_options = lifelines.eliminate_two(question, self._rng)
        elif kind is LifelineKind.EXPERT_HINT:
            self._lifeline_result = lifelines.expert_hint(question, self._rng)
        elif kind is LifelineKind.CROWD_VOTE:
            self._lifeline_result = lifelines.crowd_vote(question, self._rng)
        elif kind is LifelineKind.REROLL:
            replacement = self._pool.select_for_level(self._current_level, self._used_question_ids)
            if replacement is None:
                logger.info("Reroll ignored: no replacement for level %d.", self._current_level)
                return False
            self._set_question(replacement)

        lifeline.consume()
        logger.debug("Lifeline %s used at level %d.", kind.value, self._current_level)
        return True

    def close_lifeline_modal(self) -> bool:
        if self._lifeline_result is None:
            return False
        self._lifeline_result = None
        return True

    def tick(self) -> bool:
        """Advance the countdown by one second; expiry loses the game."""
        if not self.is_ticking():
            return False
        self._time_left = max(0, self._time_left - 1)
        if self._time_left == 0:
            self._finish(GameStatus.LOST, GameEndReason.TIMEOUT, self._wrong_prize)
        return True

    # --- Reads ---

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def end_reason(self) -> GameEndReason | None:
        return self._end_reason

    @property
    def current_level(self) -> int:
        return self._current_level

    @property
    def accumulated_money(self) -> int:
        return self._accumulated_money

    @property
    def current_question(self) -> Question | None:
        return self._current_question

    @property
    def question_generation(self) -> int:
        """Incremented every time a new question is put in play."""
        return self._question_generation

    @property
    def time_left(self) -> int:
        return self._time_left

    def get_used_question_ids(self) -> set[str]:
        return set(self._used_question_ids)

    def get_lifeline(self, kind: LifelineKind) -> LifelineState:
        return self._lifelines[kind].copy()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            status=self._status,
            end_reason=self._end_reason,
            is_started=self._started,
            current_level=self._current_level,
            accumulated_money=self._accumulated_money,
            current_prize=self._current_prize,
            stop_prize=self._stop_prize,
            wrong_prize=self._wrong_prize,
            time_left=self._time_left,
            lifelines={kind: state.copy() for kind, state in self._lifelines.items()},
            eliminated_options=self._eliminated_options,
            lifeline_result=self._lifeline_result,
            question=self._current_question,
            reached_title=prize_ladder.reached_title(self._status, self._current_level),
            used_question_count=len(self._used_question_ids),
        )

    # --- Internals ---

    def _advance(self) -> None:
        completed = prize_ladder.entry_for(self._current_level)
        next_entry = prize_ladder.entry_for(self._current_level + 1)

        self._accumulated_money = completed.prize
        self._current_level = next_entry.level
        self._current_prize = next_entry.prize
        self._stop_prize = completed.stop
        self._wrong_prize = next_entry.wrong

        next_question = self._pool.select_for_level(self._current_level, self._used_question_ids)
        if next_question is None:
            logger.warning("No question found for level %d; game is stalled.", self._current_level)
            self._current_question = None
            self._clear_question_effects()
            return
        self._set_question(next_question)

    def _set_question(self, question: Question) -> None:
        self._current_question = question
        self._used_question_ids.add(question.id)
        self._question_generation += 1
        self._clear_question_effects()

    def _clear_question_effects(self) -> None:
        self._eliminated_options = frozenset()
        self._lifeline_result = None
        self._time_left = self._time_limit_seconds

    def _finish(self, status: GameStatus, reason: GameEndReason, amount: int) -> None:
        self._status = status
        self._end_reason = reason
        self._accumulated_money = amount
        logger.info(
            "Game over at level %d: %s (%s), leaving with %d.",
            self._current_level,
            status.value,
            reason.value,
            amount,
        )
