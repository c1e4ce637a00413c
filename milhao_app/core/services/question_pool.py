"""Service holding the loaded questions and drawing them per level."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Collection, Iterable

from milhao_app.constants.game_constants import (
    EASY_MAX_LEVEL,
    HARD_MAX_LEVEL,
    MEDIUM_MAX_LEVEL,
)
from milhao_app.constants.network_constants import QUESTION_LOAD_TIMEOUT_SECONDS
from milhao_app.core.builtin_questions import BUILTIN_QUESTIONS
from milhao_app.core.models import Difficulty, Question
from milhao_app.core.services.question_sources import (
    QuestionSource,
    QuestionSourceError,
    WritableQuestionSource,
)

logger = logging.getLogger(__name__)


def difficulty_for_level(level: int) -> Difficulty:
    if level <= EASY_MAX_LEVEL:
        return Difficulty.EASY
    if level <= MEDIUM_MAX_LEVEL:
        return Difficulty.MEDIUM
    if level <= HARD_MAX_LEVEL:
        return Difficulty.HARD
    return Difficulty.MILLION


class QuestionPool:
    """Loads questions from a source and hands out unused ones by level.

    The pool always ends up with playable content: an empty, failing or slow
    source is replaced by the built-in question set.
    """

    def __init__(
        self,
        source: QuestionSource | None = None,
        fallback: Iterable[Question] = BUILTIN_QUESTIONS,
        load_timeout_seconds: float = QUESTION_LOAD_TIMEOUT_SECONDS,
        rng: random.Random | None = None,
    ) -> None:
        self._source = source
        self._fallback = list(fallback)
        self._load_timeout_seconds = load_timeout_seconds
        self._rng = rng or random.Random()
        self._questions: list[Question] = []
        self._using_fallback: bool = False

    async def load(self) -> list[Question]:
        """Fetch questions from the source, falling back to the built-in set."""
        fetched: list[Question] = []
        if self._source is not None:
            try:
                fetched = await asyncio.wait_for(
                    self._source.fetch_questions(),
                    timeout=self._load_timeout_seconds,
                )
            except asyncio.TimeoutError:
                logger.warning(
                    "Question source timed out after %.1fs; using built-in questions.",
                    self._load_timeout_seconds,
                )
            except QuestionSourceError as exc:
                logger.warning("Question source unavailable (%s); using built-in questions.", exc)
            except Exception:
                logger.exception("Question source failed unexpectedly; using built-in questions.")

        prepared = self._prepare_all(fetched)
        if prepared:
            self._questions = prepared
            self._using_fallback = False
            logger.info("Loaded %d questions from source.", len(prepared))
        else:
            if self._source is not None:
                logger.warning("Question source returned no usable questions; using built-in questions.")
            self._questions = self._prepare_all(self._fallback)
            self._using_fallback = True
        return self.get_questions()

    def load_questions(self, questions: list[Question]) -> None:
        """Replace the pool with an explicit list of questions."""
        if not questions:
            raise ValueError("Question pool must contain at least one question.")
        self._questions = [self._prepare_question(q) for q in questions]
        self._using_fallback = False

    def add_questions(self, questions: list[Question]) -> list[Question]:
        """Append validated questions; ids must not clash with loaded ones."""
        known_ids = {q.id for q in self._questions}
        prepared: list[Question] = []
        for question in questions:
            candidate = self._prepare_question(question)
            if candidate.id in known_ids:
                raise ValueError(f"Question id {candidate.id!r} is already in the pool.")
            known_ids.add(candidate.id)
            prepared.append(candidate)
        self._questions.extend(prepared)
        return prepared

    async def save_questions(self, questions: list[Question]) -> bool:
        """Store questions in the source so they survive a reload.

        Returns False when the source cannot store questions (or there is
        none); raises QuestionSourceError when storing fails.
        """
        if not isinstance(self._source, WritableQuestionSource):
            return False
        await self._source.save_questions(questions)
        return True

    def select_for_level(self, level: int, used_ids: Collection[str]) -> Question | None:
        """Draw an unused question for ``level``.

        Prefers the level's difficulty band and relaxes to any unused question
        before giving up with None.
        """
        band = difficulty_for_level(level)
        candidates = [q for q in self._questions if q.difficulty is band and q.id not in used_ids]
        if not candidates:
            candidates = [q for q in self._questions if q.id not in used_ids]
            if candidates:
                logger.info("No unused %s question for level %d; drawing from any band.", band.value, level)
        if not candidates:
            logger.warning("Question pool exhausted at level %d.", level)
            return None
        return self._rng.choice(candidates)

    def get_questions(self) -> list[Question]:
        return list(self._questions)

    def has_questions(self) -> bool:
        return bool(self._questions)

    def get_question_count(self) -> int:
        return len(self._questions)

    def is_using_fallback(self) -> bool:
        return self._using_fallback

    def set_source(self, source: QuestionSource | None) -> None:
        self._source = source

    def set_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    def _prepare_all(self, questions: Iterable[Question]) -> list[Question]:
        prepared: list[Question] = []
        seen: set[str] = set()
        for question in questions:
            try:
                candidate = self._prepare_question(question)
            except ValueError as exc:
                logger.warning("Skipping question %r: %s", question.id, exc)
                continue
            if candidate.id in seen:
                logger.warning("Skipping duplicate question id %r.", candidate.id)
                continue
            seen.add(candidate.id)
            prepared.append(candidate)
        return prepared

    def _prepare_question(self, question: Question) -> Question:
        """Validate and normalize a question before storage."""
        options = self._validate_options(question.options)
        if not 0 <= question.correct_option_index < 4:
            raise ValueError("Correct option index must be between 0 and 3.")

        cleaned_text = question.text.strip()
        if not cleaned_text:
            raise ValueError("Question text must not be empty.")

        cleaned_id = str(question.id).strip()
        if not cleaned_id:
            raise ValueError("Question id must not be empty.")

        details = question.correct_details.strip() if question.correct_details else None
        return Question(
            id=cleaned_id,
            text=cleaned_text,
            options=options,
            correct_option_index=question.correct_option_index,
            difficulty=question.difficulty,
            correct_details=details or None,
        )

    @staticmethod
    def _validate_options(options: Iterable[str]) -> tuple[str, ...]:
        cleaned = tuple(option.strip() for option in options)
        if len(cleaned) != 4:
            raise ValueError("Each question must have exactly four options.")
        if any(not option for option in cleaned):
            raise ValueError("Option text cannot be empty.")
        return cleaned
