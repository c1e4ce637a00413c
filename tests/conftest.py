"""Shared fixtures for the game tests."""

from __future__ import annotations

import random

import pytest

from milhao_app.core.models import Difficulty, Question
from milhao_app.core.services.question_pool import QuestionPool


def _band_for(level: int) -> Difficulty:
    if level <= 5:
        return Difficulty.EASY
    if level <= 10:
        return Difficulty.MEDIUM
    if level <= 15:
        return Difficulty.HARD
    return Difficulty.MILLION


@pytest.fixture
def make_question():
    def factory(
        question_id: str,
        difficulty: Difficulty = Difficulty.EASY,
        correct: int = 0,
        details: str | None = None,
    ) -> Question:
        return Question(
            id=question_id,
            text=f"Pergunta {question_id}?",
            options=("Opção A", "Opção B", "Opção C", "Opção D"),
            correct_option_index=correct,
            difficulty=difficulty,
            correct_details=details,
        )

    return factory


@pytest.fixture
def ladder_questions(make_question) -> list[Question]:
    """Two questions per level so rerolls always have a replacement."""
    questions = []
    for level in range(1, 17):
        for copy in range(2):
            questions.append(
                make_question(f"q{level:02d}-{copy}", _band_for(level), correct=(level + copy) % 4)
            )
    return questions


@pytest.fixture
def pool(ladder_questions) -> QuestionPool:
    question_pool = QuestionPool(rng=random.Random(7))
    question_pool.load_questions(ladder_questions)
    return question_pool


@pytest.fixture
def empty_pool() -> QuestionPool:
    return QuestionPool(fallback=[])
