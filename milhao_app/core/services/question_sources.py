"""Sources the question pool can load from."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol, runtime_checkable

from milhao_app.core.models import Difficulty, Question
from milhao_app.core.question_exporter import append_questions_to_file
from milhao_app.core.question_importer import QuestionImportError, load_questions_from_file

logger = logging.getLogger(__name__)


class QuestionSourceError(RuntimeError):
    """Raised when a question source cannot read or store its questions."""


class QuestionSource(Protocol):
    """Read-only provider of candidate questions."""

    async def fetch_questions(self) -> list[Question]:
        ...


@runtime_checkable
class WritableQuestionSource(QuestionSource, Protocol):
    """Source that can also store questions added by the admin tools."""

    async def save_questions(self, questions: list[Question]) -> None:
        ...


def question_from_record(record: Mapping[str, Any]) -> Question:
    """Map a stored row (``correct_option``/``correct_details`` naming) to a Question.

    Raises ValueError when the row is missing fields or carries an unknown
    difficulty.
    """
    try:
        raw_id = record["id"]
        text = str(record["text"])
        options = tuple(str(option) for option in record["options"])
        correct_index = int(record["correct_option"])
        difficulty = Difficulty(str(record["difficulty"]).strip().lower())
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Malformed question record: {exc}") from exc
    details = record.get("correct_details")
    return Question(
        id=str(raw_id),
        text=text,
        options=options,
        correct_option_index=correct_index,
        difficulty=difficulty,
        correct_details=str(details) if details else None,
    )


def question_to_record(question: Question) -> dict[str, Any]:
    """Row shape for inserting a question; the stored id is left to the table."""
    return {
        "text": question.text,
        "options": list(question.options),
        "correct_option": question.correct_option_index,
        "difficulty": question.difficulty.value,
        "correct_details": question.correct_details,
    }


def questions_from_records(records: Iterable[Any]) -> list[Question]:
    """Convert rows, skipping (and logging) the malformed ones."""
    questions: list[Question] = []
    for position, record in enumerate(records):
        if not isinstance(record, Mapping):
            logger.warning("Skipping question record #%d: expected an object, got %s.", position, type(record).__name__)
            continue
        try:
            questions.append(question_from_record(record))
        except ValueError as exc:
            logger.warning("Skipping question record %r: %s", record.get("id"), exc)
    return questions


class StaticQuestionSource:
    """Serves a fixed list, mostly useful for tests and demos."""

    def __init__(self, questions: Iterable[Question]) -> None:
        self._questions = list(questions)

    async def fetch_questions(self) -> list[Question]:
        return list(self._questions)


class TextFileQuestionSource:
    """Loads questions from a file in the plain-text question format.

    Questions saved through the admin tools are appended to the same file.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    async def fetch_questions(self) -> list[Question]:
        try:
            return await asyncio.to_thread(load_questions_from_file, self._file_path)
        except (OSError, ValueError, QuestionImportError) as exc:
            raise QuestionSourceError(f"Cannot read questions from {self._file_path}: {exc}") from exc

    async def save_questions(self, questions: list[Question]) -> None:
        try:
            await asyncio.to_thread(append_questions_to_file, self._file_path, questions)
        except (OSError, ValueError) as exc:
            raise QuestionSourceError(f"Cannot write questions to {self._file_path}: {exc}") from exc
