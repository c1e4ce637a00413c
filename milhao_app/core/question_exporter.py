"""Utilities for exporting questions to the plain-text import format."""

from __future__ import annotations

from pathlib import Path

from milhao_app.core.models import Question

_OPTION_LETTERS = ("A", "B", "C", "D")


def save_questions_to_file(file_path: Path, questions: list[Question]) -> None:
    """Persist the provided questions to disk in the text import format."""

    if not questions:
        raise ValueError("Cannot export an empty question list.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(serialize_questions(questions), encoding="utf-8")


def append_questions_to_file(file_path: Path, questions: list[Question]) -> None:
    """Add questions after the blocks already in the file, creating it if needed."""

    if not questions:
        raise ValueError("Cannot export an empty question list.")

    file_path = file_path.resolve()
    existing = file_path.read_text(encoding="utf-8") if file_path.exists() else ""
    if not existing.strip():
        save_questions_to_file(file_path, questions)
        return

    separator = "\n---\n\n" if existing.endswith("\n") else "\n\n---\n\n"
    with file_path.open("a", encoding="utf-8") as handle:
        handle.write(separator + serialize_questions(questions))


def serialize_questions(questions: list[Question]) -> str:
    blocks = [_serialize_question(question) for question in questions]
    return "\n\n---\n\n".join(blocks) + "\n"


def _serialize_question(question: Question) -> str:
    lines: list[str] = [f"ID: {question.id}"]

    question_lines = question.text.splitlines() or [question.text]
    lines.append(f"Q: {question_lines[0]}")
    lines.extend(question_lines[1:])

    for idx, letter in enumerate(_OPTION_LETTERS):
        option_lines = question.options[idx].splitlines() or [question.options[idx]]
        lines.append(f"{letter}: {option_lines[0]}")
        lines.extend(option_lines[1:])

    lines.append(f"CORRECT: {_OPTION_LETTERS[question.correct_option_index]}")
    lines.append(f"DIFFICULTY: {question.difficulty.value}")

    if question.correct_details:
        details_lines = question.correct_details.splitlines()
        lines.append(f"DETAILS: {details_lines[0]}")
        lines.extend(details_lines[1:])

    return "\n".join(lines)
