"""Utilities for importing questions from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    ID: optional identifier (generated from the file name when omitted)
    Q: Question text. Additional lines until the next marker are treated as
       part of the question.
    A: First option text
    B: Second option text
    C: Third option text
    D: Fourth option text
    CORRECT: A|B|C|D
    DIFFICULTY: easy|medium|hard|million
    DETAILS: Optional explanation shown after the answer

Example:

    Q: Qual animal engoliu o profeta Jonas?
    A: Um leão
    B: Um grande peixe
    C: Um urso
    D: Um jacaré
    CORRECT: B
    DIFFICULTY: easy
    DETAILS: Jonas 1:17
"""

from __future__ import annotations

from pathlib import Path

from milhao_app.core.models import Difficulty, Question


class QuestionImportError(Exception):
    """Raised when a question file cannot be parsed."""


_OPTION_ORDER = ["A", "B", "C", "D"]
_DIFFICULTY_VALUES = {difficulty.value: difficulty for difficulty in Difficulty}


def load_questions_from_file(file_path: Path) -> list[Question]:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_questions_text(text, id_prefix=file_path.stem)
    if not questions:
        raise QuestionImportError("Question file did not contain any questions.")
    return questions


def parse_questions_text(text: str, id_prefix: str = "file") -> list[Question]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    questions: list[Question] = []
    for position, block in enumerate(b for b in blocks if b):
        try:
            questions.append(_parse_block(block, default_id=f"{id_prefix}-{position + 1}"))
        except QuestionImportError as exc:
            raise QuestionImportError(f"Question {position + 1}: {exc}") from exc
    return questions


def _parse_block(block: str, default_id: str) -> Question:
    question_id: str | None = None
    question_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    difficulty: Difficulty | None = None
    details_lines: list[str] = []
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("ID:"):
            question_id = line.split(":", 1)[1].strip() or None
            current_section = None
            continue

        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if upper.startswith("DIFFICULTY:"):
            raw_value = line.split(":", 1)[1].strip().lower()
            if raw_value not in _DIFFICULTY_VALUES:
                raise QuestionImportError(
                    f"DIFFICULTY must be one of {', '.join(_DIFFICULTY_VALUES)}."
                )
            difficulty = _DIFFICULTY_VALUES[raw_value]
            current_section = None
            continue

        if upper.startswith("DETAILS:"):
            details_lines = [line.split(":", 1)[1].strip()]
            current_section = "DETAILS"
            continue

        if len(line) > 2 and line[0].upper() in _OPTION_ORDER and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section == "DETAILS":
            details_lines.append(line)
        elif current_section in _OPTION_ORDER:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuestionImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    if not question_lines:
        raise QuestionImportError("Question text missing (Q: ...)")
    if len(options) != 4:
        raise QuestionImportError("Each question must define exactly four options (A-D).")

    option_list = tuple(options.get(letter, "").strip() for letter in _OPTION_ORDER)
    if any(not opt for opt in option_list):
        raise QuestionImportError("Option text cannot be empty.")

    if correct_letter is None:
        raise QuestionImportError("CORRECT is required.")
    if correct_letter not in _OPTION_ORDER:
        raise QuestionImportError("CORRECT must be one of A, B, C, or D.")
    if difficulty is None:
        raise QuestionImportError("DIFFICULTY is required.")

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuestionImportError("Question text cannot be empty.")

    details = "\n".join(details_lines).strip()
    return Question(
        id=question_id or default_id,
        text=question_text,
        options=option_list,
        correct_option_index=_OPTION_ORDER.index(correct_letter),
        difficulty=difficulty,
        correct_details=details or None,
    )
