"""Gemini-backed question generation for the admin tools."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import json
import logging
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, Field, ValidationError

from milhao_app.core.models import Difficulty, Question

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"

_PROMPT_TEMPLATE = """\
Gere {amount} perguntas bíblicas sobre o tema "{topic}" para um jogo estilo Show do Milhão.
Dificuldade desejada: {difficulty}.

Retorne APENAS um JSON válido (sem markdown) com este formato exato:
[
  {{
    "text": "Pergunta aqui?",
    "options": ["Opção A", "Opção B", "Opção C", "Opção D"],
    "correct_option": 0,
    "difficulty": "medium",
    "correct_details": "Explicação breve de onde está na bíblia"
  }}
]
"correct_option" é o índice 0-3 da resposta correta e "difficulty" é easy, medium, hard ou million.
"""


class GenerationError(RuntimeError):
    """Raised when the model output cannot be turned into questions."""


class GeneratedQuestion(BaseModel):
    """Shape each generated item must have."""

    text: str = Field(min_length=1)
    options: list[str] = Field(min_length=4, max_length=4)
    correct_option: int = Field(ge=0, le=3)
    difficulty: Literal["easy", "medium", "hard", "million"]
    correct_details: str | None = None

    def to_question(self, question_id: str) -> Question:
        return Question(
            id=question_id,
            text=self.text.strip(),
            options=tuple(option.strip() for option in self.options),
            correct_option_index=self.correct_option,
            difficulty=Difficulty(self.difficulty),
            correct_details=(self.correct_details or "").strip() or None,
        )


@dataclass(slots=True)
class GenerationResult:
    questions: list[Question]
    is_mock: bool = False
    error_reason: str | None = None


class QuestionGenerator:
    """Asks Gemini for new questions, substituting flagged mock data on failure."""

    def __init__(
        self,
        api_key: str = "",
        model: str = DEFAULT_MODEL,
        timeout: float = 60.0,
        client: Any | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._client = client

    async def generate(self, topic: str, amount: int = 5, difficulty: str = "mix") -> GenerationResult:
        prompt = _PROMPT_TEMPLATE.format(topic=topic, amount=amount, difficulty=difficulty)
        try:
            text = await asyncio.wait_for(
                asyncio.to_thread(self._generate_text, prompt),
                timeout=self._timeout,
            )
            questions = parse_generated_questions(text)
        except asyncio.TimeoutError:
            return self._fallback(topic, f"Gemini did not answer within {self._timeout:.0f}s")
        except Exception as exc:  # Mock fallback on any upstream failure
            return self._fallback(topic, str(exc) or exc.__class__.__name__)

        logger.info("Generated %d questions about %r.", len(questions), topic)
        return GenerationResult(questions=questions[:amount])

    def _generate_text(self, prompt: str) -> str:
        client = self._ensure_client()
        response = client.models.generate_content(model=self._model, contents=prompt)
        text = getattr(response, "text", None)
        if not text:
            raise GenerationError("Gemini returned an empty response.")
        return text

    def _ensure_client(self) -> Any:
        if self._client is None:
            if not self._api_key:
                raise GenerationError("Gemini API key is not configured.")
            from google import genai

            self._client = genai.Client(api_key=self._api_key)
        return self._client

    @staticmethod
    def _fallback(topic: str, reason: str) -> GenerationResult:
        logger.warning("Question generation failed (%s); returning mock questions.", reason)
        return GenerationResult(questions=mock_questions(topic), is_mock=True, error_reason=reason)


def parse_generated_questions(text: str) -> list[Question]:
    """Parse the model's JSON array, tolerating markdown code fences."""
    cleaned = text.replace("```json", "").replace("```", "").strip()
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise GenerationError(f"Model output is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise GenerationError("Model output must be a JSON array.")

    questions: list[Question] = []
    for item in payload:
        try:
            generated = GeneratedQuestion.model_validate(item)
        except ValidationError as exc:
            logger.warning("Discarding generated item: %s", exc.errors()[0]["msg"])
            continue
        questions.append(generated.to_question(_new_id()))
    if not questions:
        raise GenerationError("Model output contained no valid questions.")
    return questions


def mock_questions(topic: str) -> list[Question]:
    items = [
        (
            f"(MOCK) Quem liderou o povo de Israel após a morte de Moisés (Tema: {topic})?",
            ("Josué", "Calebe", "Arão", "Gideão"),
            0,
            Difficulty.MEDIUM,
            "Josué 1:1-9",
        ),
        (
            f"(MOCK) Qual destes é um livro do Pentateuco (Tema: {topic})?",
            ("Salmos", "Isaías", "Números", "Mateus"),
            2,
            Difficulty.EASY,
            "O Pentateuco são os 5 primeiros livros.",
        ),
        (
            f"(MOCK) O que aconteceu no dia de Pentecostes (Tema: {topic})?",
            ("O mar se abriu", "Desceu fogo do céu", "O Espírito Santo desceu", "Jesus nasceu"),
            2,
            Difficulty.HARD,
            "Atos 2",
        ),
        (
            f"(MOCK) Pergunta gerada automaticamente sobre {topic}?",
            ("Resposta A", "Resposta B", "Resposta C", "Resposta Certa"),
            3,
            Difficulty.EASY,
            "Mock gerado por falha na API.",
        ),
        (
            f"(MOCK) Última pergunta de teste sobre {topic}?",
            ("Errada", "Certa", "Errada", "Errada"),
            1,
            Difficulty.MILLION,
            "Apenas um teste de fallback.",
        ),
    ]
    return [
        Question(
            id=_new_id(),
            text=text,
            options=options,
            correct_option_index=correct,
            difficulty=difficulty,
            correct_details=details,
        )
        for text, options, correct, difficulty, details in items
    ]


def _new_id() -> str:
    return f"gen-{uuid4().hex[:12]}"
