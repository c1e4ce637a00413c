"""Question source and result sink backed by a Supabase (PostgREST) project."""

from __future__ import annotations

import logging

import aiohttp

from milhao_app.constants.network_constants import (
    SUPABASE_MATCHES_TABLE,
    SUPABASE_QUESTIONS_TABLE,
)
from milhao_app.core.models import MatchResult, Question
from milhao_app.core.services.question_sources import (
    QuestionSourceError,
    question_to_record,
    questions_from_records,
)

logger = logging.getLogger(__name__)

_REQUEST_TIMEOUT_SECONDS = 10


class _SupabaseTable:
    """Thin REST access to one table of the project."""

    def __init__(self, base_url: str, api_key: str, table: str) -> None:
        if not base_url or not api_key:
            raise ValueError("Supabase URL and key are required.")
        self._endpoint = f"{base_url.rstrip('/')}/rest/v1/{table}"
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def _session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(
            headers=self._headers,
            timeout=aiohttp.ClientTimeout(total=_REQUEST_TIMEOUT_SECONDS),
        )


class SupabaseQuestionSource(_SupabaseTable):
    """Reads every row of the questions table and inserts new ones."""

    def __init__(self, base_url: str, api_key: str, table: str = SUPABASE_QUESTIONS_TABLE) -> None:
        super().__init__(base_url, api_key, table)

    async def fetch_questions(self) -> list[Question]:
        try:
            async with self._session() as session:
                async with session.get(self._endpoint, params={"select": "*"}) as response:
                    if response.status != 200:
                        detail = await response.text()
                        raise QuestionSourceError(f"HTTP {response.status}: {detail[:200]}")
                    rows = await response.json()
        except (aiohttp.ClientError, ValueError) as exc:
            raise QuestionSourceError(f"Supabase request failed: {exc}") from exc

        if not isinstance(rows, list):
            raise QuestionSourceError("Unexpected payload from the questions table.")
        questions = questions_from_records(rows)
        logger.info("Fetched %d of %d question rows from Supabase.", len(questions), len(rows))
        return questions

    async def save_questions(self, questions: list[Question]) -> None:
        """Insert rows for new questions; the table assigns their ids."""
        rows = [question_to_record(question) for question in questions]
        try:
            async with self._session() as session:
                async with session.post(
                    self._endpoint,
                    json=rows,
                    headers={"Prefer": "return=minimal"},
                ) as response:
                    if response.status >= 300:
                        detail = await response.text()
                        raise QuestionSourceError(f"HTTP {response.status}: {detail[:200]}")
        except aiohttp.ClientError as exc:
            raise QuestionSourceError(f"Supabase request failed: {exc}") from exc
        logger.info("Saved %d questions to Supabase.", len(rows))


class SupabaseMatchSink(_SupabaseTable):
    """Inserts finished games into the matches table."""

    def __init__(self, base_url: str, api_key: str, table: str = SUPABASE_MATCHES_TABLE) -> None:
        super().__init__(base_url, api_key, table)

    async def record(self, result: MatchResult) -> None:
        async with self._session() as session:
            async with session.post(
                self._endpoint,
                json=result.to_record(),
                headers={"Prefer": "return=minimal"},
            ) as response:
                if response.status >= 300:
                    detail = await response.text()
                    raise RuntimeError(f"Saving match failed with HTTP {response.status}: {detail[:200]}")
