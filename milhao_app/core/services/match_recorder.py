"""Best-effort persistence of finished games."""

from __future__ import annotations

import asyncio
from concurrent.futures import Future, ThreadPoolExecutor
import json
import logging
from pathlib import Path
from typing import Protocol

from milhao_app.core.models import MatchResult

logger = logging.getLogger(__name__)


class MatchResultSink(Protocol):
    """Write-only destination for match results."""

    async def record(self, result: MatchResult) -> None:
        ...


class InMemoryMatchSink:
    """Keeps results in a list; handy for tests and offline play."""

    def __init__(self) -> None:
        self.results: list[MatchResult] = []

    async def record(self, result: MatchResult) -> None:
        self.results.append(result)


class JsonLinesMatchSink:
    """Appends one JSON object per finished game to a local file."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    async def record(self, result: MatchResult) -> None:
        line = json.dumps(
            {**result.to_record(), "finished_at": result.finished_at.isoformat()},
            ensure_ascii=False,
        )
        await asyncio.to_thread(self._append_line, line)

    def _append_line(self, line: str) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        with self._file_path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")


class MatchRecorder:
    """Dispatches results to a sink on a worker thread.

    Gameplay never waits on the sink; failures only produce a log entry.
    """

    def __init__(self, sink: MatchResultSink) -> None:
        self._sink = sink
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="MatchRecorder")

    def submit(self, result: MatchResult) -> Future:
        future = self._executor.submit(lambda: asyncio.run(self._sink.record(result)))
        future.add_done_callback(self._log_outcome)
        return future

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    @staticmethod
    def _log_outcome(future: Future) -> None:
        exc = future.exception()
        if exc is not None:
            logger.error("Failed to record match result: %s", exc)
        else:
            logger.debug("Match result recorded.")
