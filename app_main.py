"""Application entry point for Show do Milhão."""

from __future__ import annotations

import asyncio
import socket
import sys

from milhao_app.core.game_manager import GameManager
from milhao_app.core.services.match_recorder import JsonLinesMatchSink, MatchRecorder
from milhao_app.core.services.question_generator import QuestionGenerator
from milhao_app.core.services.question_pool import QuestionPool
from milhao_app.core.services.question_sources import QuestionSource, TextFileQuestionSource
from milhao_app.core.services.supabase_store import SupabaseMatchSink, SupabaseQuestionSource
from milhao_app.server.api_server import start_api_server
from milhao_app.settings import Settings, get_settings
from milhao_app.utils.logging_config import configure_logging


def _determine_player_url(port: int) -> str:
    """Best-effort determination of the local IP for the browser player URL."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            ip_address = sock.getsockname()[0]
    except OSError:
        ip_address = "127.0.0.1"
    return f"http://{ip_address}:{port}/"


def _build_question_source(settings: Settings) -> QuestionSource | None:
    if settings.supabase.is_configured:
        return SupabaseQuestionSource(settings.supabase.url, settings.supabase.key)
    if settings.questions_file is not None:
        return TextFileQuestionSource(settings.questions_file)
    return None


def _build_match_recorder(settings: Settings) -> MatchRecorder | None:
    if settings.supabase.is_configured:
        return MatchRecorder(SupabaseMatchSink(settings.supabase.url, settings.supabase.key))
    if settings.results_file is not None:
        return MatchRecorder(JsonLinesMatchSink(settings.results_file))
    return None


def main() -> None:
    """Load questions, start the API server, and launch the Qt UI."""
    settings = get_settings()
    logger = configure_logging(settings.debug, settings.log_file)
    logger.info("Starting Show do Milhão...")

    pool = QuestionPool(
        source=_build_question_source(settings),
        load_timeout_seconds=settings.question_load_timeout,
    )
    asyncio.run(pool.load())
    if pool.is_using_fallback():
        logger.info("Playing with the built-in question set.")

    game_manager = GameManager(
        pool,
        match_recorder=_build_match_recorder(settings),
        player_id=settings.player_id,
    )
    generator = QuestionGenerator(
        api_key=settings.ai.gemini_api_key,
        model=settings.ai.generation_model,
        timeout=settings.ai.generation_timeout,
    )
    server_thread = start_api_server(
        game_manager,
        question_generator=generator,
        host=settings.host,
        port=settings.port,
    )
    player_url = _determine_player_url(settings.port)
    logger.info("Player page available at %s", player_url)

    if settings.headless:
        try:
            server_thread.join()
        except KeyboardInterrupt:
            logger.info("Shutting down.")
        finally:
            game_manager.shutdown()
        return

    from PySide6.QtWidgets import QApplication

    from milhao_app.ui.game_window import GameWindow

    app = QApplication(sys.argv)
    window = GameWindow(game_manager=game_manager, player_url=player_url)
    window.show()
    exit_code = app.exec()
    game_manager.shutdown()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
