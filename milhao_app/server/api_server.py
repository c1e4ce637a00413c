"""FastAPI server exposing the game to browser players and admin tools."""

from __future__ import annotations

import logging
from threading import Thread
from typing import Literal
from uuid import uuid4

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field
import uvicorn

from milhao_app.constants.game_constants import TIME_LIMIT_SECONDS
from milhao_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from milhao_app.constants.ui_constants import LIFELINE_LABELS
from milhao_app.core import prize_ladder
from milhao_app.core.game_manager import GameManager
from milhao_app.core.markdown_renderer import renderer
from milhao_app.core.models import (
    CrowdVoteResult,
    Difficulty,
    ExpertHintResult,
    GameSnapshot,
    LifelineKind,
    LifelineResult,
    MultiUseLifeline,
    Question,
)
from milhao_app.core.services.question_generator import GenerationResult, QuestionGenerator
from milhao_app.core.services.question_sources import QuestionSourceError

logger = logging.getLogger(__name__)

_PLAYER_PAGE_HTML = """<!doctype html>
<html lang="pt-BR">
  <head>
    <meta charset="utf-8" />
    <title>Show do Milhão</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #020617; color: #f5f7ff; }
      body { margin: 0; padding: 1.5rem; display: flex; gap: 1.5rem; }
      main { flex: 1; display: flex; flex-direction: column; gap: 1rem; }
      .card { background: #0f1b3d; border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 0.5rem 1.5rem rgba(0, 0, 0, 0.4); }
      .hidden { display: none; }
      .status-row { display: flex; justify-content: space-between; font-weight: 600; color: #facc15; }
      #question { font-size: 1.25rem; line-height: 1.6; min-height: 4rem; }
      .options-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(220px, 1fr)); gap: 0.75rem; }
      .option-button, .action-button { border: none; border-radius: 0.75rem; padding: 1rem; font-size: 1rem; background: #1d4ed8; color: #fff; cursor: pointer; text-align: left; }
      .option-button:hover, .action-button:hover { background: #2563eb; }
      .option-button:disabled, .action-button:disabled { opacity: 0.35; cursor: not-allowed; }
      .lifelines { display: grid; grid-template-columns: repeat(4, 1fr); gap: 0.5rem; }
      .lifelines .action-button { text-align: center; font-size: 0.8rem; text-transform: uppercase; }
      .timer-track { height: 0.6rem; background: rgba(250, 204, 21, 0.25); border-radius: 999px; overflow: hidden; }
      #timer-fill { height: 100%; background: #facc15; transition: width 200ms linear; }
      #timer-fill.warning { background: #ef4444; }
      #ladder { width: 16rem; list-style: none; margin: 0; padding: 1rem; background: #0b1530; border-radius: 0.75rem; }
      #ladder li { display: flex; justify-content: space-between; padding: 0.2rem 0.6rem; border-radius: 0.4rem; color: #cbd5f5; }
      #ladder li.past { color: #4ade80; }
      #ladder li.active { background: #ca8a04; color: #fff; font-weight: 700; }
      #modal { position: fixed; inset: 0; background: rgba(0, 0, 0, 0.75); display: flex; align-items: center; justify-content: center; }
      #modal .card { max-width: 28rem; text-align: center; }
      #end-card h1 { color: #facc15; margin: 0 0 0.5rem; }
    </style>
  </head>
  <body>
    <main>
      <section class="card" id="loading-card">Carregando...</section>
      <section class="card hidden" id="game-card">
        <div class="status-row">
          <span id="level-label"></span>
          <span id="prize-label"></span>
        </div>
        <div class="timer-track"><div id="timer-fill"></div></div>
        <div id="question"></div>
        <div id="options" class="options-grid"></div>
        <div class="lifelines" id="lifelines"></div>
        <div class="status-row">
          <span id="stop-label"></span>
          <span id="wrong-label"></span>
        </div>
      </section>
      <button class="action-button hidden" id="stop-button">Parar</button>
      <section class="card hidden" id="end-card">
        <h1 id="end-title"></h1>
        <p id="end-subtitle"></p>
        <p>Sua patente: <strong id="end-rank"></strong></p>
        <p>Prêmio: <strong id="end-prize"></strong></p>
        <div id="end-details"></div>
        <button class="action-button" id="restart-button">Jogar de novo</button>
      </section>
    </main>
    <ol id="ladder" reversed></ol>
    <div id="modal" class="hidden">
      <div class="card">
        <div id="modal-body"></div>
        <button class="action-button" id="modal-close">Fechar</button>
      </div>
    </div>
    <script>
      const END_TITLES = { won: 'MILIONÁRIO!', stopped: 'PAROU!', lost: 'FIM DE JOGO' };
      const END_SUBTITLES = {
        won: 'Você zerou o jogo', stopped: 'Você preferiu não arriscar',
        wrong_answer: 'Você errou a questão', timeout: 'O tempo acabou'
      };
      const money = value => 'R$ ' + value.toLocaleString('pt-BR');
      let ladder = [];
      let lastSnapshot = null;

      async function post(path, body) {
        const response = await fetch(path, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(body || {})
        });
        if (response.ok) {
          render(await response.json());
        }
      }

      function show(id, visible) {
        document.getElementById(id).classList.toggle('hidden', !visible);
      }

      function renderLadder(level) {
        const list = document.getElementById('ladder');
        list.innerHTML = '';
        [...ladder].reverse().forEach(step => {
          const item = document.createElement('li');
          if (step.level === level) item.classList.add('active');
          if (step.level < level) item.classList.add('past');
          item.innerHTML = `<span>${step.level}</span><span>${money(step.prize)}</span>`;
          list.appendChild(item);
        });
      }

      function renderModal(result) {
        if (!result) { show('modal', false); return; }
        const body = document.getElementById('modal-body');
        if (result.kind === 'expert_hint') {
          body.innerHTML = `<h2>O Pastor diz...</h2><p>"Irmão, tenho quase certeza que a resposta correta é a número <strong>${result.suggestion + 1}</strong>."</p>`;
        } else {
          body.innerHTML = '<h2>Os irmãos votaram</h2>' + result.stats
            .map((value, idx) => `<p>${idx + 1}: ${value}%</p>`).join('');
        }
        show('modal', true);
      }

      function render(state) {
        lastSnapshot = state;
        renderLadder(state.current_level);
        show('stop-button', state.is_started && state.status === 'playing');
        if (!state.is_started || state.stalled) {
          show('loading-card', true); show('game-card', false); show('end-card', false);
          document.getElementById('loading-card').textContent =
            state.stalled ? 'Sem perguntas disponíveis para este nível.' : 'Carregando...';
          return;
        }
        show('loading-card', false);
        if (state.status !== 'playing') {
          show('game-card', false); show('end-card', true); show('modal', false);
          document.getElementById('end-title').textContent = END_TITLES[state.status];
          document.getElementById('end-subtitle').textContent = END_SUBTITLES[state.end_reason] || '';
          document.getElementById('end-rank').textContent = state.reached_title || '';
          document.getElementById('end-prize').textContent = money(state.accumulated_money);
          document.getElementById('end-details').innerHTML = state.question && state.question.details_html || '';
          return;
        }
        show('game-card', true); show('end-card', false);
        document.getElementById('level-label').textContent = `Pergunta ${state.current_level}`;
        document.getElementById('prize-label').textContent = `Valendo ${money(state.current_prize)}`;
        document.getElementById('stop-label').textContent = `Parar: ${money(state.stop_prize)}`;
        document.getElementById('wrong-label').textContent = `Errar: ${money(state.wrong_prize)}`;
        const fill = document.getElementById('timer-fill');
        fill.style.width = `${(state.time_left / state.time_limit) * 100}%`;
        fill.classList.toggle('warning', state.time_left <= 9);
        document.getElementById('question').innerHTML = state.question.text_html;

        const options = document.getElementById('options');
        options.innerHTML = '';
        state.question.options_html.forEach((html, idx) => {
          const button = document.createElement('button');
          button.className = 'option-button';
          button.innerHTML = `<strong>${idx + 1}.</strong> ${html}`;
          button.disabled = state.eliminated_options.includes(idx);
          button.onclick = () => post('/answer', { option_index: idx });
          options.appendChild(button);
        });

        const lifelines = document.getElementById('lifelines');
        lifelines.innerHTML = '';
        state.lifelines.forEach(lifeline => {
          const button = document.createElement('button');
          button.className = 'action-button';
          const suffix = lifeline.uses_left !== null ? ` (${lifeline.uses_left})` : '';
          button.textContent = lifeline.label + suffix;
          button.disabled = !lifeline.available;
          button.onclick = () => post('/lifeline', { kind: lifeline.kind });
          lifelines.appendChild(button);
        });
        renderModal(state.lifeline_result);
      }

      async function poll() {
        try {
          const response = await fetch('/state');
          render(await response.json());
        } catch (error) {
          console.error('Error fetching state:', error);
        }
      }

      async function init() {
        ladder = await (await fetch('/ladder')).json();
        const state = await (await fetch('/state')).json();
        if (!state.is_started) {
          await post('/start');
        } else {
          render(state);
        }
        setInterval(poll, 500);
      }

      document.getElementById('stop-button').onclick = () => {
        if (lastSnapshot && confirm(`Parar agora e levar ${money(lastSnapshot.stop_prize)}?`)) {
          post('/stop');
        }
      };
      document.getElementById('restart-button').onclick = () => post('/start');
      document.getElementById('modal-close').onclick = () => post('/lifeline/close');
      init();
    </script>
  </body>
</html>
"""


class AnswerPayload(BaseModel):
    """Payload schema for submitted answers."""

    option_index: int = Field(ge=0, le=3)


class LifelinePayload(BaseModel):
    kind: LifelineKind


class GeneratePayload(BaseModel):
    """Payload schema for the AI question generator."""

    topic: str = Field(min_length=1)
    amount: int = Field(default=5, ge=1, le=20)
    difficulty: Literal["easy", "medium", "hard", "million", "mix"] = "mix"


class QuestionPayload(BaseModel):
    id: str | None = None
    text: str
    options: list[str] = Field(min_length=4, max_length=4)
    correct_option: int = Field(ge=0, le=3)
    difficulty: Difficulty
    correct_details: str | None = None


class AddQuestionsPayload(BaseModel):
    questions: list[QuestionPayload] = Field(min_length=1)


def _lifeline_result_to_dict(result: LifelineResult | None) -> dict[str, object] | None:
    if result is None:
        return None
    if isinstance(result, ExpertHintResult):
        return {"kind": result.kind.value, "suggestion": result.suggestion}
    if isinstance(result, CrowdVoteResult):
        return {"kind": result.kind.value, "stats": list(result.stats)}
    raise TypeError(f"Unknown lifeline result {result!r}")


def _question_to_dict(question: Question, reveal: bool) -> dict[str, object]:
    payload: dict[str, object] = {
        "id": question.id,
        "difficulty": question.difficulty.value,
        **renderer.render_question(question),
        "correct_option_index": None,
        "details_html": None,
    }
    # The answer is only exposed once the game is over
    if reveal:
        payload["correct_option_index"] = question.correct_option_index
        if question.correct_details:
            payload["details_html"] = renderer.render_fragment(question.correct_details)
    return payload


def snapshot_to_dict(snapshot: GameSnapshot, time_limit: int) -> dict[str, object]:
    lifelines = [
        {
            "kind": kind.value,
            "label": LIFELINE_LABELS[kind.value],
            "available": state.available,
            "used": state.used,
            "uses_left": state.uses_left if isinstance(state, MultiUseLifeline) else None,
        }
        for kind, state in snapshot.lifelines.items()
    ]
    question = None
    if snapshot.question is not None:
        question = _question_to_dict(snapshot.question, reveal=snapshot.is_finished)
    return {
        "status": snapshot.status.value,
        "end_reason": snapshot.end_reason.value if snapshot.end_reason else None,
        "is_started": snapshot.is_started,
        "stalled": snapshot.stalled,
        "current_level": snapshot.current_level,
        "current_prize": snapshot.current_prize,
        "stop_prize": snapshot.stop_prize,
        "wrong_prize": snapshot.wrong_prize,
        "accumulated_money": snapshot.accumulated_money,
        "time_left": snapshot.time_left,
        "time_limit": time_limit,
        "lifelines": lifelines,
        "eliminated_options": sorted(snapshot.eliminated_options),
        "lifeline_result": _lifeline_result_to_dict(snapshot.lifeline_result),
        "question": question,
        "reached_title": snapshot.reached_title,
    }


def _generation_to_dict(result: GenerationResult) -> dict[str, object]:
    return {
        "questions": [
            {
                "id": q.id,
                "text": q.text,
                "options": list(q.options),
                "correct_option": q.correct_option_index,
                "difficulty": q.difficulty.value,
                "correct_details": q.correct_details,
            }
            for q in result.questions
        ],
        "is_mock": result.is_mock,
        "error_reason": result.error_reason,
    }


def _get_dependency(value):
    def dependency():
        return value

    return dependency


def create_api_app(
    game_manager: GameManager,
    question_generator: QuestionGenerator | None = None,
    time_limit: int | None = None,
) -> FastAPI:
    """Create a FastAPI application wired to the provided game manager."""
    app = FastAPI(title="Show do Milhão API", version="0.1.0")
    manager_dep = _get_dependency(game_manager)
    generator_dep = _get_dependency(question_generator or QuestionGenerator())
    limit = time_limit or TIME_LIMIT_SECONDS

    def state_of(manager: GameManager) -> dict[str, object]:
        return snapshot_to_dict(manager.get_snapshot(), limit)

    @app.get("/", response_class=HTMLResponse)
    def serve_player_page() -> str:
        return _PLAYER_PAGE_HTML

    @app.get("/state")
    def get_state(manager: GameManager = Depends(manager_dep)) -> dict[str, object]:
        return state_of(manager)

    @app.get("/ladder")
    def get_ladder() -> list[dict[str, object]]:
        return [
            {
                "level": entry.level,
                "prize": entry.prize,
                "stop": entry.stop,
                "wrong": entry.wrong,
                "title": entry.title,
            }
            for entry in prize_ladder.PRIZE_LADDER
        ]

    @app.post("/start")
    def start_game(manager: GameManager = Depends(manager_dep)) -> dict[str, object]:
        if not manager.start_game():
            raise HTTPException(status_code=503, detail="No question available to start a game.")
        return state_of(manager)

    @app.post("/answer")
    def submit_answer(
        payload: AnswerPayload,
        manager: GameManager = Depends(manager_dep),
    ) -> dict[str, object]:
        manager.answer(payload.option_index)
        return state_of(manager)

    @app.post("/stop")
    def stop_game(manager: GameManager = Depends(manager_dep)) -> dict[str, object]:
        manager.stop()
        return state_of(manager)

    @app.post("/lifeline")
    def use_lifeline(
        payload: LifelinePayload,
        manager: GameManager = Depends(manager_dep),
    ) -> dict[str, object]:
        manager.use_lifeline(payload.kind)
        return state_of(manager)

    @app.post("/lifeline/close")
    def close_lifeline(manager: GameManager = Depends(manager_dep)) -> dict[str, object]:
        manager.close_lifeline_modal()
        return state_of(manager)

    @app.post("/admin/generate")
    async def generate_questions(
        payload: GeneratePayload,
        generator: QuestionGenerator = Depends(generator_dep),
    ) -> dict[str, object]:
        result = await generator.generate(payload.topic, payload.amount, payload.difficulty)
        return _generation_to_dict(result)

    @app.post("/admin/questions", status_code=201)
    async def add_questions(
        payload: AddQuestionsPayload,
        manager: GameManager = Depends(manager_dep),
    ) -> dict[str, object]:
        questions = [
            Question(
                id=item.id or f"admin-{uuid4().hex[:12]}",
                text=item.text,
                options=tuple(item.options),
                correct_option_index=item.correct_option,
                difficulty=item.difficulty,
                correct_details=item.correct_details,
            )
            for item in payload.questions
        ]
        try:
            added = manager.add_questions(questions)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        error: str | None = None
        try:
            persisted = await manager.save_questions(added) if added else False
        except QuestionSourceError as exc:
            logger.warning("Added questions were not stored: %s", exc)
            persisted = False
            error = str(exc)
        return {
            "added": [q.id for q in added],
            "total": manager.get_question_count(),
            "persisted": persisted,
            "error": error,
        }

    @app.post("/admin/reload")
    async def reload_questions(manager: GameManager = Depends(manager_dep)) -> dict[str, object]:
        count = await manager.reload_questions()
        return {"total": count, "fallback": manager.is_using_fallback_questions()}

    return app


def start_api_server(
    game_manager: GameManager,
    question_generator: QuestionGenerator | None = None,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(game_manager, question_generator)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="GameApiServer", daemon=True)
    thread.start()
    return thread
