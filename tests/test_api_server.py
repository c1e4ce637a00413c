"""Tests for the HTTP API used by the browser player and admin tools."""

import asyncio
import json
import random
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from milhao_app.core.game_manager import GameManager
from milhao_app.core.question_exporter import save_questions_to_file
from milhao_app.core.services.question_generator import QuestionGenerator
from milhao_app.core.services.question_pool import QuestionPool
from milhao_app.core.services.question_sources import QuestionSourceError, TextFileQuestionSource
from milhao_app.server.api_server import create_api_app


class FullDiskSource:
    def __init__(self, questions):
        self._questions = questions

    async def fetch_questions(self):
        return list(self._questions)

    async def save_questions(self, questions):
        raise QuestionSourceError("disk full")


class FakeModels:
    def generate_content(self, model: str, contents: str):
        return SimpleNamespace(
            text=json.dumps(
                [
                    {
                        "text": "Quantos dias durou o dilúvio?",
                        "options": ["7", "40", "100", "365"],
                        "correct_option": 1,
                        "difficulty": "medium",
                    }
                ]
            )
        )


GOLIAS_PAYLOAD = {
    "questions": [
        {
            "text": "Quem derrotou Golias?",
            "options": ["Davi", "Saul", "Jônatas", "Sansão"],
            "correct_option": 0,
            "difficulty": "easy",
        }
    ]
}


@pytest.fixture
def manager(pool):
    game_manager = GameManager(pool, rng=random.Random(2), timer_interval=60)
    yield game_manager
    game_manager.shutdown()


@pytest.fixture
def client(manager):
    generator = QuestionGenerator(client=SimpleNamespace(models=FakeModels()))
    return TestClient(create_api_app(manager, question_generator=generator))


@pytest.fixture
def started(client):
    response = client.post("/start")
    assert response.status_code == 200
    return response.json()


def correct_index(manager: GameManager) -> int:
    return manager.get_snapshot().question.correct_option_index


# ============================================================================
# Player page and reads
# ============================================================================


def test_player_page_served(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Show do Milhão" in response.text


def test_ladder(client):
    ladder = client.get("/ladder").json()
    assert len(ladder) == 16
    assert ladder[4] == {"level": 5, "prize": 5_000, "stop": 4_000, "wrong": 2_000, "title": ladder[4]["title"]}


def test_state_before_start(client):
    state = client.get("/state").json()
    assert state["is_started"] is False
    assert state["question"] is None


# ============================================================================
# Game flow
# ============================================================================


class TestGameFlow:
    def test_start_returns_first_question(self, started):
        assert started["status"] == "playing"
        assert started["current_level"] == 1
        assert started["time_left"] == started["time_limit"] == 30
        question = started["question"]
        assert len(question["options_html"]) == 4
        assert question["correct_option_index"] is None
        assert {item["kind"] for item in started["lifelines"]} == {
            "eliminate_two",
            "crowd_vote",
            "expert_hint",
            "reroll",
        }

    def test_correct_answer_advances(self, client, manager, started):
        response = client.post("/answer", json={"option_index": correct_index(manager)})
        state = response.json()
        assert state["current_level"] == 2
        assert state["accumulated_money"] == 1_000

    def test_wrong_answer_reveals_the_answer(self, client, manager, started):
        correct = correct_index(manager)
        state = client.post("/answer", json={"option_index": (correct + 1) % 4}).json()
        assert state["status"] == "lost"
        assert state["end_reason"] == "wrong_answer"
        assert state["question"]["correct_option_index"] == correct

    def test_stop(self, client, started):
        state = client.post("/stop").json()
        assert state["status"] == "stopped"
        assert state["reached_title"] is not None

    @pytest.mark.parametrize("option_index", [-1, 4, "b"])
    def test_invalid_answer_index(self, client, started, option_index):
        response = client.post("/answer", json={"option_index": option_index})
        assert response.status_code == 422

    def test_restart_after_finish(self, client, started):
        client.post("/stop")
        state = client.post("/start").json()
        assert state["status"] == "playing"
        assert state["accumulated_money"] == 0


class TestLifelines:
    def test_crowd_vote_and_close(self, client, started):
        state = client.post("/lifeline", json={"kind": "crowd_vote"}).json()
        result = state["lifeline_result"]
        assert result["kind"] == "crowd_vote"
        assert sum(result["stats"]) == 100
        crowd = next(item for item in state["lifelines"] if item["kind"] == "crowd_vote")
        assert crowd["used"] is True

        state = client.post("/lifeline/close").json()
        assert state["lifeline_result"] is None

    def test_eliminate_two(self, client, manager, started):
        state = client.post("/lifeline", json={"kind": "eliminate_two"}).json()
        assert len(state["eliminated_options"]) == 2
        assert correct_index(manager) not in state["eliminated_options"]

    def test_reroll_counts_down(self, client, started):
        state = client.post("/lifeline", json={"kind": "reroll"}).json()
        reroll = next(item for item in state["lifelines"] if item["kind"] == "reroll")
        assert reroll["uses_left"] == 2
        assert state["question"]["id"] != started["question"]["id"]

    def test_unknown_lifeline(self, client, started):
        assert client.post("/lifeline", json={"kind": "phone_a_friend"}).status_code == 422


def test_start_without_questions_is_unavailable(empty_pool):
    game_manager = GameManager(empty_pool)
    client = TestClient(create_api_app(game_manager))
    assert client.post("/start").status_code == 503
    game_manager.shutdown()


# ============================================================================
# Admin
# ============================================================================


class TestAdmin:
    def test_generate(self, client):
        response = client.post("/admin/generate", json={"topic": "Gênesis", "amount": 1})
        body = response.json()
        assert response.status_code == 200
        assert body["is_mock"] is False
        assert body["questions"][0]["correct_option"] == 1

    def test_generate_validates_amount(self, client):
        assert client.post("/admin/generate", json={"topic": "Gênesis", "amount": 0}).status_code == 422

    def test_add_questions(self, client, manager):
        before = manager.get_question_count()
        payload = {
            "questions": [
                {
                    "text": "Quem derrotou Golias?",
                    "options": ["Davi", "Saul", "Jônatas", "Sansão"],
                    "correct_option": 0,
                    "difficulty": "easy",
                }
            ]
        }
        response = client.post("/admin/questions", json=payload)
        assert response.status_code == 201
        body = response.json()
        assert body["total"] == before + 1
        assert body["added"][0].startswith("admin-")
        assert body["persisted"] is False
        assert body["error"] is None

    def test_added_questions_are_stored_and_survive_reload(self, tmp_path, ladder_questions):
        path = tmp_path / "perguntas.txt"
        save_questions_to_file(path, ladder_questions)
        pool = QuestionPool(source=TextFileQuestionSource(path), rng=random.Random(3))
        asyncio.run(pool.load())
        game_manager = GameManager(pool, timer_interval=60)
        try:
            client = TestClient(create_api_app(game_manager))
            response = client.post("/admin/questions", json=GOLIAS_PAYLOAD)
            body = response.json()
            assert response.status_code == 201
            assert body["persisted"] is True
            assert body["error"] is None
            added_id = body["added"][0]

            reloaded = client.post("/admin/reload").json()
            assert reloaded["fallback"] is False
            assert reloaded["total"] == len(ladder_questions) + 1
            assert added_id in path.read_text(encoding="utf-8")
        finally:
            game_manager.shutdown()

    def test_storage_failure_is_reported(self, ladder_questions):
        pool = QuestionPool(source=FullDiskSource(ladder_questions))
        asyncio.run(pool.load())
        game_manager = GameManager(pool, timer_interval=60)
        try:
            client = TestClient(create_api_app(game_manager))
            response = client.post("/admin/questions", json=GOLIAS_PAYLOAD)
            body = response.json()
            assert response.status_code == 201
            assert body["persisted"] is False
            assert body["error"] == "disk full"
            assert body["total"] == len(ladder_questions) + 1
        finally:
            game_manager.shutdown()

    def test_add_duplicate_question(self, client):
        payload = {
            "questions": [
                {
                    "id": "q01-0",
                    "text": "Repetida?",
                    "options": ["a", "b", "c", "d"],
                    "correct_option": 0,
                    "difficulty": "easy",
                }
            ]
        }
        assert client.post("/admin/questions", json=payload).status_code == 422

    def test_add_question_with_blank_option(self, client):
        payload = {
            "questions": [
                {"text": "Vazia?", "options": ["a", " ", "c", "d"], "correct_option": 0, "difficulty": "hard"}
            ]
        }
        assert client.post("/admin/questions", json=payload).status_code == 422

    def test_reload_without_source_uses_builtin_questions(self, client):
        body = client.post("/admin/reload").json()
        assert body["fallback"] is True
        assert body["total"] > 0
