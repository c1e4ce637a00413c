"""Tests for the randomised lifeline outcomes."""

import random

import pytest

from milhao_app.core.models import Difficulty, LifelineKind, MultiUseLifeline, SingleUseLifeline
from milhao_app.core.services import lifelines


@pytest.mark.parametrize("difficulty", list(Difficulty))
@pytest.mark.parametrize("correct", range(4))
def test_crowd_vote_always_totals_one_hundred(make_question, difficulty, correct):
    rng = random.Random(correct)
    question = make_question("q", difficulty, correct=correct)
    for _ in range(200):
        result = lifelines.crowd_vote(question, rng)
        assert sum(result.stats) == 100
        assert len(result.stats) == 4
        assert all(share >= 0 for share in result.stats)


def test_crowd_vote_favours_correct_option_on_easy_questions(make_question):
    question = make_question("q", Difficulty.EASY, correct=2)
    result = lifelines.crowd_vote(question, random.Random(1))
    assert result.stats[2] == 70
    assert result.kind is LifelineKind.CROWD_VOTE


def test_eliminate_two_never_hides_the_correct_option(make_question):
    rng = random.Random(3)
    for correct in range(4):
        question = make_question("q", correct=correct)
        for _ in range(100):
            hidden = lifelines.eliminate_two(question, rng)
            assert len(hidden) == 2
            assert correct not in hidden


def test_expert_is_mostly_right_on_easy_questions(make_question):
    rng = random.Random(11)
    question = make_question("q", Difficulty.EASY, correct=1)
    hits = sum(lifelines.expert_hint(question, rng).suggestion == 1 for _ in range(1000))
    assert hits >= 850


def test_expert_is_mostly_wrong_on_the_million_question(make_question):
    rng = random.Random(5)
    question = make_question("q", Difficulty.MILLION, correct=0)
    hits = sum(lifelines.expert_hint(question, rng).suggestion == 0 for _ in range(1000))
    assert hits < 300


def test_initial_lifelines():
    state = lifelines.initial_lifelines(reroll_budget=3)
    assert set(state) == set(LifelineKind)
    assert isinstance(state[LifelineKind.ELIMINATE_TWO], SingleUseLifeline)
    reroll = state[LifelineKind.REROLL]
    assert isinstance(reroll, MultiUseLifeline)
    assert reroll.uses_left == 3
    assert all(lifeline.available for lifeline in state.values())


class TestLifelineState:
    def test_single_use_is_spent_after_one_use(self):
        lifeline = SingleUseLifeline(LifelineKind.EXPERT_HINT)
        lifeline.consume()
        assert lifeline.used
        assert not lifeline.available

    def test_multi_use_counts_down(self):
        lifeline = MultiUseLifeline(LifelineKind.REROLL, budget=2)
        lifeline.consume()
        assert lifeline.available
        lifeline.consume()
        assert lifeline.used
        with pytest.raises(RuntimeError):
            lifeline.consume()

    def test_copy_is_independent(self):
        lifeline = MultiUseLifeline(LifelineKind.REROLL, budget=3)
        snapshot = lifeline.copy()
        lifeline.consume()
        assert snapshot.uses_left == 3
