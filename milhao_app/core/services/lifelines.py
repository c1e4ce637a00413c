"""Randomised outcomes of the eliminate-two, expert-hint and crowd-vote lifelines."""

from __future__ import annotations

import math
import random

from milhao_app.constants.game_constants import (
    CROWD_CONFIDENCE,
    EXPERT_ERROR_CHANCE,
    REROLL_BUDGET,
)
from milhao_app.core.models import (
    CrowdVoteResult,
    ExpertHintResult,
    LifelineKind,
    LifelineState,
    MultiUseLifeline,
    Question,
    SingleUseLifeline,
)


def initial_lifelines(reroll_budget: int = REROLL_BUDGET) -> dict[LifelineKind, LifelineState]:
    """Full lifeline budget for a new game."""
    return {
        LifelineKind.ELIMINATE_TWO: SingleUseLifeline(LifelineKind.ELIMINATE_TWO),
        LifelineKind.CROWD_VOTE: SingleUseLifeline(LifelineKind.CROWD_VOTE),
        LifelineKind.EXPERT_HINT: SingleUseLifeline(LifelineKind.EXPERT_HINT),
        LifelineKind.REROLL: MultiUseLifeline(LifelineKind.REROLL, budget=reroll_budget),
    }


def eliminate_two(question: Question, rng: random.Random) -> frozenset[int]:
    """Pick two of the three wrong options to hide."""
    return frozenset(rng.sample(question.wrong_option_indices(), 2))


def expert_hint(question: Question, rng: random.Random) -> ExpertHintResult:
    """Suggest an answer; the expert errs more often on harder questions."""
    error_chance = EXPERT_ERROR_CHANCE[question.difficulty.value]
    if rng.random() < error_chance:
        return ExpertHintResult(suggestion=rng.choice(question.wrong_option_indices()))
    return ExpertHintResult(suggestion=question.correct_option_index)


def crowd_vote(question: Question, rng: random.Random) -> CrowdVoteResult:
    """Audience percentages for the four options, always totalling 100."""
    confidence = CROWD_CONFIDENCE[question.difficulty.value]
    stats = [0] * len(question.options)
    stats[question.correct_option_index] = math.floor(100 * confidence)

    remaining = 100 - stats[question.correct_option_index]
    wrong_indices = question.wrong_option_indices()
    for idx in wrong_indices[:-1]:
        share = rng.randint(0, remaining)
        stats[idx] = share
        remaining -= share
    stats[wrong_indices[-1]] = remaining
    return CrowdVoteResult(stats=tuple(stats))
