"""Domain models for the trivia ladder."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Difficulty(Enum):
    """Difficulty band a question belongs to."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    MILLION = "million"


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    STOPPED = "stopped"


class GameEndReason(Enum):
    """Why a session left the playing state."""

    WON = "won"
    WRONG_ANSWER = "wrong_answer"
    TIMEOUT = "timeout"
    STOPPED = "stopped"


class LifelineKind(Enum):
    ELIMINATE_TWO = "eliminate_two"
    CROWD_VOTE = "crowd_vote"
    EXPERT_HINT = "expert_hint"
    REROLL = "reroll"


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with exactly four options."""

    id: str
    text: str
    options: tuple[str, ...]
    correct_option_index: int
    difficulty: Difficulty
    correct_details: str | None = None

    def wrong_option_indices(self) -> list[int]:
        return [idx for idx in range(len(self.options)) if idx != self.correct_option_index]


@dataclass(frozen=True, slots=True)
class PrizeLadderEntry:
    """One step of the prize ladder."""

    level: int
    prize: int
    stop: int  # Banked when stopping after reaching this level
    wrong: int  # Banked when failing this level
    title: str


@dataclass(slots=True)
class SingleUseLifeline:
    """Lifeline that can be used once per game."""

    kind: LifelineKind
    used: bool = False

    @property
    def available(self) -> bool:
        return not self.used

    def consume(self) -> None:
        self.used = True

    def copy(self) -> SingleUseLifeline:
        return SingleUseLifeline(kind=self.kind, used=self.used)


@dataclass(slots=True)
class MultiUseLifeline:
    """Lifeline with a per-game use budget."""

    kind: LifelineKind
    budget: int
    uses_left: int | None = None

    def __post_init__(self) -> None:
        if self.uses_left is None:
            self.uses_left = self.budget

    @property
    def available(self) -> bool:
        return self.uses_left > 0

    @property
    def used(self) -> bool:
        return self.uses_left == 0

    def consume(self) -> None:
        if self.uses_left <= 0:
            raise RuntimeError(f"Lifeline {self.kind.value} has no uses left.")
        self.uses_left -= 1

    def copy(self) -> MultiUseLifeline:
        return MultiUseLifeline(kind=self.kind, budget=self.budget, uses_left=self.uses_left)


LifelineState = SingleUseLifeline | MultiUseLifeline


@dataclass(frozen=True, slots=True)
class ExpertHintResult:
    suggestion: int
    kind: LifelineKind = LifelineKind.EXPERT_HINT


@dataclass(frozen=True, slots=True)
class CrowdVoteResult:
    stats: tuple[int, ...]
    kind: LifelineKind = LifelineKind.CROWD_VOTE


LifelineResult = ExpertHintResult | CrowdVoteResult


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Immutable view of a session handed to front ends."""

    status: GameStatus
    end_reason: GameEndReason | None
    is_started: bool
    current_level: int
    accumulated_money: int
    current_prize: int
    stop_prize: int
    wrong_prize: int
    time_left: int
    lifelines: dict[LifelineKind, LifelineState]
    eliminated_options: frozenset[int]
    lifeline_result: LifelineResult | None
    question: Question | None
    reached_title: str | None
    used_question_count: int

    @property
    def stalled(self) -> bool:
        """True when the game is in play but no question could be drawn."""
        return self.is_started and self.status is GameStatus.PLAYING and self.question is None

    @property
    def is_finished(self) -> bool:
        return self.status is not GameStatus.PLAYING


@dataclass(slots=True)
class MatchResult:
    """Outcome of a finished game, appended to the results sink."""

    user_id: str
    game_id: str
    score: int
    level: int
    status: GameStatus
    finished_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_record(self) -> dict[str, object]:
        return {
            "user_id": self.user_id,
            "game_id": self.game_id,
            "score": self.score,
            "metadata": {"level": self.level, "status": self.status.value},
        }
