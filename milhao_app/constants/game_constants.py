"""Game rules shared across the session, UI and API layers."""

GAME_ID: str = "show-do-milhao"

TOTAL_LEVELS: int = 16
WIN_PRIZE: int = 1_000_000
TIME_LIMIT_SECONDS: int = 30
TIMER_TICK_SECONDS: float = 1.0
REROLL_BUDGET: int = 3

# Levels mapped to difficulty bands (inclusive upper bounds).
EASY_MAX_LEVEL: int = 5
MEDIUM_MAX_LEVEL: int = 10
HARD_MAX_LEVEL: int = 15

EXPERT_ERROR_CHANCE: dict[str, float] = {
    "easy": 0.10,
    "medium": 0.30,
    "hard": 0.60,
    "million": 0.80,
}
CROWD_CONFIDENCE: dict[str, float] = {
    "easy": 0.70,
    "medium": 0.50,
    "hard": 0.30,
    "million": 0.30,
}

NO_TITLE_REACHED: str = "Vigia Irmão!"
