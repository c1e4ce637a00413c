"""Network configuration constants for the game server."""

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 8000
QUESTION_LOAD_TIMEOUT_SECONDS: float = 8.0
SUPABASE_QUESTIONS_TABLE: str = "questions"
SUPABASE_MATCHES_TABLE: str = "game_matches"
