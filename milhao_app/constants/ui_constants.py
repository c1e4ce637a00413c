"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Show do Milhão"
SNAPSHOT_REFRESH_INTERVAL_MS: int = 200
TIMER_WARNING_SECONDS: int = 9

BUTTON_STOP: str = "Parar"
BUTTON_RESTART: str = "Jogar de novo"
BUTTON_ABOUT: str = "Sobre"
BUTTON_HELP: str = "Ajuda"

LIFELINE_LABELS: dict[str, str] = {
    "eliminate_two": "Cortar Joio",
    "crowd_vote": "Irmãos",
    "expert_hint": "Pastor",
    "reroll": "Livramento",
}

LOADING_MESSAGE: str = "Carregando..."
STALLED_MESSAGE: str = "Sem perguntas disponíveis para este nível."
CONFIRM_STOP_TEMPLATE: str = "Parar agora e levar {amount}?"

END_TITLES: dict[str, str] = {
    "won": "MILIONÁRIO!",
    "stopped": "PAROU!",
    "lost": "FIM DE JOGO",
}
END_SUBTITLES: dict[str, str] = {
    "won": "Você zerou o jogo",
    "stopped": "Você preferiu não arriscar",
    "wrong_answer": "Você errou a questão",
    "timeout": "O tempo acabou",
}
