"""Static metadata describing Show do Milhão."""

APP_NAME = "Show do Milhão"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Show do Milhão is a Bible trivia ladder: sixteen questions, four lifelines "
    "and a countdown on every question. Play on the desktop or from a browser."
)

HELP_TEXT = (
    "Answer each question before the timer runs out. Stop at any moment to keep "
    "the stop prize; a wrong answer leaves you with the wrong prize.\n\n"
    "Lifelines:\n"
    "Cortar Joio removes two wrong options.\n"
    "Irmãos shows how the audience would vote.\n"
    "Pastor suggests an answer (and can be wrong).\n"
    "Livramento swaps the question, up to three times."
)
