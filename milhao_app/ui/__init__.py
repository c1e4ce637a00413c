"""Qt UI components for the desktop game."""

from .dialog_helpers import (
    confirm_stop,
    show_error,
    show_info,
    show_lifeline_result,
    show_warning,
)
from .game_window import GameWindow

__all__ = [
    "GameWindow",
    "confirm_stop",
    "show_error",
    "show_info",
    "show_lifeline_result",
    "show_warning",
]
