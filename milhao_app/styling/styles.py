"""Centralized Qt stylesheets for the game window."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.STUDIO) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
                padding: 10px 14px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BUTTON_DISABLED_BG.get(theme)};
                color: {ColorPalette.TEXT_MUTED.get(theme)};
            }}
            QListWidget, QGroupBox {{
                background-color: {ColorPalette.BACKGROUND_PANEL.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
            }}
            QProgressBar {{
                border: none;
                border-radius: 4px;
                background-color: {ColorPalette.BACKGROUND_PANEL.get(theme)};
                max-height: 10px;
            }}
            QProgressBar::chunk {{
                border-radius: 4px;
                background-color: {ColorPalette.GOLD.get(theme)};
            }}
        """

    @staticmethod
    def get_timer_warning_style(theme: Theme = Theme.STUDIO) -> str:
        return f"QProgressBar::chunk {{ background-color: {ColorPalette.DANGER.get(theme)}; }}"

    @staticmethod
    def get_prize_label_style(theme: Theme = Theme.STUDIO) -> str:
        return f"font-size: 16pt; font-weight: bold; color: {ColorPalette.GOLD.get(theme)};"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 18pt; font-weight: bold;"
