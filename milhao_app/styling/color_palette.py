"""Color palette for the game window, supporting a studio and a light theme."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    STUDIO = auto()
    LIGHT = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    studio: str
    light: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.studio if theme == Theme.STUDIO else self.light


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        studio="#F5F7FF",     # Near white
        light="#0B1120"       # Navy ink
    )

    TEXT_MUTED = ThemeColors(
        studio="#94A3B8",     # Slate
        light="#64748B"
    )

    BACKGROUND_PRIMARY = ThemeColors(
        studio="#020617",     # Studio night
        light="#F8FAFC"
    )

    BACKGROUND_PANEL = ThemeColors(
        studio="#0F1B3D",     # Deep blue
        light="#E2E8F0"
    )

    # Prize highlights
    GOLD = ThemeColors(
        studio="#FACC15",
        light="#CA8A04"
    )

    LADDER_ACTIVE_BG = ThemeColors(
        studio="#CA8A04",
        light="#FACC15"
    )

    LADDER_PAST = ThemeColors(
        studio="#4ADE80",
        light="#15803D"
    )

    DANGER = ThemeColors(
        studio="#EF4444",
        light="#B91C1C"
    )

    BORDER_PRIMARY = ThemeColors(
        studio="#1E3A8A",
        light="#94A3B8"
    )

    BUTTON_PRIMARY_BG = ThemeColors(
        studio="#1D4ED8",
        light="#2563EB"
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        studio="#FFFFFF",
        light="#FFFFFF"
    )

    BUTTON_HOVER_BG = ThemeColors(
        studio="#2563EB",
        light="#1D4ED8"
    )

    BUTTON_DISABLED_BG = ThemeColors(
        studio="#1F2937",
        light="#CBD5E1"
    )
