"""Colors and Qt stylesheets for the game window."""

from .color_palette import ColorPalette, Theme, ThemeColors
from .styles import Styles

__all__ = ["ColorPalette", "Styles", "Theme", "ThemeColors"]
