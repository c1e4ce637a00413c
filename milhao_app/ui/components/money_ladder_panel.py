"""Side panel listing the prize ladder with the current level highlighted."""

from __future__ import annotations

from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import QGroupBox, QListWidget, QListWidgetItem, QVBoxLayout, QWidget

from milhao_app.core.prize_ladder import PRIZE_LADDER, format_prize
from milhao_app.styling.color_palette import ColorPalette, Theme


class MoneyLadderPanel(QGroupBox):
    """Read-only view of the sixteen prize levels, top prize first."""

    def __init__(self, theme: Theme = Theme.STUDIO, parent: QWidget | None = None) -> None:
        super().__init__("Prêmios", parent)
        self._theme = theme
        self._current_level: int | None = None

        layout = QVBoxLayout(self)
        self.ladder_list = QListWidget(self)
        self.ladder_list.setSelectionMode(QListWidget.NoSelection)
        layout.addWidget(self.ladder_list)

        self._items: dict[int, QListWidgetItem] = {}
        for entry in reversed(PRIZE_LADDER):
            item = QListWidgetItem(f"{entry.level:>2}  {format_prize(entry.prize)}  {entry.title}")
            self.ladder_list.addItem(item)
            self._items[entry.level] = item

    def set_current_level(self, level: int) -> None:
        if level == self._current_level:
            return
        self._current_level = level

        active_bg = QBrush(QColor(ColorPalette.LADDER_ACTIVE_BG.get(self._theme)))
        past_fg = QBrush(QColor(ColorPalette.LADDER_PAST.get(self._theme)))
        plain_fg = QBrush(QColor(ColorPalette.TEXT_PRIMARY.get(self._theme)))
        for entry_level, item in self._items.items():
            item.setBackground(active_bg if entry_level == level else QBrush())
            item.setForeground(past_fg if entry_level < level else plain_fg)

        current = self._items.get(level)
        if current is not None:
            self.ladder_list.scrollToItem(current)
