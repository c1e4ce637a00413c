"""Row of lifeline buttons."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from milhao_app.constants.ui_constants import LIFELINE_LABELS
from milhao_app.core.models import LifelineKind, LifelineState, MultiUseLifeline


class LifelineBar(QWidget):
    """One button per lifeline; disabled once spent or while nothing is in play."""

    def __init__(
        self,
        on_use: Callable[[LifelineKind], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_use = on_use

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self._buttons: dict[LifelineKind, QPushButton] = {}
        for kind in LifelineKind:
            button = QPushButton(LIFELINE_LABELS[kind.value], self)
            button.clicked.connect(lambda _checked=False, k=kind: self.on_use(k))
            layout.addWidget(button)
            self._buttons[kind] = button

    def update_lifelines(self, lifelines: dict[LifelineKind, LifelineState], interactive: bool) -> None:
        for kind, button in self._buttons.items():
            state = lifelines.get(kind)
            label = LIFELINE_LABELS[kind.value]
            if isinstance(state, MultiUseLifeline):
                label = f"{label} ({state.uses_left})"
            button.setText(label)
            button.setEnabled(interactive and state is not None and state.available)
