"""Component showing the current question, its options and the countdown."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QProgressBar, QPushButton, QVBoxLayout, QWidget

from milhao_app.constants.ui_constants import LOADING_MESSAGE, STALLED_MESSAGE, TIMER_WARNING_SECONDS
from milhao_app.core.markdown_renderer import renderer
from milhao_app.core.models import GameSnapshot, GameStatus
from milhao_app.core.prize_ladder import format_prize
from milhao_app.styling.styles import Styles

_OPTION_LETTERS = "ABCD"


class QuestionPanel(QWidget):
    """Question text, four answer buttons and a timer bar."""

    def __init__(
        self,
        time_limit: int,
        on_answer: Callable[[int], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_answer = on_answer
        self._time_limit = time_limit
        self._warning_shown = False

        layout = QVBoxLayout(self)

        self.prize_label = QLabel("", self)
        self.prize_label.setStyleSheet(Styles.get_prize_label_style())
        layout.addWidget(self.prize_label)

        self.question_label = QLabel(LOADING_MESSAGE, self)
        self.question_label.setWordWrap(True)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.question_label)

        self.option_buttons: list[QPushButton] = []
        for index in range(4):
            button = QPushButton("", self)
            button.clicked.connect(lambda _checked=False, i=index: self.on_answer(i))
            layout.addWidget(button)
            self.option_buttons.append(button)

        self.timer_bar = QProgressBar(self)
        self.timer_bar.setRange(0, time_limit)
        self.timer_bar.setTextVisible(False)
        layout.addWidget(self.timer_bar)

        self.timer_label = QLabel("", self)
        self.timer_label.setAlignment(Qt.AlignRight)
        layout.addWidget(self.timer_label)

        layout.addStretch(1)

    def update_from_snapshot(self, snapshot: GameSnapshot) -> None:
        self.prize_label.setText(
            f"Valendo {format_prize(snapshot.current_prize)}  |  "
            f"Parar: {format_prize(snapshot.stop_prize)}  |  "
            f"Errar: {format_prize(snapshot.wrong_prize)}"
        )

        question = snapshot.question
        if question is None:
            self.question_label.setText(STALLED_MESSAGE if snapshot.stalled else LOADING_MESSAGE)
            for button in self.option_buttons:
                button.setText("")
                button.setEnabled(False)
        else:
            self.question_label.setText(renderer.render_inline(question.text))
            interactive = snapshot.status is GameStatus.PLAYING
            for index, button in enumerate(self.option_buttons):
                eliminated = index in snapshot.eliminated_options
                button.setText("" if eliminated else f"{_OPTION_LETTERS[index]}) {question.options[index]}")
                button.setEnabled(interactive and not eliminated)

        self._update_timer(snapshot.time_left)

    def _update_timer(self, time_left: int) -> None:
        self.timer_bar.setValue(max(0, min(self._time_limit, time_left)))
        self.timer_label.setText(f"{time_left}s")
        warning = time_left <= TIMER_WARNING_SECONDS
        if warning != self._warning_shown:
            self._warning_shown = warning
            self.timer_bar.setStyleSheet(Styles.get_timer_warning_style() if warning else "")
