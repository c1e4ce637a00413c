"""Qt main window for playing the game on the desktop."""

from __future__ import annotations

from PySide6.QtCore import QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from milhao_app.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from milhao_app.constants.game_constants import TIME_LIMIT_SECONDS
from milhao_app.constants.ui_constants import (
    BUTTON_ABOUT,
    BUTTON_HELP,
    BUTTON_RESTART,
    BUTTON_STOP,
    END_SUBTITLES,
    END_TITLES,
    SNAPSHOT_REFRESH_INTERVAL_MS,
    WINDOW_TITLE,
)
from milhao_app.core.game_manager import GameManager
from milhao_app.core.models import GameSnapshot, GameStatus, LifelineKind, LifelineResult
from milhao_app.core.prize_ladder import format_prize
from milhao_app.styling.styles import Styles
from milhao_app.ui.components.lifeline_bar import LifelineBar
from milhao_app.ui.components.money_ladder_panel import MoneyLadderPanel
from milhao_app.ui.components.question_panel import QuestionPanel
from milhao_app.ui.dialog_helpers import confirm_stop, show_info, show_lifeline_result, show_warning


class GameWindow(QMainWindow):
    """Main Qt window rendering game snapshots and forwarding player intents."""

    def __init__(
        self,
        game_manager: GameManager,
        player_url: str | None = None,
        time_limit: int = TIME_LIMIT_SECONDS,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.game_manager = game_manager
        self.player_url = player_url
        self._time_limit = time_limit

        self._dialog_open = False
        self._shown_lifeline_result: LifelineResult | None = None
        self._end_announced = False

        self._build_ui()
        self._configure_refresh_timer()
        self.setStyleSheet(Styles.get_main_window_style())

        if not self.game_manager.get_snapshot().is_started:
            self._start_new_game()
        self._refresh_state()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_button_row(root_layout)

        body = QHBoxLayout()
        play_column = QVBoxLayout()
        self.question_panel = QuestionPanel(self._time_limit, on_answer=self._handle_answer, parent=self)
        self.lifeline_bar = LifelineBar(on_use=self._handle_lifeline, parent=self)
        play_column.addWidget(self.question_panel, 1)
        play_column.addWidget(self.lifeline_bar)
        body.addLayout(play_column, 3)

        self.ladder_panel = MoneyLadderPanel(parent=self)
        body.addWidget(self.ladder_panel, 1)
        root_layout.addLayout(body, 1)

        if self.player_url:
            url_label = QLabel(f"Jogue também pelo navegador: {self.player_url}", self)
            root_layout.addWidget(url_label)

    def _build_button_row(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.stop_button = QPushButton(BUTTON_STOP, self)
        self.stop_button.clicked.connect(self._handle_stop)
        button_row.addWidget(self.stop_button)

        self.restart_button = QPushButton(BUTTON_RESTART, self)
        self.restart_button.clicked.connect(self._start_new_game)
        button_row.addWidget(self.restart_button)

        button_row.addStretch(1)

        self.about_button = QPushButton(BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(BUTTON_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        layout.addLayout(button_row)

    def _configure_refresh_timer(self) -> None:
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(SNAPSHOT_REFRESH_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self._refresh_state)
        self.refresh_timer.start()

    def _refresh_state(self) -> None:
        snapshot = self.game_manager.get_snapshot()
        playing = snapshot.status is GameStatus.PLAYING
        # Games restarted from the browser never pass through _start_new_game
        if playing and snapshot.is_started:
            self._end_announced = False

        self.question_panel.update_from_snapshot(snapshot)
        self.lifeline_bar.update_lifelines(snapshot.lifelines, interactive=playing and snapshot.question is not None)
        self.ladder_panel.set_current_level(snapshot.current_level)
        self.stop_button.setEnabled(playing and snapshot.is_started)
        self.restart_button.setEnabled(not playing or not snapshot.is_started)

        # Modal dialogs spin a nested event loop that keeps this timer firing
        if self._dialog_open:
            return
        if snapshot.is_finished:
            self._announce_end(snapshot)
        elif snapshot.lifeline_result is not None and snapshot.lifeline_result is not self._shown_lifeline_result:
            self._show_lifeline_popup(snapshot.lifeline_result)

    def _show_lifeline_popup(self, result: LifelineResult) -> None:
        self._shown_lifeline_result = result
        self._dialog_open = True
        try:
            show_lifeline_result(self, result)
        finally:
            self._dialog_open = False
        self.game_manager.close_lifeline_modal()

    def _announce_end(self, snapshot: GameSnapshot) -> None:
        if self._end_announced:
            return
        self._end_announced = True

        lines = []
        if snapshot.end_reason is not None:
            lines.append(END_SUBTITLES[snapshot.end_reason.value])
        lines.append(f"Você leva {format_prize(snapshot.accumulated_money)}.")
        if snapshot.reached_title:
            lines.append(f"Título alcançado: {snapshot.reached_title}")
        question = snapshot.question
        if snapshot.status is GameStatus.LOST and question is not None:
            lines.append(f"Resposta certa: {question.options[question.correct_option_index]}")
            if question.correct_details:
                lines.append(question.correct_details)

        self._dialog_open = True
        try:
            show_info(self, END_TITLES[snapshot.status.value], "\n".join(lines))
        finally:
            self._dialog_open = False

    def _start_new_game(self) -> None:
        self._end_announced = False
        self._shown_lifeline_result = None
        if not self.game_manager.start_game():
            show_warning(self, WINDOW_TITLE, "Nenhuma pergunta disponível para começar o jogo.")
        self._refresh_state()

    def _handle_answer(self, option_index: int) -> None:
        self.game_manager.answer(option_index)
        self._refresh_state()

    def _handle_lifeline(self, kind: LifelineKind) -> None:
        if not self.game_manager.use_lifeline(kind):
            show_warning(self, WINDOW_TITLE, "Esta ajuda não pode ser usada agora.")
        self._refresh_state()

    def _handle_stop(self) -> None:
        snapshot = self.game_manager.get_snapshot()
        if snapshot.status is not GameStatus.PLAYING:
            return
        if confirm_stop(self, format_prize(snapshot.stop_prize)):
            self.game_manager.stop()
        self._refresh_state()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"Sobre {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME}: ajuda", HELP_TEXT)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.refresh_timer.stop()
        super().closeEvent(event)
