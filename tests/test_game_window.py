"""Tests for the desktop window's end-of-game announcements."""

import os
import random

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from milhao_app.core.game_manager import GameManager
from milhao_app.ui import game_window


@pytest.fixture(scope="module")
def qt_app():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def announcements(monkeypatch):
    shown = []
    monkeypatch.setattr(game_window, "show_info", lambda parent, title, text: shown.append(title))
    return shown


@pytest.fixture
def window(qt_app, pool, announcements):
    manager = GameManager(pool, rng=random.Random(5), timer_interval=60)
    main_window = game_window.GameWindow(manager)
    main_window.refresh_timer.stop()
    yield main_window
    main_window.close()
    manager.shutdown()


def test_end_is_announced_once(window, announcements):
    window.game_manager.stop()
    window._refresh_state()
    window._refresh_state()
    assert len(announcements) == 1


def test_game_restarted_elsewhere_is_announced_again(window, announcements):
    window.game_manager.stop()
    window._refresh_state()

    # Restart through the manager, as the browser page does
    assert window.game_manager.start_game()
    window._refresh_state()
    window.game_manager.stop()
    window._refresh_state()
    assert len(announcements) == 2
