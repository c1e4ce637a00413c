"""Helper functions for common dialog patterns in the game window."""

from __future__ import annotations

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QMessageBox, QWidget

from milhao_app.constants.ui_constants import CONFIRM_STOP_TEMPLATE, LIFELINE_LABELS
from milhao_app.core.models import CrowdVoteResult, ExpertHintResult, LifelineResult

_OPTION_LETTERS = "ABCD"


def _apply_optional_font(widget: QWidget, font_point_size: int | None) -> None:
    """Apply font size to a widget when requested."""
    if font_point_size is None or font_point_size <= 0:
        return

    font: QFont = widget.font()
    font.setPointSize(font_point_size)
    widget.setFont(font)


def confirm_stop(parent: QWidget, stop_amount: str) -> bool:
    """Ask the player whether to walk away with the stop prize.

    Args:
        parent: Parent widget for the dialog
        stop_amount: Formatted amount the player keeps when stopping

    Returns:
        True if the player confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        "Parar",
        CONFIRM_STOP_TEMPLATE.format(amount=stop_amount),
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def describe_lifeline_result(result: LifelineResult) -> str:
    """Human readable text for the crowd vote and expert hint popups."""
    if isinstance(result, CrowdVoteResult):
        return "\n".join(
            f"{_OPTION_LETTERS[index]}: {percent}%" for index, percent in enumerate(result.stats)
        )
    if isinstance(result, ExpertHintResult):
        return f"Eu acho que a resposta é a letra {_OPTION_LETTERS[result.suggestion]}."
    raise TypeError(f"Unsupported lifeline result: {result!r}")


def show_lifeline_result(parent: QWidget, result: LifelineResult) -> None:
    show_info(parent, LIFELINE_LABELS[result.kind.value], describe_lifeline_result(result))


def show_info(
    parent: QWidget,
    title: str,
    message: str,
    *,
    font_point_size: int | None = None,
) -> None:
    """Show information message box.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Message to display
        font_point_size: Optional font size override
    """
    box = QMessageBox(parent)
    box.setIcon(QMessageBox.Information)
    box.setWindowTitle(title)
    box.setText(message)
    box.setStandardButtons(QMessageBox.Ok)
    _apply_optional_font(box, font_point_size)
    box.exec()


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)


def show_error(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.critical(parent, title, message)
