"""Dialog for creating and editing notes.

Updates:
  v0.2.1 - 2026-10-19 - Ignore Esc and Cancel while a save is in flight.
  v0.2.0 - 2026-10-18 - Stay open while saving and show save failures inline.
  v0.1.0 - 2026-10-14 - Title/body note dialog driven by a DialogView.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

from models.note import NoteDraft

if TYPE_CHECKING:
    from core.view import DialogView


class NoteDialog(QDialog):
    """Modal dialog collecting a note title and body.

    Pressing Save emits :attr:`save_requested` instead of closing; the owner
    closes the dialog once the note has been stored, or calls
    :meth:`show_error` so the user can retry or cancel.
    """

    save_requested = Signal(object)

    def __init__(self, view: DialogView, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._busy = False
        self._view = view
        self.setWindowTitle(view.heading)
        self.setModal(True)
        self.resize(520, 360)
        self._build_ui()
        self._title_input.setText(view.title)
        self._body_input.setPlainText(view.body)

    @property
    def view(self) -> DialogView:
        return self._view

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("Title", self))
        self._title_input = QLineEdit(self)
        self._title_input.setPlaceholderText("Title")
        layout.addWidget(self._title_input)

        layout.addWidget(QLabel("Text", self))
        self._body_input = QPlainTextEdit(self)
        self._body_input.setPlaceholderText("Text")
        self._body_input.setMinimumHeight(180)
        layout.addWidget(self._body_input)

        self._error_label = QLabel(self)
        self._error_label.setWordWrap(True)
        self._error_label.setStyleSheet("color: #b00020;")
        self._error_label.hide()
        layout.addWidget(self._error_label)

        self._buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel,
            self,
        )
        self._buttons.accepted.connect(self._on_save)  # type: ignore[arg-type]
        self._buttons.rejected.connect(self.reject)  # type: ignore[arg-type]
        layout.addWidget(self._buttons)

    def draft(self) -> NoteDraft:
        """Return the current form contents."""
        return NoteDraft(
            title=self._title_input.text().strip(),
            body=self._body_input.toPlainText(),
        )

    def _on_save(self) -> None:
        draft = self.draft()
        if not draft.title:
            self.show_error("Enter a title before saving.")
            return
        self._set_busy(True)
        self._error_label.hide()
        self.save_requested.emit(draft)

    def _set_busy(self, busy: bool) -> None:
        self._busy = busy
        self._buttons.setEnabled(not busy)
        self._title_input.setReadOnly(busy)
        self._body_input.setReadOnly(busy)

    def reject(self) -> None:
        """Cancel the dialog unless a save is still in flight."""
        if self._busy:
            return
        super().reject()

    def show_error(self, message: str) -> None:
        """Display *message* and re-enable the form."""
        self._set_busy(False)
        self._error_label.setText(message)
        self._error_label.show()


__all__ = ["NoteDialog"]
