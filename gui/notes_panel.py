"""Notes panel listing note cards with add/edit/delete actions.

Updates:
  v0.2.1 - 2026-10-19 - Deliver save results only to the dialog that issued them.
  v0.2.0 - 2026-10-18 - Drive all actions through NotesWorkspace intents off the GUI thread.
  v0.1.0 - 2026-10-14 - Initial implementation with card list and CRUD buttons.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core import NoteCollectionError

from .dialogs import NoteDialog

if TYPE_CHECKING:
    from collections.abc import Callable

    from core import NotesWorkspace
    from core.view import NoteCard
    from models.note import Note, NoteDraft

    from .async_runner import AsyncRunner

logger = logging.getLogger("notes_client.gui.notes_panel")

_BODY_PREVIEW_CHARS = 160


def _card_text(card: NoteCard) -> str:
    body = card.body.strip()
    if len(body) > _BODY_PREVIEW_CHARS:
        body = body[: _BODY_PREVIEW_CHARS - 1].rstrip() + "…"
    lines = [card.title or "Untitled note"]
    if body:
        lines.append(body)
    lines.append(card.footer)
    return "\n".join(lines)


class NotesPanel(QWidget):
    """Display note cards and raise workspace intents."""

    collection_changed = Signal(object)

    def __init__(
        self,
        workspace: NotesWorkspace,
        runner: AsyncRunner,
        parent: QWidget | None = None,
        *,
        status_callback: Callable[[str, int], None] | None = None,
    ) -> None:
        super().__init__(parent)
        self._workspace = workspace
        self._runner = runner
        self._status_callback = status_callback
        self._dialog: NoteDialog | None = None
        self._list = QListWidget(self)
        self._empty_label = QLabel("No notes yet. Add one to get started.", self)
        self._build_ui()
        # Store listeners fire on the loop thread; the signal hops to the GUI thread.
        self.collection_changed.connect(lambda _: self.render())  # type: ignore[arg-type]
        self._subscription = workspace.store.subscribe(self.collection_changed.emit)

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        controls = QHBoxLayout()
        self._add_button = QPushButton("Add a new note", self)
        self._add_button.clicked.connect(self.request_create)  # type: ignore[arg-type]
        self._edit_button = QPushButton("Edit", self)
        self._edit_button.setEnabled(False)
        self._edit_button.clicked.connect(self._on_edit_clicked)  # type: ignore[arg-type]
        self._delete_button = QPushButton("Delete", self)
        self._delete_button.setEnabled(False)
        self._delete_button.clicked.connect(self._on_delete_clicked)  # type: ignore[arg-type]
        self._refresh_button = QPushButton("Refresh", self)
        self._refresh_button.clicked.connect(self.load)  # type: ignore[arg-type]
        controls.addWidget(self._add_button)
        controls.addWidget(self._edit_button)
        controls.addWidget(self._delete_button)
        controls.addStretch(1)
        controls.addWidget(self._refresh_button)
        layout.addLayout(controls)

        self._list.setAlternatingRowColors(True)
        self._list.setWordWrap(True)
        self._list.setSpacing(4)
        self._list.itemSelectionChanged.connect(self._on_selection_changed)  # type: ignore[arg-type]
        self._list.itemDoubleClicked.connect(lambda _: self._on_edit_clicked())  # type: ignore[arg-type]
        layout.addWidget(self._list, 1)
        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._empty_label)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> None:
        """Rebuild the card list from the workspace view, keeping the selection."""
        view = self._workspace.view()
        selected = self.selected_note_id()
        self._list.clear()
        for card in view.cards:
            item = QListWidgetItem(_card_text(card), self._list)
            item.setData(Qt.ItemDataRole.UserRole, card.key)
            if card.key == selected:
                self._list.setCurrentItem(item)
        self._empty_label.setVisible(view.is_empty)
        self._on_selection_changed()

    def selected_note_id(self) -> str | None:
        item = self._list.currentItem()
        if item is None:
            return None
        raw_id = item.data(Qt.ItemDataRole.UserRole)
        return str(raw_id) if raw_id else None

    def _on_selection_changed(self) -> None:
        has_selection = self.selected_note_id() is not None
        self._edit_button.setEnabled(has_selection)
        self._delete_button.setEnabled(has_selection)

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Reload the collection from the notes service."""
        self._refresh_button.setEnabled(False)
        self._runner.submit(
            self._workspace.refresh(),
            on_success=lambda _: self._on_load_finished(),
            on_error=self._on_load_failed,
        )

    def _on_load_finished(self) -> None:
        self._refresh_button.setEnabled(True)
        self.render()

    def _on_load_failed(self, error: BaseException) -> None:
        self._refresh_button.setEnabled(True)
        self._report_failure(error)

    def request_create(self) -> None:
        if not self._workspace.request_create():
            self._show_status("Finish the open note first.")
            return
        self._open_dialog()

    def request_edit(self, note_id: str) -> None:
        if not self._workspace.request_edit(note_id):
            self._show_status("Finish the open note first.")
            return
        self._open_dialog()

    def _on_edit_clicked(self) -> None:
        note_id = self.selected_note_id()
        if note_id is None:
            QMessageBox.information(self, "Edit note", "Select a note first.")
            return
        self.request_edit(note_id)

    def _on_delete_clicked(self) -> None:
        note_id = self.selected_note_id()
        if note_id is None:
            QMessageBox.information(self, "Delete note", "Select a note first.")
            return
        confirmation = QMessageBox.question(
            self,
            "Delete note",
            "Delete the selected note?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if confirmation != QMessageBox.StandardButton.Yes:
            return
        self.request_delete(note_id)

    def request_delete(self, note_id: str) -> None:
        self._delete_button.setEnabled(False)
        self._runner.submit(
            self._workspace.request_delete(note_id),
            on_success=lambda _: self.render(),
            on_error=self._on_delete_failed,
        )

    def _on_delete_failed(self, error: BaseException) -> None:
        self._on_selection_changed()
        self._report_failure(error)

    # ------------------------------------------------------------------
    # Dialog session
    # ------------------------------------------------------------------

    def _open_dialog(self) -> None:
        view = self._workspace.view().dialog
        if view is None:  # pragma: no cover - request_* just opened a session
            return
        dialog = NoteDialog(view, self)
        dialog.save_requested.connect(self._on_save_requested)  # type: ignore[arg-type]
        dialog.rejected.connect(partial(self._on_dialog_rejected, dialog))  # type: ignore[arg-type]
        self._dialog = dialog
        dialog.open()

    def _on_save_requested(self, draft: NoteDraft) -> None:
        dialog = self._dialog
        if dialog is None:  # pragma: no cover - save only comes from an open dialog
            return
        self._runner.submit(
            self._workspace.submit_dialog(draft),
            on_success=partial(self._on_saved, dialog),
            on_error=partial(self._on_save_failed, dialog),
        )

    def _on_saved(self, dialog: NoteDialog, note: Note) -> None:
        self.render()
        logger.debug("Saved note %s", note.id)
        if dialog is not self._dialog:
            return
        self._dialog = None
        dialog.accept()
        dialog.deleteLater()

    def _on_save_failed(self, dialog: NoteDialog, error: BaseException) -> None:
        if dialog is self._dialog:
            dialog.show_error(str(error))
        self._report_failure(error)

    def _on_dialog_rejected(self, dialog: NoteDialog) -> None:
        dialog.deleteLater()
        if dialog is not self._dialog:
            return
        self._dialog = None
        self._workspace.dismiss_dialog()

    # ------------------------------------------------------------------
    # Feedback
    # ------------------------------------------------------------------

    def _report_failure(self, error: BaseException) -> None:
        # Collection failures already reached the notification centre.
        if isinstance(error, NoteCollectionError):
            return
        logger.error("Unexpected notes failure", exc_info=error)
        self._show_status(str(error), 6000)

    def _show_status(self, message: str, duration_ms: int = 3000) -> None:
        if self._status_callback is not None:
            self._status_callback(message, duration_ms)

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt naming
        self._subscription.close()
        super().closeEvent(event)


__all__ = ["NotesPanel"]
