from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QMessageBox,
    QTextEdit,
    QVBoxLayout,
)

from core.exceptions import DomainError
from core.services.notes import TaskNoteService
from ui.styles.ui_config import UIConfig as CFG


class TaskNotesDialog(QDialog):
    def __init__(self, parent=None, note_service: TaskNoteService | None = None, task_id: str = ""):
        super().__init__(parent)
        if note_service is None:
            raise ValueError("TaskNotesDialog needs a note service.")
        self.setWindowTitle("Task notes")
        self._note_service = note_service
        self._task_id = task_id

        self.notes_edit = QTextEdit()
        self.notes_edit.setSizePolicy(CFG.TEXTEDIT_POLICY)
        self.notes_edit.setMinimumHeight(CFG.NOTES_MIN_HEIGHT)
        self.notes_edit.setPlaceholderText("Notes for this task...")
        self.notes_edit.setPlainText(note_service.get_note(task_id))

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._save)
        buttons.rejected.connect(self.reject)

        layout = QVBoxLayout(self)
        layout.setSpacing(CFG.SPACING_MD)
        layout.setContentsMargins(CFG.MARGIN_MD, CFG.MARGIN_MD, CFG.MARGIN_MD, CFG.MARGIN_MD)
        layout.addWidget(self.notes_edit)
        layout.addWidget(buttons)

    @property
    def text(self) -> str:
        return self.notes_edit.toPlainText()

    def _save(self) -> None:
        try:
            self._note_service.save_note(self._task_id, self.text)
        except DomainError as exc:
            QMessageBox.warning(self, "Notes", str(exc))
            return
        except Exception as exc:
            QMessageBox.critical(self, "Notes", str(exc))
            return
        self.accept()
