from __future__ import annotations

from datetime import date

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QVBoxLayout,
)

from core.models import Task
from ui.styles.ui_config import UIConfig as CFG


def _fmt_date(value: date | None) -> str:
    return value.isoformat() if value else "-"


class TaskDetailDialog(QDialog):
    """Read-only summary of one task and its note."""

    def __init__(self, parent=None, task: Task | None = None, note: str = ""):
        super().__init__(parent)
        if task is None:
            raise ValueError("TaskDetailDialog needs a task.")
        self.setWindowTitle(f"Task - {task.title}")

        title = QLabel(task.title)
        title.setStyleSheet("font-weight: bold; font-size: 11pt;")
        title.setWordWrap(True)

        description = QLabel(task.description or "-")
        description.setWordWrap(True)

        form = QFormLayout()
        form.setLabelAlignment(CFG.ALIGN_RIGHT | CFG.ALIGN_CENTER)
        form.setHorizontalSpacing(CFG.SPACING_MD)
        form.setVerticalSpacing(CFG.SPACING_SM)
        form.addRow(CFG.DESCRIPTION_LABEL, description)
        form.addRow(CFG.START_DATE_LABEL, QLabel(_fmt_date(task.start_date)))
        form.addRow(CFG.END_DATE_LABEL, QLabel(_fmt_date(task.end_date)))
        form.addRow(CFG.DURATION_LABEL, QLabel(str(task.duration_days)))
        if not task.is_project:
            form.addRow(CFG.PRIORITY_LABEL, QLabel(CFG.PRIORITY_LABELS[task.priority.value]))
        form.addRow(CFG.ESTIMATED_HOURS_LABEL, QLabel(f"{task.estimated_hours:g}"))
        if note.strip():
            note_label = QLabel(note)
            note_label.setWordWrap(True)
            note_label.setStyleSheet(CFG.INFO_TEXT_STYLE)
            form.addRow("Notes:", note_label)

        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        buttons.rejected.connect(self.reject)

        layout = QVBoxLayout(self)
        layout.setSpacing(CFG.SPACING_MD)
        layout.setContentsMargins(CFG.MARGIN_MD, CFG.MARGIN_MD, CFG.MARGIN_MD, CFG.MARGIN_MD)
        layout.addWidget(title)
        layout.addLayout(form)
        layout.addWidget(buttons)
