from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from PySide6.QtCore import QDate, QEvent, QSignalBlocker
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDateEdit,
    QDialog,
    QDialogButtonBox,
    QDoubleSpinBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QSpinBox,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from core.models import Task, TaskPriority
from core.services.schedule.rules import (
    DESCRIPTION,
    DURATION_DAYS,
    END_DATE,
    ESTIMATED_HOURS,
    PRIORITY,
    START_DATE,
    TITLE,
)
from core.services.task.form import TaskFormSession
from infra.tracing import bind_trace_id
from ui.styles.ui_config import UIConfig as CFG


def _to_qdate(value: date) -> QDate:
    return QDate(value.year, value.month, value.day)


def _from_qdate(qd: QDate) -> date | None:
    if not qd.isValid():
        return None
    return date(qd.year(), qd.month(), qd.day())


class TaskScheduleDialog(QDialog):
    """Create/edit form for one task, bound to the session's schedule engine."""

    def __init__(
        self,
        parent=None,
        form_session: TaskFormSession | None = None,
        on_submit: Callable[[TaskFormSession], Optional[Task]] | None = None,
    ):
        super().__init__(parent)
        if form_session is None:
            raise ValueError("TaskScheduleDialog needs a form session.")
        self._session = form_session
        self._engine = form_session.engine
        self._on_submit = on_submit
        self.saved_task: Task | None = None

        kind = "Project" if form_session.is_project else "Task"
        self.setWindowTitle(kind + (" - Edit" if form_session.is_edit else " - New"))

        self.title_edit = QLineEdit()
        self.title_edit.setSizePolicy(CFG.INPUT_POLICY)
        self.title_edit.setFixedHeight(CFG.INPUT_HEIGHT)
        self.title_edit.setMinimumWidth(CFG.INPUT_MIN_WIDTH)

        self.desc_edit = QTextEdit()
        self.desc_edit.setSizePolicy(CFG.TEXTEDIT_POLICY)
        self.desc_edit.setMinimumHeight(CFG.TEXTEDIT_MIN_HEIGHT)
        self.desc_edit.installEventFilter(self)

        self.start_check = QCheckBox()
        self.start_check.setToolTip("Enable to set a start date")
        self.end_check = QCheckBox()
        self.end_check.setToolTip("Enable to set an end date")
        for chkbox in (self.start_check, self.end_check):
            chkbox.setSizePolicy(CFG.CHECKBOX_POLICY)
            chkbox.setFixedHeight(CFG.CHECKBOX_HEIGHT)

        self.start_date_edit = QDateEdit()
        self.end_date_edit = QDateEdit()
        today = QDate.currentDate()
        for date_edit in (self.start_date_edit, self.end_date_edit):
            date_edit.setSizePolicy(CFG.INPUT_POLICY)
            date_edit.setFixedHeight(CFG.INPUT_HEIGHT)
            date_edit.setMinimumWidth(CFG.INPUT_MIN_WIDTH)
            date_edit.setCalendarPopup(True)
            date_edit.setDisplayFormat(CFG.DATE_FORMAT)
            date_edit.setDate(today)

        self.duration_spin = QSpinBox()
        self.duration_spin.setSizePolicy(CFG.INPUT_POLICY)
        self.duration_spin.setFixedHeight(CFG.INPUT_HEIGHT)
        self.duration_spin.setMinimum(CFG.MIN_VALUE)
        self.duration_spin.setMaximum(CFG.DURATION_MAX)

        self.priority_combo = QComboBox()
        self.priority_combo.setSizePolicy(CFG.INPUT_POLICY)
        self.priority_combo.setFixedHeight(CFG.INPUT_HEIGHT)
        for p in TaskPriority:
            self.priority_combo.addItem(CFG.PRIORITY_LABELS[p.value], userData=p)

        self.hours_spin = QDoubleSpinBox()
        self.hours_spin.setSizePolicy(CFG.INPUT_POLICY)
        self.hours_spin.setFixedHeight(CFG.INPUT_HEIGHT)
        self.hours_spin.setMinimum(CFG.MIN_VALUE)
        self.hours_spin.setMaximum(CFG.HOURS_MAX)
        self.hours_spin.setDecimals(CFG.HOURS_DECIMALS)
        self.hours_spin.setSingleStep(CFG.HOURS_STEP)
        self.hours_spin.setAlignment(CFG.ALIGN_RIGHT)

        self._error_labels: dict[str, QLabel] = {}
        for name in (TITLE, DESCRIPTION, START_DATE, DURATION_DAYS, END_DATE, ESTIMATED_HOURS):
            label = QLabel("")
            label.setStyleSheet(CFG.ERROR_TEXT_STYLE)
            label.setWordWrap(True)
            label.setVisible(False)
            self._error_labels[name] = label

        self.bounds_label = QLabel(self._bounds_text())
        self.bounds_label.setStyleSheet(CFG.INFO_TEXT_STYLE)
        self.bounds_label.setVisible(bool(self.bounds_label.text()))

        self.form_error_label = QLabel("")
        self.form_error_label.setStyleSheet(CFG.ERROR_TEXT_STYLE)
        self.form_error_label.setWordWrap(True)
        self.form_error_label.setVisible(False)

        form = QFormLayout()
        form.setLabelAlignment(CFG.ALIGN_RIGHT | CFG.ALIGN_CENTER)
        form.setFormAlignment(CFG.ALIGN_TOP)
        form.setHorizontalSpacing(CFG.SPACING_MD)
        form.setVerticalSpacing(CFG.SPACING_SM)
        form.setFieldGrowthPolicy(QFormLayout.ExpandingFieldsGrow)
        form.setRowWrapPolicy(QFormLayout.DontWrapRows)

        form.addRow(CFG.TITLE_LABEL, self._with_error(self.title_edit, TITLE))
        form.addRow(CFG.DESCRIPTION_LABEL, self._with_error(self.desc_edit, DESCRIPTION))
        form.addRow(
            CFG.START_DATE_LABEL,
            self._with_error(self._checked_row(self.start_date_edit, self.start_check), START_DATE),
        )
        form.addRow(CFG.DURATION_LABEL, self._with_error(self.duration_spin, DURATION_DAYS))
        form.addRow(
            CFG.END_DATE_LABEL,
            self._with_error(self._checked_row(self.end_date_edit, self.end_check), END_DATE),
        )
        if not form_session.is_project:
            form.addRow(CFG.PRIORITY_LABEL, self.priority_combo)
        else:
            self.priority_combo.setVisible(False)
        form.addRow(CFG.ESTIMATED_HOURS_LABEL, self._with_error(self.hours_spin, ESTIMATED_HOURS))

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        buttons.setCenterButtons(False)

        layout = QVBoxLayout(self)
        layout.setSpacing(CFG.SPACING_LG)
        layout.setContentsMargins(CFG.MARGIN_MD, CFG.MARGIN_MD, CFG.MARGIN_MD, CFG.MARGIN_MD)
        layout.addWidget(self.bounds_label)
        layout.addLayout(form)
        layout.addWidget(self.form_error_label)
        layout.addWidget(buttons)

        self._sync_from_engine()
        self._connect_signals()
        self.setMinimumSize(self.sizeHint())

    # ---- layout helpers ----

    def _with_error(self, widget: QWidget, field_name: str) -> QWidget:
        box = QWidget()
        col = QVBoxLayout(box)
        col.setContentsMargins(0, 0, 0, 0)
        col.setSpacing(CFG.SPACING_XS)
        col.addWidget(widget)
        col.addWidget(self._error_labels[field_name])
        return box

    @staticmethod
    def _checked_row(date_edit: QDateEdit, check: QCheckBox) -> QWidget:
        box = QWidget()
        row = QHBoxLayout(box)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(CFG.SPACING_SM)
        row.addWidget(date_edit)
        row.addWidget(check)
        return box

    def _bounds_text(self) -> str:
        bounds = self._session.bounds
        if bounds.is_empty:
            return ""
        start = bounds.start.isoformat() if bounds.start else "any"
        end = bounds.end.isoformat() if bounds.end else "any"
        return f"Project dates: {start} to {end}"

    # ---- engine binding ----

    def _connect_signals(self) -> None:
        self.title_edit.textEdited.connect(lambda text: self._edit(TITLE, text))
        self.title_edit.editingFinished.connect(lambda: self._blur(TITLE))
        self.desc_edit.textChanged.connect(
            lambda: self._edit(DESCRIPTION, self.desc_edit.toPlainText())
        )

        self.start_check.toggled.connect(lambda _checked: self._edit_date(START_DATE))
        self.start_date_edit.dateChanged.connect(lambda _qd: self._edit_date(START_DATE))
        self.start_date_edit.editingFinished.connect(lambda: self._blur(START_DATE))
        self.end_check.toggled.connect(lambda _checked: self._edit_date(END_DATE))
        self.end_date_edit.dateChanged.connect(lambda _qd: self._edit_date(END_DATE))
        self.end_date_edit.editingFinished.connect(lambda: self._blur(END_DATE))

        self.duration_spin.valueChanged.connect(lambda value: self._edit(DURATION_DAYS, value))
        self.duration_spin.editingFinished.connect(lambda: self._blur(DURATION_DAYS))
        self.priority_combo.currentIndexChanged.connect(
            lambda _idx: self._edit(PRIORITY, self.priority_combo.currentData())
        )
        self.hours_spin.valueChanged.connect(lambda value: self._edit(ESTIMATED_HOURS, value))
        self.hours_spin.editingFinished.connect(lambda: self._blur(ESTIMATED_HOURS))

    def eventFilter(self, watched, event):
        if watched is self.desc_edit and event.type() == QEvent.FocusOut:
            self._blur(DESCRIPTION)
        return super().eventFilter(watched, event)

    def _edit(self, field_name: str, value) -> None:
        self._engine.set_field(field_name, value)
        self._sync_from_engine()

    def _edit_date(self, field_name: str) -> None:
        if field_name == START_DATE:
            check, editor = self.start_check, self.start_date_edit
        else:
            check, editor = self.end_check, self.end_date_edit
        editor.setEnabled(check.isChecked())
        value = _from_qdate(editor.date()) if check.isChecked() else None
        self._edit(field_name, value)

    def _blur(self, field_name: str) -> None:
        self._engine.blur(field_name)
        self._refresh_errors()

    def _sync_from_engine(self) -> None:
        state = self._engine.snapshot()
        blockers = [
            QSignalBlocker(w)
            for w in (
                self.title_edit,
                self.desc_edit,
                self.start_check,
                self.start_date_edit,
                self.end_check,
                self.end_date_edit,
                self.duration_spin,
                self.priority_combo,
                self.hours_spin,
            )
        ]
        try:
            if self.title_edit.text() != state.title:
                self.title_edit.setText(state.title)
            if self.desc_edit.toPlainText() != state.description:
                self.desc_edit.setPlainText(state.description)
            self._set_date(self.start_check, self.start_date_edit, state.start_date)
            self._set_date(self.end_check, self.end_date_edit, state.end_date)
            self.duration_spin.setValue(state.duration_days)
            idx = self.priority_combo.findData(state.priority)
            if idx >= 0:
                self.priority_combo.setCurrentIndex(idx)
            self.hours_spin.setValue(state.estimated_hours)
        finally:
            del blockers
        self._refresh_errors()

    @staticmethod
    def _set_date(check: QCheckBox, editor: QDateEdit, value: date | None) -> None:
        check.setChecked(value is not None)
        editor.setEnabled(value is not None)
        if value is not None:
            editor.setDate(_to_qdate(value))

    def _refresh_errors(self) -> None:
        visible = self._engine.visible_errors()
        for name, label in self._error_labels.items():
            message = visible.get(name, "")
            label.setText(message)
            label.setVisible(bool(message))
        self.form_error_label.setText(self._session.form_error)
        self.form_error_label.setVisible(bool(self._session.form_error))

    # ---- submit ----

    def _on_accept(self) -> None:
        if self._on_submit is None:
            errors = self._engine.validate_all()
            self._refresh_errors()
            if not any(errors.values()):
                self.accept()
            return

        with bind_trace_id():
            task = self._on_submit(self._session)
        self._refresh_errors()
        if task is not None:
            self.saved_task = task
            self.accept()
