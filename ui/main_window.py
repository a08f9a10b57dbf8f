# ui/main_window.py
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core.events.domain_events import domain_events
from core.models import Task
from infra.version import get_app_version
from ui.styles.ui_config import UIConfig as CFG
from ui.task.actions import TaskFormActions


class MainWindow(QMainWindow, TaskFormActions):
    """Project picker plus every task under the selected project, indented by depth."""

    def __init__(self, services: dict[str, object], parent: QWidget | None = None):
        super().__init__(parent)
        self.services: dict[str, object] = services
        self._task_service = services["task_service"]
        self._task_form_service = services["task_form_service"]
        self._note_service = services["note_service"]

        self.setWindowTitle(f"Task Schedule Lite {get_app_version()}")
        self.resize(720, 480)

        self.project_combo = QComboBox()
        self.project_combo.setSizePolicy(CFG.INPUT_POLICY)
        self.project_combo.setFixedHeight(CFG.INPUT_HEIGHT)
        self.project_combo.currentIndexChanged.connect(lambda _idx: self._reload_children())

        self.task_list = QListWidget()
        self.task_list.itemDoubleClicked.connect(lambda _item: self.show_details())

        self.btn_new_project = QPushButton("New project")
        self.btn_new_task = QPushButton("New task")
        self.btn_edit = QPushButton("Edit")
        self.btn_details = QPushButton("Details")
        self.btn_notes = QPushButton("Notes")
        self.btn_delete = QPushButton("Delete")
        self.btn_new_project.clicked.connect(self.create_project)
        self.btn_new_task.clicked.connect(self.create_subtask)
        self.btn_edit.clicked.connect(self.edit_task)
        self.btn_details.clicked.connect(self.show_details)
        self.btn_notes.clicked.connect(self.edit_notes)
        self.btn_delete.clicked.connect(self.delete_task)

        top = QHBoxLayout()
        top.setSpacing(CFG.SPACING_SM)
        top.addWidget(QLabel("Project:"))
        top.addWidget(self.project_combo)

        buttons = QHBoxLayout()
        buttons.setSpacing(CFG.SPACING_SM)
        for btn in (
            self.btn_new_project,
            self.btn_new_task,
            self.btn_edit,
            self.btn_details,
            self.btn_notes,
            self.btn_delete,
        ):
            buttons.addWidget(btn)
        buttons.addStretch()

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(CFG.MARGIN_MD, CFG.MARGIN_MD, CFG.MARGIN_MD, CFG.MARGIN_MD)
        layout.setSpacing(CFG.SPACING_SM)
        layout.addLayout(top)
        layout.addLayout(buttons)
        layout.addWidget(self.task_list)
        self.setCentralWidget(central)

        domain_events.tasks_changed.connect(lambda _task_id: self.reload_tasks())
        self.reload_tasks()

    def reload_tasks(self) -> None:
        current_id = self.project_combo.currentData()
        self.project_combo.blockSignals(True)
        self.project_combo.clear()
        for project in self._task_service.list_projects():
            self.project_combo.addItem(project.title, userData=project.id)
        idx = self.project_combo.findData(current_id)
        self.project_combo.setCurrentIndex(idx if idx >= 0 else 0)
        self.project_combo.blockSignals(False)
        self._reload_children()

    def _reload_children(self) -> None:
        self.task_list.clear()
        project_id = self.project_combo.currentData()
        if not project_id:
            return
        for depth, task in self._task_service.list_descendants(project_id):
            span = f"{task.start_date or '?'} to {task.end_date or '?'}"
            indent = "    " * (depth - 1)
            item = QListWidgetItem(f"{indent}{task.title}  ({span}, {task.duration_days} d)")
            item.setData(Qt.UserRole, task.id)
            self.task_list.addItem(item)

    def _get_selected_task(self) -> Task | None:
        item = self.task_list.currentItem()
        task_id = item.data(Qt.UserRole) if item is not None else self.project_combo.currentData()
        if not task_id:
            return None
        return self._task_service.get_task(task_id)
