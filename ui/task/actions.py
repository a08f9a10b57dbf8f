from __future__ import annotations

from PySide6.QtWidgets import QDialog, QMessageBox

from core.exceptions import BusinessRuleError, NotFoundError
from core.models import Task
from core.services.notes import TaskNoteService
from core.services.task import TaskFormService, TaskService
from ui.task.dialogs import TaskDetailDialog, TaskNotesDialog, TaskScheduleDialog


class TaskFormActions:
    _task_service: TaskService
    _task_form_service: TaskFormService
    _note_service: TaskNoteService

    def create_project(self):
        form_session = self._task_form_service.open_create(parent_task_id=None, is_project=True)
        dlg = TaskScheduleDialog(self, form_session=form_session, on_submit=self._task_form_service.submit)
        if dlg.exec() == QDialog.Accepted:
            self.reload_tasks()

    def create_subtask(self):
        parent = self._get_selected_task()
        if not parent:
            QMessageBox.information(self, "New task", "Please select a project or task.")
            return
        form_session = self._task_form_service.open_create(parent_task_id=parent.id)
        dlg = TaskScheduleDialog(self, form_session=form_session, on_submit=self._task_form_service.submit)
        if dlg.exec() == QDialog.Accepted:
            self.reload_tasks()

    def edit_task(self):
        task = self._get_selected_task()
        if not task:
            QMessageBox.information(self, "Edit task", "Please select a task.")
            return
        try:
            form_session = self._task_form_service.open_edit(task.id)
        except NotFoundError as exc:
            QMessageBox.warning(self, "Edit task", str(exc))
            self.reload_tasks()
            return
        dlg = TaskScheduleDialog(self, form_session=form_session, on_submit=self._task_form_service.submit)
        if dlg.exec() == QDialog.Accepted:
            self.reload_tasks()

    def show_details(self):
        task = self._get_selected_task()
        if not task:
            QMessageBox.information(self, "Details", "Please select a task.")
            return
        note = self._note_service.get_note(task.id)
        TaskDetailDialog(self, task=task, note=note).exec()

    def edit_notes(self):
        task = self._get_selected_task()
        if not task:
            QMessageBox.information(self, "Notes", "Please select a task.")
            return
        TaskNotesDialog(self, note_service=self._note_service, task_id=task.id).exec()

    def delete_task(self):
        task = self._get_selected_task()
        if not task:
            QMessageBox.information(self, "Delete task", "Please select a task.")
            return
        confirm = QMessageBox.question(
            self,
            "Delete task",
            f"Delete task '{task.title}' (and its subtasks and notes)?",
        )
        if confirm != QMessageBox.Yes:
            return
        try:
            self._task_service.delete_task(task.id)
        except (BusinessRuleError, NotFoundError) as exc:
            QMessageBox.warning(self, "Error", str(exc))
            return
        except Exception as exc:
            QMessageBox.critical(self, "Error", str(exc))
            return
        self.reload_tasks()

    def _get_selected_task(self) -> Task | None:
        raise NotImplementedError

    def reload_tasks(self) -> None:
        raise NotImplementedError
