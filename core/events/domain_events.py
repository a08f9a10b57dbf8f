""" Notify open views when tasks or their notes change"""
from PySide6.QtCore import QObject, Signal


class DomainEvents(QObject):
    tasks_changed = Signal(str)     # task_id
    notes_changed = Signal(str)     # task_id


# SINGLE global instance
domain_events = DomainEvents()
