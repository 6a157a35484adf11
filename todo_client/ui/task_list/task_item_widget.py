"""Single task row widget."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from todo_client.domain.models import Task
from todo_client.utils import format_deadline_label


class _ClickableLabel(QLabel):
    clicked = pyqtSignal()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
        super().mousePressEvent(event)


class TaskItemWidget(QFrame):
    """Row: clicking the title toggles completion; Edit and Delete buttons on the right."""

    toggle_requested = pyqtSignal(object)
    edit_requested = pyqtSignal(object)
    delete_requested = pyqtSignal(object)

    def __init__(self, task: Task, parent=None):
        super().__init__(parent)
        self.task_id = task.id

        self.setMinimumHeight(46)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 8, 8)
        layout.setSpacing(8)

        text_container = QWidget()
        text_layout = QVBoxLayout(text_container)
        text_layout.setContentsMargins(0, 0, 0, 0)
        text_layout.setSpacing(2)

        self.title_label = _ClickableLabel()
        self.title_label.setWordWrap(True)
        self.title_label.setCursor(Qt.CursorShape.PointingHandCursor)
        self.title_label.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        self.title_label.clicked.connect(self._on_title_clicked)
        text_layout.addWidget(self.title_label)

        self.deadline_label = QLabel()
        self.deadline_label.setObjectName("taskDeadline")
        text_layout.addWidget(self.deadline_label)

        layout.addWidget(text_container, 1)

        self.edit_btn = QPushButton("Edit")
        self.edit_btn.setObjectName("rowButton")
        self.edit_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.edit_btn.clicked.connect(lambda: self.edit_requested.emit(self.task_id))
        layout.addWidget(self.edit_btn)

        self.delete_btn = QPushButton("Delete")
        self.delete_btn.setObjectName("rowDangerButton")
        self.delete_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.delete_btn.clicked.connect(lambda: self.delete_requested.emit(self.task_id))
        layout.addWidget(self.delete_btn)

        self.set_task(task)

    def set_task(self, task: Task):
        self.title_label.setText(task.title)
        self.deadline_label.setText(format_deadline_label(task.deadline))
        self.deadline_label.setProperty("overdue", task.is_overdue)
        self.setToolTip(task.description)
        self._apply_done_style(task.completed)

    def _on_title_clicked(self):
        self.toggle_requested.emit(self.task_id)

    def _apply_done_style(self, done: bool):
        # Style states are driven by object names consumed by QSS.
        self.setObjectName("taskItemDone" if done else "taskItem")
        self.title_label.setObjectName("taskTitleDone" if done else "taskTitle")
        for widget in (self.title_label, self.deadline_label, self):
            widget.style().unpolish(widget)
            widget.style().polish(widget)
