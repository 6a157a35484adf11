"""Edit modal: title, deadline and completion of an existing task."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QCheckBox,
    QDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)

from todo_client.domain import edit_session
from todo_client.domain.edit_session import EditSession
from todo_client.ui.task_list.calendar_popup import pick_deadline
from todo_client.ui.task_list.icons import build_calendar_icon
from todo_client.utils import format_deadline_label


class TaskEditDialog(QDialog):
    """Stays open until the owner calls ``accept()`` after a successful save."""

    session_changed = pyqtSignal(object)  # EditSession
    save_requested = pyqtSignal(object)  # EditSession
    cancel_requested = pyqtSignal()

    def __init__(self, session: EditSession, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Edit Task")
        self.setModal(True)
        self.setMinimumWidth(360)
        self._session = session

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(10)

        layout.addWidget(QLabel("Title"))

        self.title_edit = QLineEdit(session.title)
        self.title_edit.setObjectName("taskInput")
        self.title_edit.setPlaceholderText("Task Title")
        self.title_edit.textEdited.connect(self._on_title_edited)
        self.title_edit.returnPressed.connect(self._on_save)
        layout.addWidget(self.title_edit)

        layout.addWidget(QLabel("Deadline"))

        self.deadline_btn = QPushButton("")
        self.deadline_btn.setObjectName("dueButton")
        self.deadline_btn.setFixedHeight(32)
        self.deadline_btn.setIcon(build_calendar_icon())
        self.deadline_btn.clicked.connect(self._pick_deadline)
        layout.addWidget(self.deadline_btn)

        self.completed_check = QCheckBox("Completed")
        self.completed_check.setChecked(session.completed)
        self.completed_check.toggled.connect(self._on_completed_toggled)
        layout.addWidget(self.completed_check)

        self.error_label = QLabel("")
        self.error_label.setObjectName("errorLabel")
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        btn_row = QHBoxLayout()
        btn_row.addStretch()

        cancel_btn = QPushButton("Cancel")
        cancel_btn.setObjectName("secondaryButton")
        cancel_btn.clicked.connect(self.reject)
        btn_row.addWidget(cancel_btn)

        self.save_btn = QPushButton("Save Changes")
        self.save_btn.setObjectName("primaryButton")
        self.save_btn.clicked.connect(self._on_save)
        btn_row.addWidget(self.save_btn)
        layout.addLayout(btn_row)

        self._refresh_deadline()

    def session(self) -> EditSession:
        return self._session

    def _set_session(self, session: EditSession) -> None:
        self._session = session
        self.session_changed.emit(session)

    def _on_title_edited(self, text: str):
        self._set_session(edit_session.set_title(self._session, text))

    def _on_completed_toggled(self, checked: bool):
        self._set_session(edit_session.set_completed(self._session, checked))

    def _pick_deadline(self):
        self._set_session(pick_deadline(self._session, self.deadline_btn))
        self._refresh_deadline()

    def _refresh_deadline(self):
        self.deadline_btn.setText(format_deadline_label(self._session.deadline))

    def _on_save(self):
        self.error_label.setVisible(False)
        self.save_requested.emit(self._session)

    def show_error(self, message: str) -> None:
        self.error_label.setText(message)
        self.error_label.setVisible(True)

    def reject(self):
        self.cancel_requested.emit()
        super().reject()
