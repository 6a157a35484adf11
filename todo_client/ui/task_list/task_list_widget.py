"""Task list pane: creation form, filter bar and the filtered task list."""

from __future__ import annotations

from PyQt6.QtCore import QSize, Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from todo_client.application.state import AppState, visible_tasks
from todo_client.domain import edit_session
from todo_client.domain.edit_session import EditSession
from todo_client.domain.models import FilterMode, SessionMode
from todo_client.ui.task_list.calendar_popup import pick_deadline
from todo_client.ui.task_list.icons import build_calendar_icon
from todo_client.ui.task_list.task_item_widget import TaskItemWidget
from todo_client.utils import format_deadline_label

_FILTER_LABELS = (
    (FilterMode.ALL, "All"),
    (FilterMode.COMPLETED, "Completed"),
    (FilterMode.PENDING, "Pending"),
)


class _TitleInput(QLineEdit):
    focused = pyqtSignal()

    def focusInEvent(self, event):
        super().focusInEvent(event)
        self.focused.emit()


class TaskListWidget(QWidget):
    """Renders an ``AppState`` and reports user intents as signals."""

    session_changed = pyqtSignal(object)  # EditSession
    add_requested = pyqtSignal(object)  # EditSession
    cancel_requested = pyqtSignal()
    filter_changed = pyqtSignal(object)  # FilterMode
    toggle_requested = pyqtSignal(object)
    edit_requested = pyqtSignal(object)
    delete_requested = pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._session: EditSession = edit_session.IDLE_SESSION
        self._task_widgets: dict[object, TaskItemWidget] = {}

        self.setObjectName("taskListRoot")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 0, 14, 14)
        layout.setSpacing(0)

        form = QWidget()
        form_layout = QVBoxLayout(form)
        form_layout.setContentsMargins(0, 0, 0, 0)
        form_layout.setSpacing(8)

        self.input_field = _TitleInput()
        self.input_field.setObjectName("taskInput")
        self.input_field.setPlaceholderText("Task Title")
        self.input_field.focused.connect(self._on_input_focused)
        self.input_field.textEdited.connect(self._on_title_edited)
        self.input_field.returnPressed.connect(self._on_add_clicked)
        form_layout.addWidget(self.input_field)

        self.calendar_btn = QPushButton("")
        self.calendar_btn.setObjectName("dueButton")
        self.calendar_btn.setFixedHeight(32)
        self.calendar_btn.setIcon(build_calendar_icon())
        self.calendar_btn.setIconSize(QSize(14, 14))
        self.calendar_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.calendar_btn.clicked.connect(self._on_pick_deadline)
        form_layout.addWidget(self.calendar_btn)

        button_row = QHBoxLayout()
        button_row.setSpacing(6)
        self.add_btn = QPushButton("Add Task")
        self.add_btn.setObjectName("primaryButton")
        self.add_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.add_btn.clicked.connect(self._on_add_clicked)
        button_row.addWidget(self.add_btn, 1)

        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.setObjectName("secondaryButton")
        self.cancel_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.cancel_btn.clicked.connect(self._on_cancel_clicked)
        button_row.addWidget(self.cancel_btn)
        form_layout.addLayout(button_row)

        layout.addWidget(form)
        layout.addSpacing(14)

        filter_row = QHBoxLayout()
        filter_row.setSpacing(6)
        self._filter_buttons: dict[FilterMode, QPushButton] = {}
        for mode, label in _FILTER_LABELS:
            button = QPushButton(label)
            button.setObjectName("filterButton")
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            button.clicked.connect(lambda _checked=False, m=mode: self.filter_changed.emit(m))
            filter_row.addWidget(button)
            self._filter_buttons[mode] = button
        filter_row.addStretch()
        layout.addLayout(filter_row)
        layout.addSpacing(8)

        self.counter_label = QLabel()
        self.counter_label.setObjectName("counterLabel")
        layout.addWidget(self.counter_label)
        layout.addSpacing(4)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self.task_container = QWidget()
        self.task_layout = QVBoxLayout(self.task_container)
        self.task_layout.setContentsMargins(0, 0, 0, 0)
        self.task_layout.setSpacing(6)
        self.task_layout.addStretch()
        self.scroll_area.setWidget(self.task_container)
        layout.addWidget(self.scroll_area, 1)

        self.empty_label = QLabel("No tasks")
        self.empty_label.setObjectName("emptyLabel")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.task_layout.insertWidget(0, self.empty_label)

    # ── rendering ──────────────────────────────────────

    def render(self, state: AppState):
        self.render_session(state.session)
        self._render_filters(state.filter_mode)
        self._render_tasks(state)

    def render_session(self, session: EditSession):
        self._session = session
        creating = session.mode == SessionMode.CREATING
        title = session.title if creating else ""
        if self.input_field.text() != title:
            self.input_field.setText(title)
        self.calendar_btn.setText(format_deadline_label(session.deadline) if creating else "Pick a deadline")
        self.calendar_btn.setToolTip("Deadline")
        self.cancel_btn.setVisible(creating)

    def _render_filters(self, active: FilterMode):
        for mode, button in self._filter_buttons.items():
            button.setProperty("active", mode == active)
            button.style().unpolish(button)
            button.style().polish(button)

    def _render_tasks(self, state: AppState):
        for widget in self._task_widgets.values():
            self.task_layout.removeWidget(widget)
            widget.deleteLater()
        self._task_widgets.clear()

        shown = visible_tasks(state)
        for task in shown:
            widget = TaskItemWidget(task)
            widget.toggle_requested.connect(self.toggle_requested.emit)
            widget.edit_requested.connect(self.edit_requested.emit)
            widget.delete_requested.connect(self.delete_requested.emit)
            self.task_layout.insertWidget(self.task_layout.count() - 1, widget)
            self._task_widgets[task.id] = widget

        self.empty_label.setVisible(not shown)
        total = len(state.tasks)
        done = sum(1 for task in state.tasks if task.completed)
        self.counter_label.setText(f"{done} of {total} done" if total else "")

    # ── intents ────────────────────────────────────────

    def _ensure_creating(self) -> EditSession:
        session = edit_session.begin_create(self._session)
        if session is not self._session:
            self._session = session
            self.session_changed.emit(session)
        return session

    def _on_input_focused(self):
        self._ensure_creating()

    def _on_title_edited(self, text: str):
        session = edit_session.set_title(self._ensure_creating(), text)
        self._session = session
        self.session_changed.emit(session)

    def _on_pick_deadline(self):
        session = pick_deadline(self._ensure_creating(), self.calendar_btn)
        self._session = session
        self.session_changed.emit(session)
        self.input_field.setFocus()

    def _on_add_clicked(self):
        session = self._ensure_creating()
        self.add_requested.emit(session)

    def _on_cancel_clicked(self):
        self.input_field.clearFocus()
        self.cancel_requested.emit()
