"""Main application window for the To-Do List client."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QSize, QThread, Qt, pyqtSignal, pyqtSlot
from PyQt6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from todo_client.application import state as reducers
from todo_client.application.task_store import Mutation, MutationKind, TaskStore
from todo_client.domain import edit_session
from todo_client.domain.edit_session import EditSession
from todo_client.domain.errors import ValidationError
from todo_client.domain.models import FilterMode, SessionMode
from todo_client.styles import build_stylesheet
from todo_client.sync_worker import SyncWorker
from todo_client.ui.task_list import TaskEditDialog, TaskListWidget
from todo_client.ui.task_list.icons import build_refresh_icon
from todo_client.ui.widgets.error_overlay import ErrorOverlay
from todo_client.ui.widgets.help_overlay import HelpOverlay
from todo_client.ui.windows.main_window_constants import (
    APP_TITLE,
    HELP_TEXT,
    MAX_WINDOW_HEIGHT,
    MAX_WINDOW_WIDTH,
    MIN_WINDOW_HEIGHT,
    MIN_WINDOW_WIDTH,
)
from todo_client.ui.windows.main_window_state_store import MainWindowState, MainWindowStateStore


logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single-window task list; API calls run on a background worker thread."""

    request_mutation = pyqtSignal(object)

    def __init__(self, worker: SyncWorker | None = None):
        super().__init__()

        self._ui_state_store = MainWindowStateStore()
        ui_state = self._ui_state_store.load()

        self.store = TaskStore(
            initial=reducers.AppState(filter_mode=ui_state.filter_mode, dark_mode=ui_state.dark_mode)
        )
        self._pending = 0
        self._edit_dialog: TaskEditDialog | None = None

        self.setWindowTitle(APP_TITLE)
        self.setMinimumSize(MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)
        self.setMaximumSize(MAX_WINDOW_WIDTH, MAX_WINDOW_HEIGHT)
        self.resize(ui_state.width, ui_state.height)

        self.content_panel = QWidget()
        self.content_panel.setObjectName("contentPanel")
        content_layout = QVBoxLayout(self.content_panel)
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.setSpacing(0)

        self.sync_progress = QProgressBar()
        self.sync_progress.setObjectName("syncProgress")
        self.sync_progress.setTextVisible(False)
        self.sync_progress.setRange(0, 0)
        self.sync_progress.hide()
        content_layout.addWidget(self.sync_progress)

        header = QWidget()
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(14, 14, 14, 14)
        header_layout.setSpacing(8)

        header_label = QLabel(APP_TITLE)
        header_label.setObjectName("headerLabel")
        header_layout.addWidget(header_label)
        header_layout.addStretch()

        self.dark_mode_switch = QCheckBox("Dark mode")
        self.dark_mode_switch.setObjectName("darkModeSwitch")
        self.dark_mode_switch.setChecked(ui_state.dark_mode)
        self.dark_mode_switch.toggled.connect(self._on_dark_mode_toggled)
        header_layout.addWidget(self.dark_mode_switch)

        self.refresh_button = QPushButton("")
        self.refresh_button.setObjectName("refreshButton")
        self.refresh_button.setToolTip("Reload tasks")
        self.refresh_button.setIcon(build_refresh_icon())
        self.refresh_button.setIconSize(QSize(16, 16))
        self.refresh_button.setFixedSize(30, 30)
        self.refresh_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.refresh_button.clicked.connect(self.reload)
        header_layout.addWidget(self.refresh_button)

        self.help_button = QPushButton("?")
        self.help_button.setObjectName("helpButton")
        self.help_button.setToolTip("Help")
        self.help_button.setFixedSize(30, 30)
        self.help_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.help_button.clicked.connect(lambda: self._set_help_visible(None))
        header_layout.addWidget(self.help_button)

        content_layout.addWidget(header)

        self.task_list = TaskListWidget()
        self.task_list.session_changed.connect(self._on_session_changed)
        self.task_list.add_requested.connect(self._on_add_requested)
        self.task_list.cancel_requested.connect(self._on_cancel_requested)
        self.task_list.filter_changed.connect(self._on_filter_changed)
        self.task_list.toggle_requested.connect(self._on_toggle_requested)
        self.task_list.edit_requested.connect(self._on_edit_requested)
        self.task_list.delete_requested.connect(self._on_delete_requested)
        content_layout.addWidget(self.task_list, 1)

        self.setCentralWidget(self.content_panel)

        self.error_overlay = ErrorOverlay(self.content_panel)
        self.error_overlay.retry_clicked.connect(self.reload)
        self.error_overlay.dismiss_clicked.connect(self._dismiss_error)

        self.help_overlay = HelpOverlay(HELP_TEXT, self.content_panel)
        self.help_overlay.close_clicked.connect(lambda: self._set_help_visible(False))

        # Background worker.
        self.sync_thread = QThread(self)
        self.sync_worker = worker or SyncWorker()
        self.sync_worker.moveToThread(self.sync_thread)

        # UI thread -> worker thread requests.
        self.request_mutation.connect(self.sync_worker.execute)

        # Worker -> UI thread results.
        self.sync_worker.mutation_succeeded.connect(self._on_mutation_succeeded)
        self.sync_worker.mutation_failed.connect(self._on_mutation_failed)

        self.sync_thread.start()

        self._apply_theme()
        self._render()
        self.reload()

    # ── dispatch ───────────────────────────────────────

    def _dispatch(self, mutation: Mutation):
        self._pending += 1
        self.sync_progress.show()
        logger.debug("Dispatching %s token=%s id=%s", mutation.kind.value, mutation.token, mutation.task_id)
        self.request_mutation.emit(mutation)

    def _settle_pending(self):
        self._pending = max(0, self._pending - 1)
        if self._pending == 0:
            self.sync_progress.hide()

    @pyqtSlot(object, object)
    def _on_mutation_succeeded(self, mutation: Mutation, response: object):
        self._settle_pending()
        applied = self.store.apply(mutation, response)
        # A superseded save still closes its session.
        if mutation.closes_edit and self.store.state.session.mode != SessionMode.EDITING:
            self._close_edit_dialog()
        if not applied:
            return
        self.error_overlay.clear()
        self._render()

    @pyqtSlot(object, str)
    def _on_mutation_failed(self, mutation: Mutation, error: str):
        self._settle_pending()
        message = self.store.fail(mutation, error)
        if message is None:
            return
        if mutation.closes_edit and self._edit_dialog is not None:
            self._edit_dialog.show_error(message)
        self.error_overlay.show_error(message, can_retry=mutation.kind == MutationKind.LIST)

    # ── intents ────────────────────────────────────────

    def reload(self):
        self._dispatch(self.store.prepare_load())

    def _on_session_changed(self, session: EditSession):
        self.store.state = reducers.session_changed(self.store.state, session)
        self.task_list.render_session(session)

    def _on_add_requested(self, session: EditSession):
        self.store.state = reducers.session_changed(self.store.state, session)
        try:
            mutation = self.store.prepare_add(session.title, session.deadline)
        except ValidationError as exc:
            QMessageBox.warning(self, "Error", str(exc))
            return
        self._dispatch(mutation)

    def _on_cancel_requested(self):
        self._on_session_changed(edit_session.cancel(self.store.state.session))

    def _on_filter_changed(self, mode: FilterMode):
        self.store.state = reducers.filter_changed(self.store.state, mode)
        self._render()
        self._save_ui_state()

    def _on_toggle_requested(self, task_id):
        mutation = self.store.prepare_toggle(task_id)
        if mutation is not None:
            self._dispatch(mutation)

    def _on_delete_requested(self, task_id):
        self._dispatch(self.store.prepare_remove(task_id))

    def _on_edit_requested(self, task_id):
        task = self.store.find(task_id)
        if task is None:
            return
        session = edit_session.begin_edit(self.store.state.session, task)
        self._on_session_changed(session)

        dialog = TaskEditDialog(session, self)
        dialog.setStyleSheet(build_stylesheet(self.store.state.dark_mode))
        dialog.session_changed.connect(self._on_edit_session_changed)
        dialog.save_requested.connect(self._on_save_requested)
        dialog.cancel_requested.connect(self._on_edit_cancelled)
        self._edit_dialog = dialog
        dialog.open()

    def _on_edit_session_changed(self, session: EditSession):
        self.store.state = reducers.session_changed(self.store.state, session)

    def _on_save_requested(self, session: EditSession):
        self.store.state = reducers.session_changed(self.store.state, session)
        try:
            mutation = self.store.prepare_commit_edit(session)
        except ValidationError as exc:
            QMessageBox.warning(self, "Error", str(exc))
            return
        self._dispatch(mutation)

    def _on_edit_cancelled(self):
        self._edit_dialog = None
        self._on_session_changed(edit_session.cancel(self.store.state.session))

    def _close_edit_dialog(self):
        dialog, self._edit_dialog = self._edit_dialog, None
        if dialog is not None:
            dialog.accept()

    def _on_dark_mode_toggled(self, enabled: bool):
        self.store.state = reducers.dark_mode_changed(self.store.state, enabled)
        self._apply_theme()
        self._save_ui_state()

    def _set_help_visible(self, visible: bool | None):
        self.store.state = reducers.help_toggled(self.store.state, visible)
        self.help_overlay.set_shown(self.store.state.help_visible)

    def _dismiss_error(self):
        self.store.state = reducers.error_cleared(self.store.state)
        self.error_overlay.clear()

    # ── rendering ──────────────────────────────────────

    def _render(self):
        self.task_list.render(self.store.state)

    def _apply_theme(self):
        stylesheet = build_stylesheet(self.store.state.dark_mode)
        self.setStyleSheet(stylesheet)
        if self._edit_dialog is not None:
            self._edit_dialog.setStyleSheet(stylesheet)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        rect = self.content_panel.rect()
        self.error_overlay.setGeometry(rect)
        self.help_overlay.setGeometry(rect)

    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Escape and self.store.state.help_visible:
            self._set_help_visible(False)
            return
        super().keyPressEvent(event)

    # ── lifecycle ──────────────────────────────────────

    def _save_ui_state(self):
        state = self.store.state
        self._ui_state_store.save(
            MainWindowState(
                width=self.width(),
                height=self.height(),
                dark_mode=state.dark_mode,
                filter_mode=state.filter_mode,
            )
        )

    def closeEvent(self, event):
        self._save_ui_state()
        self.sync_thread.quit()
        self.sync_thread.wait(3000)
        super().closeEvent(event)
