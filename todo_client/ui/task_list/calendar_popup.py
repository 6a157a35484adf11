"""Date and time popups used for the two-step deadline selection."""

from __future__ import annotations

from datetime import date, time, timedelta

from PyQt6.QtCore import QDate, QTime, Qt
from PyQt6.QtGui import QColor, QFont, QTextCharFormat
from PyQt6.QtWidgets import (
    QCalendarWidget,
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTimeEdit,
    QVBoxLayout,
    QWidget,
)

from todo_client.domain import edit_session
from todo_client.domain.edit_session import EditSession
from todo_client.domain.models import PickerStage
from todo_client.ui.windows.main_window_constants import SEPARATE_TIME_STEP

_POPUP_STYLESHEET = """
QDialog#calendarPopup {
    border: 1px solid #8b5cf6;
    border-radius: 10px;
}
QLabel#calendarPopupTitle {
    font-size: 13px;
    font-weight: 700;
    padding: 0px 2px 2px 2px;
}
QPushButton#quickDueButton {
    background-color: rgba(139, 92, 246, 0.12);
    color: #8b5cf6;
    border: 1px solid rgba(139, 92, 246, 0.35);
    border-radius: 7px;
    padding: 5px 8px;
    font-size: 11px;
    font-weight: 600;
}
QPushButton#quickDueButton:hover {
    background-color: rgba(139, 92, 246, 0.22);
    border-color: #8b5cf6;
}
"""


class _PickerPopup(QDialog):
    def __init__(self, title: str, parent=None):
        super().__init__(parent)
        self.setWindowFlags(Qt.WindowType.Popup | Qt.WindowType.FramelessWindowHint)
        self.setObjectName("calendarPopup")
        self.setStyleSheet(_POPUP_STYLESHEET)

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(10, 10, 10, 10)
        self._layout.setSpacing(8)

        title_label = QLabel(title)
        title_label.setObjectName("calendarPopupTitle")
        self._layout.addWidget(title_label)

    @staticmethod
    def _quick_button(label: str) -> QPushButton:
        button = QPushButton(label)
        button.setObjectName("quickDueButton")
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        return button


class DatePickerPopup(_PickerPopup):
    """Calendar step. Rejecting (Esc or clicking outside) means "dismissed"."""

    def __init__(self, parent=None, initial: date | None = None):
        super().__init__("Pick a date", parent)
        self._selected: date | None = None
        self._formatted_dates: list[QDate] = []

        quick_row = QHBoxLayout()
        quick_row.setSpacing(6)
        self.quick_today_btn = self._quick_button("Today")
        self.quick_tomorrow_btn = self._quick_button("Tomorrow")
        self.quick_next_week_btn = self._quick_button("Next week")
        quick_row.addWidget(self.quick_today_btn)
        quick_row.addWidget(self.quick_tomorrow_btn)
        quick_row.addWidget(self.quick_next_week_btn)
        quick_row.addStretch()
        self._layout.addLayout(quick_row)

        self.calendar = QCalendarWidget()
        self.calendar.setGridVisible(False)
        self.calendar.setVerticalHeaderFormat(QCalendarWidget.VerticalHeaderFormat.NoVerticalHeader)
        self.calendar.setFirstDayOfWeek(Qt.DayOfWeek.Monday)
        self.calendar.setMinimumHeight(220)
        self.calendar.clicked.connect(self._accept_qdate)
        self.calendar.currentPageChanged.connect(self._refresh_date_formats)
        self._layout.addWidget(self.calendar)

        self.quick_today_btn.clicked.connect(lambda: self._accept_pydate(date.today()))
        self.quick_tomorrow_btn.clicked.connect(lambda: self._accept_pydate(date.today() + timedelta(days=1)))
        self.quick_next_week_btn.clicked.connect(self._accept_next_week)

        start = initial or date.today()
        self.calendar.setSelectedDate(QDate(start.year, start.month, start.day))
        self._refresh_date_formats()

    def _accept_pydate(self, value: date) -> None:
        self._accept_qdate(QDate(value.year, value.month, value.day))

    def _accept_next_week(self) -> None:
        today = date.today()
        self._accept_pydate(today + timedelta(days=7 - today.weekday()))

    def _accept_qdate(self, value: QDate) -> None:
        if not value.isValid():
            return
        self._selected = date(value.year(), value.month(), value.day())
        self.accept()

    def _refresh_date_formats(self, *_args) -> None:
        default_fmt = QTextCharFormat()
        for formatted in self._formatted_dates:
            self.calendar.setDateTextFormat(formatted, default_fmt)
        self._formatted_dates.clear()

        today = QDate.currentDate()
        today_fmt = QTextCharFormat()
        today_fmt.setForeground(QColor("#ffffff"))
        today_fmt.setBackground(QColor("#7c3aed"))
        today_fmt.setFontWeight(QFont.Weight.DemiBold)
        self.calendar.setDateTextFormat(today, today_fmt)
        self._formatted_dates.append(today)

    def keyPressEvent(self, event):
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self._accept_qdate(self.calendar.selectedDate())
            event.accept()
            return
        super().keyPressEvent(event)

    def showEvent(self, event):
        super().showEvent(event)
        self.calendar.setFocus()

    def selected_date(self) -> date | None:
        return self._selected


class TimePickerPopup(_PickerPopup):
    """Time-of-day step shown after a date was confirmed."""

    def __init__(self, parent=None, initial: time | None = None):
        super().__init__("Pick a time", parent)
        self._selected: time | None = None

        self.time_edit = QTimeEdit()
        self.time_edit.setDisplayFormat("HH:mm")
        start = initial or time(9, 0)
        self.time_edit.setTime(QTime(start.hour, start.minute))
        self._layout.addWidget(self.time_edit)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        cancel_btn = QPushButton("Cancel")
        cancel_btn.setObjectName("secondaryButton")
        cancel_btn.clicked.connect(self.reject)
        btn_row.addWidget(cancel_btn)
        ok_btn = QPushButton("OK")
        ok_btn.setObjectName("primaryButton")
        ok_btn.clicked.connect(self._on_ok)
        btn_row.addWidget(ok_btn)
        self._layout.addLayout(btn_row)

    def _on_ok(self) -> None:
        chosen = self.time_edit.time()
        self._selected = time(chosen.hour(), chosen.minute())
        self.accept()

    def keyPressEvent(self, event):
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self._on_ok()
            event.accept()
            return
        super().keyPressEvent(event)

    def showEvent(self, event):
        super().showEvent(event)
        self.time_edit.setFocus()

    def selected_time(self) -> time | None:
        return self._selected


def _place_below(popup: QDialog, anchor: QWidget) -> None:
    popup.adjustSize()
    rect = anchor.rect()
    bottom_right = anchor.mapToGlobal(rect.bottomRight())
    popup.move(bottom_right.x() - popup.width(), bottom_right.y() + 4)


def pick_deadline(
    session: EditSession,
    anchor: QWidget,
    *,
    separate_time_step: bool = SEPARATE_TIME_STEP,
) -> EditSession:
    """Run the date step, then the time step, returning the resulting session.

    Dismissing a step closes only that step; the staged deadline stays as it was.
    """
    session = edit_session.open_picker(session)
    if session.picker != PickerStage.AWAITING_DATE:
        return session

    initial_date = session.deadline.date() if session.deadline else None
    date_popup = DatePickerPopup(anchor, initial=initial_date)
    _place_below(date_popup, anchor)
    if not date_popup.exec() or date_popup.selected_date() is None:
        return edit_session.dismiss_picker(session)

    session = edit_session.confirm_date(
        session,
        date_popup.selected_date(),
        separate_time_step=separate_time_step,
    )
    if session.picker != PickerStage.AWAITING_TIME:
        return session

    time_popup = TimePickerPopup(anchor, initial=session.deadline.time())
    _place_below(time_popup, anchor)
    if not time_popup.exec() or time_popup.selected_time() is None:
        return edit_session.dismiss_picker(session)
    return edit_session.confirm_time(session, time_popup.selected_time())
