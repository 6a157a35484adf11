"""Task list UI components."""

from todo_client.ui.task_list.calendar_popup import DatePickerPopup, TimePickerPopup, pick_deadline
from todo_client.ui.task_list.task_edit_dialog import TaskEditDialog
from todo_client.ui.task_list.task_item_widget import TaskItemWidget
from todo_client.ui.task_list.task_list_widget import TaskListWidget

__all__ = [
    "DatePickerPopup",
    "TaskEditDialog",
    "TaskItemWidget",
    "TaskListWidget",
    "TimePickerPopup",
    "pick_deadline",
]
