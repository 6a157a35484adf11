"""Background worker executing to-do API calls."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from todo_client.application.task_store import Mutation, TodoGateway, perform
from todo_client.domain.errors import ApiError
from todo_client.infrastructure.api.todo_gateway import TodoApiGateway


class SyncWorker(QObject):
    """Worker object living in a QThread; never touches application state."""

    mutation_succeeded = pyqtSignal(object, object)  # Mutation, response payload
    mutation_failed = pyqtSignal(object, str)  # Mutation, error message

    def __init__(self, gateway: TodoGateway | None = None):
        super().__init__()
        self._gateway = gateway or TodoApiGateway()

    @pyqtSlot(object)
    def execute(self, mutation: Mutation):
        try:
            response = perform(self._gateway, mutation)
        except ApiError as exc:
            self.mutation_failed.emit(mutation, str(exc))
            return
        self.mutation_succeeded.emit(mutation, response)
