"""Exceptions raised by the task store and the remote API gateway."""

from __future__ import annotations


class ValidationError(Exception):
    """Raised when a draft cannot be submitted (empty title or missing deadline)."""

    def __init__(self, message: str = "Please enter both task name and deadline."):
        super().__init__(message)


class ApiError(Exception):
    """Base class for failures talking to the to-do API."""


class ApiTransportError(ApiError):
    """Connection refused, DNS failure, timeout and the like."""


class ApiStatusError(ApiError):
    def __init__(self, status_code: int, message: str = ""):
        super().__init__(message or f"Server responded with HTTP {status_code}")
        self.status_code = status_code
