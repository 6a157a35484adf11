"""Endpoint settings for the to-do REST API."""

from __future__ import annotations

import os

DEFAULT_BASE_URL = "https://pit4.onrender.com/api/todos/"
API_BASE_URL = os.environ.get("TODO_API_BASE_URL", "").strip() or DEFAULT_BASE_URL
REQUEST_TIMEOUT_SECONDS = 20
