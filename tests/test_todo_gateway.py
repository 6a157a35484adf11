# tests/test_todo_gateway.py

from __future__ import annotations

import pytest
import requests

from todo_client.domain.errors import ApiStatusError, ApiTransportError
from todo_client.infrastructure.api.todo_gateway import TodoApiGateway

from .fakes import FakeHttpSession, FakeResponse

BASE = "https://example.test/api/todos/"


def _gateway(*responses) -> tuple[TodoApiGateway, FakeHttpSession]:
    http = FakeHttpSession(responses=list(responses))
    return TodoApiGateway(BASE, session=http, timeout=5), http


def test_list_tasks_gets_collection_url() -> None:
    gw, http = _gateway(FakeResponse(payload=[{"id": 1, "title": "a"}]))

    assert gw.list_tasks() == [{"id": 1, "title": "a"}]
    assert http.sent[0].method == "GET"
    assert http.sent[0].url == BASE
    assert http.sent[0].timeout == 5


def test_create_posts_body_and_returns_record() -> None:
    body = {"title": "a", "description": "", "completed": False, "deadline": None}
    gw, http = _gateway(FakeResponse(status_code=201, payload={"id": 7, **body}))

    assert gw.create_task(body)["id"] == 7
    assert (http.sent[0].method, http.sent[0].json) == ("POST", body)


def test_update_and_delete_use_item_url_with_trailing_slash() -> None:
    gw, http = _gateway(FakeResponse(payload={"id": 3, "title": "x"}), FakeResponse(status_code=204))

    assert gw.update_task(3, {"id": 3, "title": "x"}) == {"id": 3, "title": "x"}
    gw.delete_task(3)

    assert [(r.method, r.url) for r in http.sent] == [("PUT", BASE + "3/"), ("DELETE", BASE + "3/")]


def test_update_with_empty_body_returns_none() -> None:
    gw, _ = _gateway(FakeResponse(status_code=200, payload=None))
    assert gw.update_task(3, {"id": 3}) is None


def test_base_url_gets_trailing_slash() -> None:
    gw = TodoApiGateway("https://example.test/api/todos", session=FakeHttpSession())
    assert gw.base_url == BASE


def test_http_error_maps_to_status_error() -> None:
    gw, _ = _gateway(FakeResponse(status_code=503, payload={"detail": "down"}))

    with pytest.raises(ApiStatusError) as excinfo:
        gw.list_tasks()
    assert excinfo.value.status_code == 503


def test_connection_problems_map_to_transport_error() -> None:
    gw, _ = _gateway(requests.exceptions.ConnectionError("refused"), requests.exceptions.Timeout("slow"))

    with pytest.raises(ApiTransportError):
        gw.list_tasks()
    with pytest.raises(ApiTransportError):
        gw.delete_task(1)


def test_invalid_json_is_reported_as_status_error() -> None:
    gw, _ = _gateway(FakeResponse(raw=b"<html>oops</html>"))

    with pytest.raises(ApiStatusError):
        gw.list_tasks()


def test_create_without_id_in_response_is_an_error() -> None:
    gw, _ = _gateway(FakeResponse(payload={"title": "a"}))

    with pytest.raises(ApiStatusError):
        gw.create_task({"title": "a"})
