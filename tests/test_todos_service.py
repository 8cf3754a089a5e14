"""Tests for the remote todos client and its error taxonomy."""

import httpx
import pytest

from todos_service import (
    TodosService,
    TodosFetchError,
    FetchTransportError,
    FetchStatusError,
)
from fakes import FakeTodosApi, make_service, invalid_url_handler, TODOS_URL


@pytest.mark.asyncio
async def test_fetch_returns_body_of_200_response():
    api = FakeTodosApi(body=[{"id": 1, "title": "a"}])
    todos = await make_service(api).fetch_todos()
    assert todos == [{"id": 1, "title": "a"}]
    assert api.calls == 1
    assert api.requests[0].method == "GET"
    assert str(api.requests[0].url) == TODOS_URL


@pytest.mark.asyncio
async def test_request_has_no_body_or_query():
    api = FakeTodosApi()
    await make_service(api).fetch_todos()
    request = api.requests[0]
    assert request.content == b""
    assert request.url.query == b""
    assert "authorization" not in request.headers


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [201, 404, 500])
async def test_non_200_raises_status_error(status):
    api = FakeTodosApi(status_code=status)
    with pytest.raises(FetchStatusError) as exc_info:
        await make_service(api).fetch_todos()
    assert exc_info.value.status_code == status
    assert isinstance(exc_info.value, TodosFetchError)
    assert api.calls == 1


@pytest.mark.asyncio
async def test_transport_error_is_wrapped():
    api = FakeTodosApi(error=httpx.ConnectError)
    with pytest.raises(FetchTransportError):
        await make_service(api).fetch_todos()
    assert api.calls == 1


@pytest.mark.asyncio
async def test_non_json_body_is_a_transport_error():
    def handler(request):
        return httpx.Response(200, text="<html>maintenance</html>")

    service = TodosService(url=TODOS_URL, transport=httpx.MockTransport(handler))
    with pytest.raises(FetchTransportError):
        await service.fetch_todos()


def test_defaults_come_from_config():
    from config import app_config
    service = TodosService()
    assert service.url == app_config.todos_url
    assert service.timeout == app_config.fetch_timeout


@pytest.mark.asyncio
async def test_invalid_url_is_a_transport_error():
    service = TodosService(url=TODOS_URL, transport=httpx.MockTransport(invalid_url_handler))
    with pytest.raises(FetchTransportError):
        await service.fetch_todos()

