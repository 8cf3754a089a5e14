"""Shared fixtures: a TodosService backed by httpx.MockTransport."""

import pytest
from fastapi.testclient import TestClient

import web.state as _state
from fakes import FakeTodosApi, make_service


@pytest.fixture
def api():
    return FakeTodosApi(body=[{"id": 1, "title": "a"}])


@pytest.fixture
def service(api):
    return make_service(api)


@pytest.fixture
def client(service, monkeypatch):
    monkeypatch.setattr(_state, "_todos_service", service)
    from web import app
    with TestClient(app) as c:
        yield c
