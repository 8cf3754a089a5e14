"""Tests for the todos page root."""

import pytest
from markupsafe import escape

from todos import Failure, PageState, Success, TodosPage
from todos.html import serialize_todos, todos_fragment
from fakes import FakeTodosApi, make_service


@pytest.fixture
def api():
    return FakeTodosApi(body=[{"id": 9}])


@pytest.fixture
def service(api):
    return make_service(api)


def test_starts_uninitialized(service):
    page = TodosPage(Success([{"id": 1}]), service)
    assert page.state is PageState.UNINITIALIZED
    assert page.ssr_data is None
    assert not page.mounted


def test_mount_success(service):
    page = TodosPage(Success([{"id": 1}]), service)
    assert page.mount() is PageState.HAS_DATA
    assert page.ssr_data == [{"id": 1}]
    assert page.error is None


def test_mount_failure(service):
    page = TodosPage(Failure("could not fetch ssr data"), service)
    assert page.mount() is PageState.HAS_ERROR
    assert page.error == "could not fetch ssr data"
    assert page.ssr_data is None


def test_mount_without_outcome(service):
    page = TodosPage(None, service)
    assert page.mount() is PageState.UNINITIALIZED
    assert page.mounted


def test_mount_is_idempotent(service):
    outcome = Success([{"id": 1}])
    first = TodosPage(outcome, service)
    second = TodosPage(outcome, service)
    for page in (first, second):
        page.mount()
        page.mount()

    assert first.state is second.state is PageState.HAS_DATA
    assert first.ssr_data == second.ssr_data == [{"id": 1}]
    assert first.error is second.error is None
    assert str(first.render()) == str(second.render())


def test_error_view_renders_nothing_else(service):
    page = TodosPage(Failure("could not fetch ssr data"), service)
    page.mount()
    assert str(page.render()) == "<p>Error: could not fetch ssr data</p>"


def test_forwarded_data_skips_client_fetch(service, api):
    page = TodosPage(Success([{"id": 1}]), service, forward_ssr_data=True)
    page.mount()
    assert page.provider.needs_fetch is False

    rendered = str(page.render())
    assert str(todos_fragment([{"id": 1}])) in rendered
    assert "todos.js" not in rendered
    assert api.calls == 0


@pytest.mark.asyncio
async def test_unforwarded_data_leaves_provider_to_fetch(service, api):
    page = TodosPage(Success([{"id": 1}]), service, forward_ssr_data=False)
    page.mount()
    assert page.provider.needs_fetch is True

    rendered = str(page.render())
    assert "The current todos list is unknown" in rendered
    assert 'data-live-url="/ws/todos"' in rendered

    await page.provider.activate()
    assert str(page.render_todos()) == str(todos_fragment([{"id": 9}]))
    assert api.calls == 1


def test_empty_success_still_needs_client_fetch(service):
    page = TodosPage(Success([]), service, forward_ssr_data=True)
    page.mount()
    assert page.state is PageState.HAS_DATA
    assert page.provider.needs_fetch is True


def test_provider_is_created_once(service):
    page = TodosPage(None, service)
    page.mount()
    assert page.provider is page.provider


def test_document_shell(service):
    page = TodosPage(Success([{"id": 1}]), service, forward_ssr_data=True)
    page.mount()
    rendered = str(page.render())
    assert "<title>Create Next App</title>" in rendered
    assert '<meta name="description" content="Generated by create next app">' in rendered
    assert '<h1 class="title">Todos</h1>' in rendered
    assert '<a href="/todos">Todos</a>' in rendered
    assert '<a href="/">Home</a>' in rendered
    assert 'src="/static/vercel.svg"' in rendered
    assert "Powered by" in rendered


def test_item_text_is_escaped(service):
    todos = [{"id": 1, "title": "<script>alert(1)</script>"}]
    page = TodosPage(Success(todos), service, forward_ssr_data=True)
    page.mount()
    rendered = str(page.render())
    assert "<script>alert(1)</script>" not in rendered
    assert str(escape(serialize_todos(todos))) in rendered
