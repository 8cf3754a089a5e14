"""
Presentation root for the todos page.
"""

import logging
from enum import Enum
from typing import Any, List, Optional

from markupsafe import Markup

from config import app_config
from todos_service import TodosService
from .outcome import FetchOutcome, Success, Failure
from .provider import TodosProvider, TodosConsumer
from . import html

logger = logging.getLogger(__name__)

LIVE_URL = "/ws/todos"


class PageState(str, Enum):
    UNINITIALIZED = "uninitialized"
    HAS_DATA = "has_data"
    HAS_ERROR = "has_error"


class TodosPage:
    """
    Root of the page tree.

    Built from the resolver's output, which is committed into the page's
    own state once by ``mount()``. Nothing mutates it afterwards: there
    is no setter and no re-fetch.
    """

    def __init__(
        self,
        outcome: Optional[FetchOutcome],
        service: TodosService,
        forward_ssr_data: Optional[bool] = None,
    ):
        self._outcome = outcome
        self._service = service
        self._forward_ssr_data = app_config.forward_ssr_data if forward_ssr_data is None else forward_ssr_data
        self._mounted = False
        self._provider: Optional[TodosProvider] = None
        self.state = PageState.UNINITIALIZED
        self.ssr_data: Optional[List[Any]] = None
        self.error: Optional[str] = None

    @property
    def mounted(self) -> bool:
        return self._mounted

    def mount(self) -> PageState:
        """Commit the resolver output. Only the first call has any effect."""
        if self._mounted:
            return self.state
        self._mounted = True
        if isinstance(self._outcome, Success):
            self.ssr_data = self._outcome.todos
            self.state = PageState.HAS_DATA
        elif isinstance(self._outcome, Failure):
            self.error = self._outcome.message
            self.state = PageState.HAS_ERROR
        logger.debug("Todos page mounted in state %s", self.state.value)
        return self.state

    @property
    def provider(self) -> TodosProvider:
        """The page's single provider, created on first use."""
        if self._provider is None:
            initial = self.ssr_data if self._forward_ssr_data else None
            self._provider = TodosProvider(self._service, initial_payload=initial)
        return self._provider

    def render_todos(self) -> Markup:
        """Render just the provider subtree (the consumer's fragment)."""
        with self.provider.scope():
            return TodosConsumer().render()

    def render(self) -> Markup:
        if self.state is PageState.HAS_ERROR:
            return html.error_view(self.error)

        live_url = LIVE_URL if self.provider.needs_fetch else ""
        return html.document(
            title=app_config.title,
            description=app_config.description,
            body=[
                Markup('<h1 class="title">Todos</h1>'),
                html.link("/todos", "Todos"),
                html.link("/", "Home"),
                self.render_todos(),
            ],
            live_url=live_url,
        )
