"""
Shared todos value: lazy client-side fetch and subtree-scoped lookup.

A TodosProvider owns the todo collection and its loading flag. Descendants
never receive the collection as an argument; they call ``consume()`` while
rendering inside ``provider.scope()``, which binds the provider to a
context variable for exactly the lifetime of that block.
"""

import contextvars
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, NamedTuple, Optional

from markupsafe import Markup

from todos_service import TodosService, TodosFetchError
from .outcome import UNKNOWN
from . import html

logger = logging.getLogger(__name__)


# Provider of the subtree currently being rendered (set only inside TodosProvider.scope)
_current_provider: contextvars.ContextVar[Optional["TodosProvider"]] = contextvars.ContextVar(
    "todos_provider", default=None
)


class ContextUnavailable(RuntimeError):
    """consume() was called outside any TodosProvider scope"""
    pass


class SharedContextValue(NamedTuple):
    """What descendants of a provider see: the collection and its setter"""
    todos: Any
    set_todos: Callable[[Any], None]


def _is_usable_payload(payload: Any) -> bool:
    """Only a non-empty list lets the provider skip its fetch."""
    return isinstance(payload, list) and len(payload) > 0


class TodosProvider:
    """Owner of the shared todo collection for one mounted subtree."""

    def __init__(self, service: TodosService, initial_payload: Optional[List[Any]] = None):
        self._service = service
        self._subscribers: List[Callable[[SharedContextValue], None]] = []
        self._fetch_started = False
        if _is_usable_payload(initial_payload):
            self._todos: Any = initial_payload
            self._needs_fetch = False
            self.loading: Optional[bool] = False
        else:
            self._todos = UNKNOWN
            self._needs_fetch = True
            self.loading = None
        self._value = SharedContextValue(self._todos, self.set_todos)

    @property
    def value(self) -> SharedContextValue:
        return self._value

    @property
    def todos(self) -> Any:
        return self._todos

    @property
    def needs_fetch(self) -> bool:
        """True while the collection still has to be fetched by activate()."""
        return self._needs_fetch and not self._fetch_started

    def set_todos(self, todos: Any) -> None:
        """Replace the collection. Last write wins."""
        if todos is UNKNOWN:
            raise ValueError("a loaded todo collection cannot be reset to UNKNOWN")
        self._commit(todos)

    def _commit(self, todos: Any) -> None:
        if todos is self._todos:
            return
        self._todos = todos
        self._value = SharedContextValue(todos, self.set_todos)
        for callback in list(self._subscribers):
            callback(self._value)

    def subscribe(self, callback: Callable[[SharedContextValue], None]) -> Callable[[], None]:
        """Call ``callback`` after every change of the stored collection.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    async def activate(self) -> None:
        """Run the provider's fetch, if it needs one and has not started it.

        Only the consuming context calls this. A failed fetch is stored as an
        empty collection; the error itself is logged and not surfaced.
        """
        if not self._needs_fetch or self._fetch_started:
            return
        self._fetch_started = True
        logger.info("Client fetching todos")
        self.loading = True
        try:
            todos = await self._service.fetch_todos()
        except TodosFetchError as e:
            logger.warning("Client fetch failed, showing empty list: %s", e)
            todos = []
        finally:
            # Settled either way, including errors that escape this method
            self.loading = False
        self._commit(todos)

    @contextmanager
    def scope(self) -> Iterator[SharedContextValue]:
        """Make this provider visible to consume() within the block."""
        token = _current_provider.set(self)
        try:
            yield self._value
        finally:
            _current_provider.reset(token)


def consume() -> SharedContextValue:
    """Return the value of the nearest enclosing provider.

    Raises:
        ContextUnavailable: no provider scope is active.
    """
    provider = _current_provider.get()
    if provider is None:
        raise ContextUnavailable("consume() must be used within a TodosProvider scope")
    return provider.value


class TodosConsumer:
    """Renders the current collection, read from the enclosing provider."""

    def render(self) -> Markup:
        todos, _set_todos = consume()
        return html.todos_fragment(todos)
