"""
Todos package - dual-mode data acquisition for the todos page.

This package contains the page logic split into logical modules:
- outcome: FetchOutcome variants, the UNKNOWN sentinel and ExecutionContext
- resolver: One-shot initial data fetch for the producing context
- provider: Shared todos value, lazy client fetch and scoped lookup
- page: Presentation root state machine and document rendering
- html: Escaping and markup helpers
"""

from .outcome import (
    ExecutionContext,
    FetchOutcome,
    Success,
    Failure,
    UNKNOWN,
    SSR_ERROR_MESSAGE,
)
from .resolver import resolve_initial_data
from .provider import (
    TodosProvider,
    TodosConsumer,
    SharedContextValue,
    ContextUnavailable,
    consume,
)
from .page import TodosPage, PageState

__all__ = [
    "ExecutionContext",
    "FetchOutcome",
    "Success",
    "Failure",
    "UNKNOWN",
    "SSR_ERROR_MESSAGE",
    "resolve_initial_data",
    "TodosProvider",
    "TodosConsumer",
    "SharedContextValue",
    "ContextUnavailable",
    "consume",
    "TodosPage",
    "PageState",
]
