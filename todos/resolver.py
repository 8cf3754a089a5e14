"""
Initial data resolution for the producing context.
"""

import logging
from typing import Optional

from todos_service import TodosService, TodosFetchError, FetchStatusError
from .outcome import ExecutionContext, FetchOutcome, Success, Failure, SSR_ERROR_MESSAGE

logger = logging.getLogger(__name__)


async def resolve_initial_data(
    context: ExecutionContext,
    service: TodosService,
) -> Optional[FetchOutcome]:
    """Attempt the one-shot initial fetch before the page tree is built.

    Returns None in the consuming context without touching the network;
    the page then leaves acquisition to its provider. In the producing
    context exactly one GET is issued and its result folded into a
    Success or Failure.
    """
    if context is ExecutionContext.CONSUMING:
        return None

    logger.info("Server side fetch for data")
    try:
        todos = await service.fetch_todos()
    except FetchStatusError as e:
        logger.warning("Initial fetch got status %s", e.status_code)
        return Failure(SSR_ERROR_MESSAGE)
    except TodosFetchError as e:
        logger.warning("Initial fetch failed: %s", e)
        return Failure(SSR_ERROR_MESSAGE)
    return Success(todos)
