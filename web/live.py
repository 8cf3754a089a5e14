"""
Live WebSocket session for the todos page (consuming context).

The delivered page opens this socket when its collection still has to be
fetched. The session mounts a fresh page tree with no resolver output,
sends the first render right away, runs the provider's fetch and pushes
one render per change of the shared collection.
"""

import asyncio
import json
import logging
from typing import Set

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from todos import ExecutionContext, TodosPage, resolve_initial_data
from web.state import _WSRef
import web.state as _state

logger = logging.getLogger(__name__)

router = APIRouter()

# Fetches that outlive their session; held here until they settle
_background_fetches: Set[asyncio.Task] = set()


def _log_fetch_failure(task: asyncio.Task) -> None:
    """Surface errors from a fetch task nobody awaits."""
    _background_fetches.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Live todos fetch failed: %s", exc, exc_info=exc)


@router.websocket("/ws/todos")
async def todos_live(ws: WebSocket):
    await ws.accept()
    wsr = _WSRef(ws)

    service = _state.get_service()
    outcome = await resolve_initial_data(ExecutionContext.CONSUMING, service)
    page = TodosPage(outcome, service)
    page.mount()
    provider = page.provider

    pending: asyncio.Queue = asyncio.Queue()

    async def _send_render() -> None:
        await wsr.send_json({
            "type": "render",
            "html": str(page.render_todos()),
            "loading": provider.loading,
        })

    async def _render_pump() -> None:
        while True:
            await pending.get()
            await _send_render()

    async def _message_loop() -> None:
        while True:
            raw = await ws.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                await wsr.send_json({"type": "error", "content": "invalid message"})
                continue
            msg_type = msg.get("type") if isinstance(msg, dict) else None
            if msg_type == "set_todos":
                todos = msg.get("todos")
                if not isinstance(todos, list):
                    await wsr.send_json({"type": "error", "content": "todos must be a list"})
                    continue
                provider.set_todos(todos)
            else:
                logger.debug("Ignoring live message of type %r", msg_type)

    unsubscribe = provider.subscribe(lambda _value: pending.put_nowait(None))
    _pump_task = asyncio.create_task(_render_pump())
    logger.info("Live todos session opened")

    try:
        await _send_render()
        # Not cancelled on disconnect: a started fetch runs to completion and its result is dropped
        fetch_task = asyncio.create_task(provider.activate())
        _background_fetches.add(fetch_task)
        fetch_task.add_done_callback(_log_fetch_failure)
        await _message_loop()
    except WebSocketDisconnect:
        logger.info("Live todos session closed")
    except Exception as e:
        logger.exception(f"Live todos session error: {e}")
    finally:
        wsr.ws = None
        unsubscribe()
        _pump_task.cancel()
