"""
Shared mutable state for the web server.

Globals accessed across route modules live here.
Import from web.state to read/write them.
"""

import logging
import os
from typing import Optional, Dict, Any

from fastapi import WebSocket

from todos_service import TodosService

logger = logging.getLogger(__name__)

STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")

# ============================================================
# Globals
# ============================================================

# Set at startup by the CLI; created from app_config on first use otherwise
_todos_service: Optional[TodosService] = None


def get_service() -> TodosService:
    global _todos_service
    if _todos_service is None:
        _todos_service = TodosService()
    return _todos_service


# ============================================================
# WebSocket reference wrapper (for teardown-safe sends)
# ============================================================


class _WSRef:
    """Mutable WebSocket reference that silently drops sends when disconnected.

    Live-session callbacks use ``wsr.send_json()`` instead of
    ``ws.send_json()`` directly.  When the WebSocket disconnects we set
    ``wsr.ws = None``; a fetch that settles afterwards has nowhere to go
    and its render is dropped.
    """
    __slots__ = ("ws",)

    def __init__(self, ws: Optional[WebSocket]):
        self.ws: Optional[WebSocket] = ws

    async def send_json(self, data: Dict[str, Any]) -> None:
        _ws = self.ws
        if _ws is None:
            return
        try:
            await _ws.send_json(data)
        except Exception as exc:
            logger.debug("Live send failed, marking socket closed: %s", exc)
            self.ws = None          # mark disconnected on first failure
