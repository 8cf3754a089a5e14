"""
Server-rendered pages (producing context).
"""

import logging

from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from markupsafe import Markup

from config import app_config
from todos import ExecutionContext, TodosPage, resolve_initial_data
from todos import html
import web.state as _state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home():
    doc = html.document(
        title=app_config.title,
        description=app_config.description,
        body=[
            Markup('<h1 class="title">Home</h1>'),
            html.link("/todos", "Todos"),
        ],
    )
    return HTMLResponse(str(doc))


@router.get("/todos", response_class=HTMLResponse)
async def todos_page():
    """Resolve the initial data, then mount and render the page once."""
    service = _state.get_service()
    outcome = await resolve_initial_data(ExecutionContext.PRODUCING, service)
    page = TodosPage(outcome, service)
    page.mount()
    return HTMLResponse(str(page.render()))
