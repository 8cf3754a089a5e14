"""
Todos — Web server.
FastAPI app serving the server-rendered todos page and its live session.

Run:  python -m web [--port 3000] [--todos-url URL]
Open: http://localhost:3000/todos
"""

import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from config import app_config
from web.state import STATIC_DIR
from web import pages, live

logger = logging.getLogger(__name__)

# ============================================================
# FastAPI application
# ============================================================

app = FastAPI(title="Todos", debug=app_config.debug_mode)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.middleware("http")
async def no_cache_static(request, call_next):
    """Prevent browser caching of static assets during development."""
    response = await call_next(request)
    if app_config.debug_mode and request.url.path.startswith("/static/"):
        response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
        response.headers["Pragma"] = "no-cache"
        response.headers["Expires"] = "0"
    return response


# ============================================================
# Include routers from submodules
# ============================================================

app.include_router(pages.router)
app.include_router(live.router)
