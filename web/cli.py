"""
CLI entry point for the Todos web server.

Run:  python -m web [--port 3000] [--todos-url URL] [--no-forward]
"""

import argparse
import logging

import web.state as _state
from config import app_config
from todos_service import TodosService


def _setup_logging(level: str) -> None:
    # uvicorn's log_level only affects its own loggers; make ours visible too
    for name in ("web", "todos", "todos_service"):
        log = logging.getLogger(name)
        log.setLevel(level)
        if not log.handlers:
            h = logging.StreamHandler()
            h.setLevel(level)
            h.setFormatter(logging.Formatter(f"%(asctime)s %(levelname)s [{name}] %(message)s"))
            log.addHandler(h)


def main():
    import uvicorn

    parser = argparse.ArgumentParser(description="Todos — server-rendered page with live fallback")
    parser.add_argument("--port", type=int, default=app_config.port, help=f"Server port (default: {app_config.port})")
    parser.add_argument("--host", default=app_config.host, help=f"Server host (default: {app_config.host})")
    parser.add_argument("--todos-url", default=app_config.todos_url, help="Remote todos resource")
    parser.add_argument(
        "--no-forward",
        action="store_true",
        help="Do not hand the server-fetched todos to the page's provider (the browser fetches again)",
    )
    args = parser.parse_args()

    if args.no_forward:
        app_config.forward_ssr_data = False
    app_config.todos_url = args.todos_url
    _state._todos_service = TodosService(url=args.todos_url)

    _setup_logging(app_config.effective_log_level())

    print(f"\n  Todos — Web")
    print(f"  http://{args.host}:{args.port}/todos")
    print(f"  Source: {args.todos_url}")
    if not app_config.forward_ssr_data:
        print(f"  Server data is not forwarded; the browser refetches")
    print()

    from web import app
    uvicorn.run(app, host=args.host, port=args.port, log_level="warning")
