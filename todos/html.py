"""HTML rendering helpers for the todos page.

Every helper returns a markupsafe ``Markup`` so fragments compose without
being escaped twice; plain values passed in are always escaped.
"""

import json
from typing import Any, Iterable

from markupsafe import Markup

from .outcome import UNKNOWN

__all__ = [
    'UNKNOWN_TEXT',
    'TODOS_ELEMENT_ID',
    'serialize_todos',
    'todos_fragment',
    'link',
    'image',
    'error_view',
    'footer',
    'document',
]

UNKNOWN_TEXT = "unknown"
TODOS_ELEMENT_ID = "todos"

ATTRIBUTION_URL = (
    "https://vercel.com?utm_source=create-next-app"
    "&utm_medium=default-template&utm_campaign=create-next-app"
)


def serialize_todos(todos: Any) -> str:
    """Serialize a collection the way the page shows it.

    Example:
        >>> serialize_todos([{"id": 1, "title": "a"}])
        '[{"id":1,"title":"a"}]'
        >>> serialize_todos(UNKNOWN)
        'unknown'
    """
    if todos is UNKNOWN:
        return UNKNOWN_TEXT
    return json.dumps(todos, separators=(",", ":"), ensure_ascii=False)


def todos_fragment(todos: Any) -> Markup:
    """The consumer's output; also the unit the live session swaps in."""
    return Markup('<div id="{}">The current todos list is {}</div>').format(
        TODOS_ELEMENT_ID, serialize_todos(todos)
    )


def link(href: str, text: str) -> Markup:
    return Markup('<a href="{}">{}</a>').format(href, text)


def image(src: str, alt: str, width: int, height: int) -> Markup:
    return Markup('<img src="{}" alt="{}" width="{}" height="{}">').format(src, alt, width, height)


def error_view(message: str) -> Markup:
    """The whole output of a page whose initial fetch failed."""
    return Markup("<p>Error: {}</p>").format(message)


def footer() -> Markup:
    return Markup(
        '<footer class="footer">'
        '<a href="{}" target="_blank" rel="noopener noreferrer">'
        'Powered by <span class="logo">{}</span>'
        '</a>'
        '</footer>'
    ).format(ATTRIBUTION_URL, image("/static/vercel.svg", "Vercel Logo", 72, 16))


def document(title: str, description: str, body: Iterable[Markup], live_url: str = "") -> Markup:
    """Wrap body fragments in the page shell.

    When ``live_url`` is set the client script opens a live session there
    to fetch the collection; otherwise the page is complete as delivered.
    """
    main = Markup("").join(body)
    script = Markup("")
    if live_url:
        script = Markup('<script src="/static/todos.js" data-live-url="{}" defer></script>').format(live_url)
    return Markup(
        "<!DOCTYPE html>"
        '<html lang="en">'
        "<head>"
        '<meta charset="utf-8">'
        "<title>{title}</title>"
        '<meta name="description" content="{description}">'
        '<link rel="icon" href="/static/favicon.svg">'
        '<link rel="stylesheet" href="/static/todos.css">'
        "{script}"
        "</head>"
        "<body>"
        '<div class="container">'
        '<main class="main">{main}</main>'
        "{footer}"
        "</div>"
        "</body>"
        "</html>"
    ).format(title=title, description=description, script=script, main=main, footer=footer())
