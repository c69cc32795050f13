"""
extension_name.ui

Admin UI page registration.

Responsibilities:
- Register the extension's admin page under its unique page id.
- Serve a minimal HTML shell for that page; real rendering belongs to the host.
"""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from extension_name.observability.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class AdminUiPage:
    page_id: str
    title: str = "Administration"


def _render_shell(page: AdminUiPage) -> str:
    title = escape(page.title)
    page_id = escape(page.page_id, quote=True)
    return (
        "<!DOCTYPE html>\n"
        f"<html><head><meta charset=\"utf-8\"><title>{title}</title></head>\n"
        f"<body><div id=\"app\" data-page-id=\"{page_id}\"></div></body></html>\n"
    )


def register_admin_ui(app: FastAPI, page: AdminUiPage) -> None:
    pages: dict[str, AdminUiPage] | None = getattr(app.state, "ui_pages", None)
    if pages is None:
        pages = app.state.ui_pages = {}
    if page.page_id in pages:
        raise ValueError(f"Admin UI page already registered: {page.page_id}")
    pages[page.page_id] = page

    body = _render_shell(page)

    @app.get(f"/ui/{page.page_id}", response_class=HTMLResponse, include_in_schema=False)
    async def admin_page() -> str:
        return body

    log.info("admin_ui_registered", page_id=page.page_id)
