"""
extension_name.api.app

FastAPI app factory for the extension-name service.

Responsibilities:
- Build the FastAPI application and register middleware, controllers and the admin UI page.
- Construct the greeting provider and privileged executor explicitly (or accept injected ones).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from extension_name import __version__
from extension_name.api.registry import extension_routers
from extension_name.greeting import GreetingProvider
from extension_name.observability.logging import configure_logging, get_logger
from extension_name.observability.middleware import RequestContextMiddleware
from extension_name.privileged import PrivilegedExecutor, SystemPrivilegedExecutor
from extension_name.settings import Settings
from extension_name.ui import AdminUiPage, register_admin_ui

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    greetings: GreetingProvider | None = None,
    privileged: PrivilegedExecutor | None = None,
) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.log_json,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        try:
            yield
        finally:
            log.info("shutdown")

    app = FastAPI(
        title="Extension Name",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    greetings = greetings or GreetingProvider(settings.greeting)
    privileged = privileged or SystemPrivilegedExecutor(subject=settings.privileged_subject)

    app.add_middleware(RequestContextMiddleware)
    for router in extension_routers(settings=settings, greetings=greetings, privileged=privileged):
        app.include_router(router)

    register_admin_ui(app, AdminUiPage(page_id=settings.admin_ui_page_id))

    return app


# --- Module Notes -----------------------------------------------------------
# Tests pass their own `privileged` executor here to observe whether secured
# handlers were reached.
