"""
extension_name.api.routers.internal

Internal controller.

Responsibilities:
- Serve the unauthenticated greeting at `/internal/hello`.
- Stay out of the published OpenAPI document.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from extension_name.greeting import GreetingProvider

TAG = "Extension Name"


def create_router(*, greetings: GreetingProvider) -> APIRouter:
    router = APIRouter(prefix="/internal", tags=[TAG], include_in_schema=False)

    @router.get(
        "/hello",
        response_class=PlainTextResponse,
        summary="Returns a greeting message",
    )
    async def hello() -> str:
        return greetings.hello()

    return router
