"""
extension_name.api.routers.api

Public (secured) controller.

Responsibilities:
- Serve `/api/hello` behind the Secured guard.
- Obtain the greeting through the injected privileged executor.
"""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from extension_name.api.routers.internal import TAG
from extension_name.auth.deps import secured
from extension_name.greeting import GreetingProvider
from extension_name.privileged import PrivilegedExecutor


def create_router(
    *,
    greetings: GreetingProvider,
    privileged: PrivilegedExecutor,
    required_roles: Sequence[str] = (),
) -> APIRouter:
    # The guard runs before the handler, so rejected callers never reach `privileged`.
    router = APIRouter(
        prefix="/api",
        tags=[TAG],
        dependencies=[Depends(secured(*required_roles))],
    )

    @router.get(
        "/hello",
        response_class=PlainTextResponse,
        summary="Returns a greeting message",
    )
    # Plain def: host executors may block, so this runs in the threadpool.
    def hello() -> str:
        return privileged.call_privileged(greetings.hello)

    return router
