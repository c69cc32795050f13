"""
extension_name.api.registry

REST application registry.

Responsibilities:
- Build the set of extension controllers activated by the app factory.
"""

from __future__ import annotations

from fastapi import APIRouter

from extension_name.api.routers import api, internal
from extension_name.greeting import GreetingProvider
from extension_name.privileged import PrivilegedExecutor
from extension_name.settings import Settings


def extension_routers(
    *,
    settings: Settings,
    greetings: GreetingProvider,
    privileged: PrivilegedExecutor,
) -> tuple[APIRouter, ...]:
    return (
        api.create_router(
            greetings=greetings,
            privileged=privileged,
            required_roles=settings.api_required_roles,
        ),
        internal.create_router(greetings=greetings),
    )
