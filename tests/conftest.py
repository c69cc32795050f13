"""
tests.conftest

Shared fixtures for in-process API tests.

Responsibilities:
- Build the app with test settings and an observable privileged executor.
- Provide an httpx client bound to the app through ASGITransport.
- Mint bearer tokens the Secured guard accepts.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from extension_name.api.app import create_app
from extension_name.auth.jwt import JwtConfig, issue_token
from extension_name.settings import Settings
from tests.helpers import RecordingExecutor


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", jwt_secret="test-secret")


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture
def app(settings: Settings, executor: RecordingExecutor) -> FastAPI:
    return create_app(settings=settings, privileged=executor)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    # httpx ASGITransport does not run the lifespan; enter it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
            yield c


@pytest.fixture
def token_for(settings: Settings) -> Callable[..., str]:
    def _mint(subject: str = "alice", roles: list[str] | None = None) -> str:
        return issue_token(cfg=JwtConfig.from_settings(settings), subject=subject, roles=roles or [])

    return _mint
