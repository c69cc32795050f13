"""
tests.test_registry

Controller registry and admin UI page registration.
"""

from __future__ import annotations

import httpx
import pytest
from fastapi import FastAPI

from extension_name.api.app import create_app
from extension_name.api.registry import extension_routers
from extension_name.greeting import GreetingProvider
from extension_name.privileged import SystemPrivilegedExecutor
from extension_name.settings import Settings
from extension_name.ui import AdminUiPage, register_admin_ui


def test_registry_activates_exactly_two_controllers(settings: Settings) -> None:
    routers = extension_routers(
        settings=settings,
        greetings=GreetingProvider(settings.greeting),
        privileged=SystemPrivilegedExecutor(),
    )

    assert sorted(r.prefix for r in routers) == ["/api", "/internal"]
    for router in routers:
        assert [route.path for route in router.routes] == [f"{router.prefix}/hello"]


@pytest.mark.asyncio
async def test_admin_page_is_served(app: FastAPI, client: httpx.AsyncClient) -> None:
    assert set(app.state.ui_pages) == {"extension-name-admin"}

    r = await client.get("/ui/extension-name-admin")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert 'data-page-id="extension-name-admin"' in r.text


def test_duplicate_admin_page_is_rejected(app: FastAPI) -> None:
    with pytest.raises(ValueError, match="already registered"):
        register_admin_ui(app, AdminUiPage(page_id="extension-name-admin"))


def test_admin_page_id_is_configurable() -> None:
    app = create_app(settings=Settings(env="test", admin_ui_page_id="custom-admin"))
    assert set(app.state.ui_pages) == {"custom-admin"}
