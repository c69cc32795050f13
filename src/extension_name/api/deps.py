"""
extension_name.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Expose the settings the running app was built with.
"""

from __future__ import annotations

from fastapi import Request

from extension_name.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Stored by `extension_name.api.app.create_app`.
    return request.app.state.settings  # type: ignore[attr-defined]
