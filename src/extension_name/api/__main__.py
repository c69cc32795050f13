"""
extension_name.api.__main__

`python -m extension_name.api` / `extension-name` console script.
"""

from __future__ import annotations

import uvicorn

from extension_name.api.app import create_app
from extension_name.settings import get_settings


def main() -> None:
    settings = get_settings()

    # structlog owns log formatting; request lines come from RequestContextMiddleware.
    uvicorn.run(
        create_app(settings=settings),
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    main()
