"""
journal_daemon.api.__main__

Entrypoint for running the daemon via `python -m journal_daemon.api`.
"""

from __future__ import annotations

import uvicorn

from journal_daemon.api.app import create_app
from journal_daemon.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
