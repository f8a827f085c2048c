"""Run the server: `python -m demo_server` (or the `demo-server` script)."""
from __future__ import annotations

import uvicorn

from demo_server.config import get_settings
from demo_server.logging_conf import get_logger, setup_logging


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    logger = get_logger("app")

    from demo_server.main import app

    logger.info(
        f"Demo app listening on {settings.port}",
        extra={"event": "server_listen", "host": settings.host, "port": settings.port},
    )
    # log_config=None keeps uvicorn on our JSON handlers.
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
