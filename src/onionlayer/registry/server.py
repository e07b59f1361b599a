"""Directory service process entry point."""

from __future__ import annotations

import logging
import sys

import uvicorn

from ..types import RegistrySettings
from .app import create_app
from .debug import DebugKeyStore
from .store import NodeRegistry

logger = logging.getLogger("onionlayer")


def setup_logging(level: str) -> None:
    """Configure process-wide logging for the server."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def run(settings: RegistrySettings | None = None) -> None:
    """Run the directory service until interrupted.

    Args:
        settings: Service settings. Read from the environment if omitted.
    """
    settings = settings or RegistrySettings.from_env()
    setup_logging(settings.log_level)

    debug_store = DebugKeyStore() if settings.enable_debug_routes else None
    app = create_app(NodeRegistry(), debug_store, settings)

    logger.info("Registry is listening on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


def main() -> None:
    """Console script entry point."""
    run()


if __name__ == "__main__":
    main()
