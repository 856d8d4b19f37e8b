"""Emergency Medicare Planner — MCP stdio server entry point.

Invariants:
    - Logging configured before the transport starts (stderr only)
    - A transport failure at start-up is logged and exits with status 1
    - Ctrl-C exits quietly with status 0

Design Decisions:
    - asyncio.run in a plain function: usable as a console script and via python -m
"""

import asyncio
import logging
import sys

from emergency_planner.config import get_settings
from emergency_planner.infrastructure.mcp_server import serve
from emergency_planner.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def run() -> None:
    """Console-script entry: emergency-medicare-planner."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if not settings.location_services_configured:
        logger.info("GOOGLE_MAPS_API_KEY not set; facility search uses reference data only")
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Emergency Medicare Planner shutting down")
    except Exception as e:
        logger.critical(f"Fatal error running server: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    run()
