"""Run the relay with uvicorn.

Usage:
    python -m relay
"""

import sys

import uvicorn

from relay.config import ConfigurationError, get_settings
from relay.logging_config import get_logger
from relay.main import create_app

logger = get_logger(__name__)


def main() -> int:
    try:
        settings = get_settings()
    except ConfigurationError as e:
        logger.error(f"Refusing to start: {e}")
        return 1

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
