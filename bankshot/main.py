"""Main entry point for the BankShot API server."""

import argparse
import logging
from typing import NoReturn, Optional

from bankshot.config import Config, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="BankShot - direct and bank shot solver API server"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config.json",
        help="Path to configuration file (default: ./config.json)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> NoReturn:
    """Main entry point for the application."""
    args = parse_args(argv)

    # Set the config file path before the app factory reads it
    config = Config.set_config_file(args.config)
    settings = config.settings()
    setup_logging(settings.logging)

    api = settings.api
    logger.info(f"Starting BankShot API on {api.host}:{api.port}")
    logger.info(f"Log level: {api.log_level}")

    import uvicorn

    uvicorn.run(
        "bankshot.api.main:create_app",
        factory=True,
        host=api.host,
        port=api.port,
        log_level=api.log_level.lower(),
        reload=api.reload,
    )

    raise SystemExit(0)


if __name__ == "__main__":
    main()
