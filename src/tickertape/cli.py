import asyncio
import sys

from loguru import logger

from tickertape.application.services.command_dispatcher import (
    CommandDispatcher,
)
from tickertape.core.config import Config


def configure_logging(level: str) -> None:
    """Route loguru to stderr and a rotating log file at ``level``"""
    logger.remove()
    logger.add(sys.stderr, level=level)
    logger.add(
        "logs/tickertape_{time}.log",
        rotation="1 day",
        retention="30 days",
        compression="gz",
        level=level,
    )


def main() -> int:
    """CLI entry point for tickertape

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        config = Config.from_env()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    configure_logging(config.log_level)
    logger.info("=" * 60)
    logger.info("TICKERTAPE")
    logger.info("=" * 60)

    dispatcher = CommandDispatcher(config)

    try:
        return asyncio.run(dispatcher.dispatch(sys.argv))
    except KeyboardInterrupt:
        logger.warning("Stopped manually.")
        return 1
    except Exception as e:
        logger.opt(exception=e).critical(f"Unhandled exception: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
