"""Snapshot command handler"""

from loguru import logger

from tickertape.shared.exceptions import ConfigurationError, SnapshotError
from tickertape.snapshot.steam import SteamConfig, run_snapshot

from .base import SnapshotCommand


def handle_snapshot(command: SnapshotCommand) -> int:
    """Run the Steam snapshot job; any failure is fatal

    Returns:
        Exit code (0 for success, 1 for any failure)
    """
    try:
        config = SteamConfig.from_env()
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    try:
        run_snapshot(config, output_path=command.output)
    except SnapshotError as e:
        logger.error(f"Error: {e}")
        return 1

    return 0
