from loguru import logger

from tickertape.application.commands import (
    RenderCommand,
    SnapshotCommand,
    handle_render,
    handle_snapshot,
)
from tickertape.core.config import Config


class CommandDispatcher:
    """Dispatches CLI commands to appropriate handlers"""

    def __init__(self, config: Config) -> None:
        self.config = config
        self._handlers = {
            "render": self._handle_render,
            "steam": self._handle_steam,
        }

    async def dispatch(self, argv: list[str]) -> int:
        """Parse and execute command

        Args:
            argv: Command line arguments (sys.argv)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if len(argv) < 2:
            self._print_usage()
            return 1

        method = argv[1]
        handler = self._handlers.get(method)

        if handler is None:
            logger.error(f"Unknown command: {method}")
            self._print_usage()
            return 1

        return await handler(argv)

    def _print_usage(self) -> None:
        """Print available commands"""
        logger.error(
            "Usage: tickertape render <page.html> [<out.html>] | "
            "tickertape steam [<out.json>]"
        )

    async def _handle_render(self, argv: list[str]) -> int:
        """Handle render command"""
        if len(argv) < 3:
            logger.error("render requires a page path")
            self._print_usage()
            return 1

        command = RenderCommand(
            name="render",
            page=argv[2],
            output=argv[3] if len(argv) > 3 else None,
        )
        return await handle_render(self.config, command)

    async def _handle_steam(self, argv: list[str]) -> int:
        """Handle steam command"""
        output = argv[2] if len(argv) > 2 else None
        command = SnapshotCommand(name="steam", output=output)
        return handle_snapshot(command)
