"""CLI commands"""

from .base import Command, RenderCommand, SnapshotCommand
from .render import handle_render
from .snapshot import handle_snapshot

__all__ = [
    "Command",
    "RenderCommand",
    "SnapshotCommand",
    "handle_render",
    "handle_snapshot",
]
