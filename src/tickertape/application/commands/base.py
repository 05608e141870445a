from dataclasses import dataclass


@dataclass
class Command:
    """Base command class"""

    name: str


@dataclass
class RenderCommand(Command):
    """Refresh the ticker strip of an HTML page"""

    page: str = ""
    output: str | None = None


@dataclass
class SnapshotCommand(Command):
    """Write the Steam profile snapshot"""

    output: str | None = None
