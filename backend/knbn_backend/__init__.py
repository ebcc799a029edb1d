"""knbn web backend - local HTTP API for discovering Kanban board files."""

__version__ = "0.1.0"
