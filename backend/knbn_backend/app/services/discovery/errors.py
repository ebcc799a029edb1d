"""Discovery service errors."""

from __future__ import annotations


class DiscoveryError(Exception):
    """Base error for board discovery.

    Attributes:
        status_code: HTTP status the API layer reports for this error.
    """

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AccessDeniedError(DiscoveryError):
    """Requested path resolves outside the working directory."""

    status_code = 403

    def __init__(self, message: str = "Access denied: Path outside working directory"):
        super().__init__(message)


class DirectoryNotFoundError(DiscoveryError):
    """Requested directory does not exist or is not a directory."""

    status_code = 404

    def __init__(self, path: str = ""):
        super().__init__("Directory not found")
        self.path = path


class InvalidPathError(DiscoveryError):
    """Requested path cannot be represented on the filesystem."""

    status_code = 400

    def __init__(self, message: str = "Invalid path"):
        super().__init__(message)
