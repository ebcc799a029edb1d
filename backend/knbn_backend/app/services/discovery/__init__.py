"""Discovery service - board files and directories under the working root."""

from .cache import BoardListingCache, CacheEntry
from .errors import (
    AccessDeniedError,
    DirectoryNotFoundError,
    DiscoveryError,
    InvalidPathError,
)
from .finder import (
    BOARD_FILE_SUFFIX,
    BoardFileFinder,
    BoardFileRef,
    DirectoryLister,
    is_directory,
)
from .sandbox import PathSandbox
from .service import BoardDiscoveryService, get_discovery_service

__all__ = [
    "BoardDiscoveryService",
    "get_discovery_service",
    "PathSandbox",
    "DirectoryLister",
    "BoardFileFinder",
    "BoardFileRef",
    "BOARD_FILE_SUFFIX",
    "is_directory",
    "BoardListingCache",
    "CacheEntry",
    # Errors
    "DiscoveryError",
    "AccessDeniedError",
    "DirectoryNotFoundError",
    "InvalidPathError",
]
