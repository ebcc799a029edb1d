"""Board discovery service - sandboxed board and directory listings.

This service combines:
1. PathSandbox: client-relative paths resolved inside the working root
2. DirectoryLister: subdirectory suggestions for path typeahead
3. BoardFileFinder: shallow or recursive ``*.knbn`` search
4. BoardListingCache: short-lived listing cache with forced refresh

Board contents are never read here; parsing and persistence belong to the
board library.
"""

from __future__ import annotations

import logging
from functools import lru_cache, partial
from pathlib import Path
from typing import List, Optional

from knbn_backend.app.core.config import get_settings
from .cache import DEFAULT_TTL_MS, BoardListingCache
from .errors import DirectoryNotFoundError, InvalidPathError
from .finder import BoardFileFinder, BoardFileRef, DirectoryLister, is_directory
from .sandbox import PathSandbox

logger = logging.getLogger(__name__)


class BoardDiscoveryService:
    """Find board files and navigable directories under a working root.

    Example usage:
        service = BoardDiscoveryService(Path("/home/me/projects"))

        service.list_directories("clients/")
        # ["acme", "globex"]

        service.list_boards("clients", recursive=True)
        # [BoardFileRef(name="acme/roadmap.knbn", path="/home/me/projects/clients/acme/roadmap.knbn")]
    """

    def __init__(
        self,
        working_root: Path | str,
        *,
        cache: Optional[BoardListingCache] = None,
        finder: Optional[BoardFileFinder] = None,
        lister: Optional[DirectoryLister] = None,
    ):
        """Initialize the service.

        Args:
            working_root: Sandbox root; every returned path lies inside it.
            cache: Listing cache. A fresh one with the default TTL if None.
            finder: Board file finder, injectable for tests.
            lister: Directory lister, injectable for tests.
        """
        self.sandbox = PathSandbox(working_root)
        self.cache = cache if cache is not None else BoardListingCache(DEFAULT_TTL_MS)
        self.finder = finder if finder is not None else BoardFileFinder()
        self.lister = lister if lister is not None else DirectoryLister()

    @property
    def working_root(self) -> Path:
        return self.sandbox.root

    def list_directories(self, path: Optional[str] = "", prefix: Optional[str] = None) -> List[str]:
        """List non-hidden subdirectories of a client-relative path.

        Missing directories and unrepresentable paths produce an empty list.

        Raises:
            AccessDeniedError: If the path resolves outside the working root.
        """
        try:
            target = self.sandbox.resolve(path)
        except InvalidPathError:
            return []
        return self.lister.list_directories(target, prefix=prefix)

    def list_boards(
        self,
        path: Optional[str] = "",
        *,
        recursive: bool = False,
        force: bool = False,
    ) -> List[BoardFileRef]:
        """List board files in a client-relative directory.

        Args:
            path: Directory relative to the working root.
            recursive: Descend into non-hidden subdirectories.
            force: Bypass the cache and replace the stored listing.

        Raises:
            AccessDeniedError: If the path resolves outside the working root.
            DirectoryNotFoundError: If the directory does not exist.
            InvalidPathError: If the path contains a NUL byte.
        """
        target = self.sandbox.resolve(path)
        if not is_directory(target):
            raise DirectoryNotFoundError(self.sandbox.relative(target))

        if recursive:
            key = (target, target)
            loader = partial(self.finder.find_recursive, target, target)
        else:
            key = (target, None)
            loader = partial(self.finder.find_shallow, target)

        boards = self.cache.get_or_load(key, loader, force=force)
        logger.info(
            "listed boards dir=%r recursive=%s force=%s count=%d",
            self.sandbox.relative(target),
            recursive,
            force,
            len(boards),
        )
        return boards

    def invalidate(self) -> None:
        """Drop every cached listing."""
        self.cache.clear()


@lru_cache(maxsize=1)
def get_discovery_service() -> BoardDiscoveryService:
    """Get the process-wide discovery service built from settings."""
    settings = get_settings()
    return BoardDiscoveryService(
        settings.working_root,
        cache=BoardListingCache(ttl_ms=settings.cache_ttl_ms),
    )
