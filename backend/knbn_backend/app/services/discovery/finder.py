"""Filesystem scanning for board files and navigable directories.

Two scanners live here:
1. ``DirectoryLister``: immediate, non-hidden subdirectories (path typeahead)
2. ``BoardFileFinder``: ``*.knbn`` files, either shallow or recursive

Both work on paths that were already validated by ``PathSandbox``.
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

BOARD_FILE_SUFFIX = ".knbn"
HIDDEN_PREFIX = "."

SkipHook = Callable[[Path, OSError], None]


@dataclass(frozen=True)
class BoardFileRef:
    """A board file found on disk.

    Attributes:
        name: Display name. Bare filename for shallow listings, POSIX path
            relative to the search root for recursive listings.
        path: Absolute path of the board file.
    """

    name: str
    path: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "path": self.path}


def _is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def is_directory(path: Path) -> bool:
    """True if ``path`` is an existing directory; any OS error counts as missing."""
    try:
        return path.is_dir()
    except OSError:
        return False


class DirectoryLister:
    """List immediate child directories of a path."""

    def list_directories(self, target: Path, prefix: Optional[str] = None) -> List[str]:
        """Return sorted names of non-hidden subdirectories of ``target``.

        A missing, non-directory or unreadable target yields an empty list.
        ``prefix`` keeps only names starting with it, ignoring case.
        """
        if not is_directory(target):
            return []

        try:
            with os.scandir(target) as it:
                names = [
                    entry.name
                    for entry in it
                    if not _is_hidden(entry.name) and _entry_is_dir(entry)
                ]
        except OSError as e:
            logger.warning("Cannot list directories in %s: %s", target, e)
            return []

        if prefix:
            needle = prefix.lower()
            names = [n for n in names if n.lower().startswith(needle)]

        return sorted(names)


def _entry_is_dir(entry: os.DirEntry, follow_symlinks: bool = True) -> bool:
    try:
        return entry.is_dir(follow_symlinks=follow_symlinks)
    except OSError:
        return False


def _entry_is_file(entry: os.DirEntry, follow_symlinks: bool = False) -> bool:
    try:
        return entry.is_file(follow_symlinks=follow_symlinks)
    except OSError:
        return False


class BoardFileFinder:
    """Find board files under a directory.

    Unreadable directories are skipped rather than failing the listing; each
    skip is logged and handed to ``on_skip`` when one is given.

    Shallow listings include symlinked board files, as the directory itself
    was already checked by the sandbox. The recursive walk follows no links.
    ``walk_count`` counts uncached walks; updates hold a lock since
    requests run on a thread pool.
    """

    def __init__(
        self,
        suffix: str = BOARD_FILE_SUFFIX,
        on_skip: Optional[SkipHook] = None,
    ):
        self.suffix = suffix
        self.on_skip = on_skip
        self.walk_count = 0
        self._count_lock = threading.Lock()

    def _is_board(self, entry: os.DirEntry, follow_symlinks: bool = False) -> bool:
        return entry.name.endswith(self.suffix) and _entry_is_file(entry, follow_symlinks)

    def _count_walk(self) -> None:
        with self._count_lock:
            self.walk_count += 1

    def _skip(self, path: Path, error: OSError) -> None:
        logger.warning("Skipping unreadable path %s: %s", path, error)
        if self.on_skip is not None:
            self.on_skip(path, error)

    def _scan(self, directory: Path) -> List[os.DirEntry]:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda e: e.name)

    def find_shallow(self, search_dir: Path) -> List[BoardFileRef]:
        """Board files directly inside ``search_dir``, named by filename."""
        self._count_walk()
        try:
            entries = self._scan(search_dir)
        except OSError as e:
            self._skip(search_dir, e)
            return []

        return [
            BoardFileRef(name=entry.name, path=str(search_dir / entry.name))
            for entry in entries
            if self._is_board(entry, follow_symlinks=True)
        ]

    def find_recursive(
        self,
        search_dir: Path,
        base_dir: Optional[Path] = None,
    ) -> List[BoardFileRef]:
        """Board files anywhere below ``search_dir``, skipping hidden directories.

        Names are relative to ``base_dir`` (defaults to ``search_dir``), so
        boards sharing a filename in different subdirectories stay distinct.
        """
        self._count_walk()
        base = base_dir if base_dir is not None else search_dir
        results: List[BoardFileRef] = []

        # Depth-first with an explicit stack; children pushed in reverse so
        # they pop in name order.
        stack: List[Path] = [search_dir]
        while stack:
            current = stack.pop()
            try:
                entries = self._scan(current)
            except OSError as e:
                self._skip(current, e)
                continue

            subdirs: List[Path] = []
            for entry in entries:
                full_path = current / entry.name
                if _entry_is_dir(entry, follow_symlinks=False):
                    if not _is_hidden(entry.name):
                        subdirs.append(full_path)
                elif self._is_board(entry):
                    results.append(
                        BoardFileRef(
                            name=full_path.relative_to(base).as_posix(),
                            path=str(full_path),
                        )
                    )
            stack.extend(reversed(subdirs))

        return results
