"""Path sandbox anchored at the working directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .errors import AccessDeniedError, InvalidPathError

_SEPARATORS = "/\\" if os.sep == "\\" else "/"


class PathSandbox:
    """Resolve client-supplied relative paths inside a fixed root.

    Resolution is two-step: the raw string is cleaned textually (``..``
    removed, leading separators stripped), then the joined path is
    canonicalized and must still lie under the canonical root. The second
    check is the authority; it catches symlinks pointing outside the root.
    """

    def __init__(self, root: Path | str):
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    @staticmethod
    def sanitize(raw: Optional[str]) -> str:
        """Strip traversal segments and leading separators from a raw path."""
        cleaned = (raw or "").strip().replace("..", "")
        return cleaned.lstrip(_SEPARATORS)

    def resolve(self, raw: Optional[str]) -> Path:
        """Return the canonical absolute path for ``raw`` inside the root.

        Raises:
            AccessDeniedError: If the canonical path escapes the root.
            InvalidPathError: If the path contains a NUL byte.
        """
        try:
            candidate = (self._root / self.sanitize(raw)).resolve()
        except ValueError as e:
            raise InvalidPathError() from e
        if not candidate.is_relative_to(self._root):
            raise AccessDeniedError()
        return candidate

    def relative(self, path: Path | str) -> str:
        """POSIX path of ``path`` relative to the root (``""`` for the root)."""
        rel = Path(path).relative_to(self._root).as_posix()
        return "" if rel == "." else rel
