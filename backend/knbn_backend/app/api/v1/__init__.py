"""API v1 package."""

from . import boards, workspace

__all__ = ["boards", "workspace"]
