"""Application settings loaded from ``KNBN_*`` environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent.parent


class KnbnSettings(BaseSettings):
    """Runtime configuration for the knbn web server.

    Attributes:
        cwd: Working directory override (``KNBN_CWD``). Board discovery is
            sandboxed to this directory; defaults to the process cwd.
        host: Bind address for the HTTP server.
        port: Port for the HTTP server.
        open_browser: Open the client in a browser after start.
        log_level: Root logging level name.
        log_file: Optional log file; console logging is always on.
        cache_ttl_ms: Lifetime of a cached board listing.
        static_dir: Directory with the built client assets.
    """

    model_config = SettingsConfigDict(env_prefix="KNBN_", extra="ignore")

    cwd: Optional[Path] = None
    host: str = "127.0.0.1"
    port: int = Field(9000, ge=1, le=65535)
    open_browser: bool = True
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    cache_ttl_ms: int = Field(5000, ge=0)
    static_dir: Path = PACKAGE_DIR / "static"

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def working_root(self) -> Path:
        """Canonical sandbox root for all client-relative paths."""
        return (self.cwd or Path.cwd()).resolve()


@lru_cache(maxsize=1)
def get_settings() -> KnbnSettings:
    """Return process-wide settings (cached; call ``cache_clear`` in tests)."""
    return KnbnSettings()
