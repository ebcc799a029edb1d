"""Workspace endpoints: working directory, directory navigation, version."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from knbn_backend import __version__
from knbn_backend.app.services.discovery import (
    BOARD_FILE_SUFFIX,
    BoardDiscoveryService,
    get_discovery_service,
)

router = APIRouter(tags=["workspace"])


class CwdResponse(BaseModel):
    """Working directory all relative paths are resolved against."""

    cwd: str


class DirectoriesResponse(BaseModel):
    """Subdirectory names for path typeahead."""

    directories: List[str]


class VersionResponse(BaseModel):
    """Server version information."""

    model_config = ConfigDict(populate_by_name=True)

    knbn_web: str = Field(..., alias="knbnWeb")
    board_file_suffix: str = Field(..., alias="boardFileSuffix")


def get_service() -> BoardDiscoveryService:
    return get_discovery_service()


@router.get("/cwd", response_model=CwdResponse)
def get_cwd(service: BoardDiscoveryService = Depends(get_service)) -> CwdResponse:
    """Return the working directory the server is sandboxed to."""
    return CwdResponse(cwd=str(service.working_root))


@router.get("/directories", response_model=DirectoriesResponse)
def list_directories(
    path: str = Query("", description="Directory relative to the working directory"),
    prefix: Optional[str] = Query(None, description="Case-insensitive name prefix filter"),
    service: BoardDiscoveryService = Depends(get_service),
) -> DirectoriesResponse:
    """List non-hidden subdirectories; a missing directory yields an empty list."""
    return DirectoriesResponse(directories=service.list_directories(path, prefix=prefix))


@router.get("/version", response_model=VersionResponse, response_model_by_alias=True)
def get_version() -> VersionResponse:
    """Return the server version."""
    return VersionResponse(knbn_web=__version__, board_file_suffix=BOARD_FILE_SUFFIX)
