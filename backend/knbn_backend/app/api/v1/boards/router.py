"""Boards API router."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from knbn_backend.app.services.discovery import (
    BoardDiscoveryService,
    get_discovery_service,
)

router = APIRouter(prefix="/boards", tags=["boards"])


# ========== Request/Response Models ==========

class BoardFileResponse(BaseModel):
    """Board file found under the working directory."""
    name: str
    path: str


# ========== Helper Functions ==========

def get_service() -> BoardDiscoveryService:
    """Get discovery service dependency."""
    return get_discovery_service()


# ========== Board Endpoints ==========

@router.get("", response_model=List[BoardFileResponse])
def list_boards(
    path: str = Query("", description="Directory relative to the working directory"),
    recursive: bool = Query(False, description="Search subdirectories too"),
    force: bool = Query(False, description="Bypass the listing cache"),
    service: BoardDiscoveryService = Depends(get_service),
) -> List[BoardFileResponse]:
    """List board files in a directory.

    Recursive listings name each board by its path relative to the requested
    directory, so boards sharing a filename stay distinguishable.
    """
    boards = service.list_boards(path, recursive=recursive, force=force)
    return [BoardFileResponse(name=b.name, path=b.path) for b in boards]
