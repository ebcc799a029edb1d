"""Top-level API router."""

from fastapi import APIRouter

from knbn_backend.app.api.v1 import boards, workspace

api_router = APIRouter(prefix="/api")
api_router.include_router(workspace.router)
api_router.include_router(boards.router)
