"""API routes for Idea Ledger."""

from fastapi import APIRouter

from .ideas import router as ideas_router

# Main API router
api_router = APIRouter()
api_router.include_router(ideas_router)

__all__ = ["api_router"]
