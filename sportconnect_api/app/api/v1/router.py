"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import auth, matches, rankings, users

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(matches.router, prefix="/matches", tags=["matches"])
router.include_router(rankings.router, prefix="/rankings", tags=["rankings"])
