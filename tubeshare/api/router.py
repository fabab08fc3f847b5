# ============================================================================
# FILE: tubeshare/api/router.py
# ============================================================================
from fastapi import APIRouter
from tubeshare.api.endpoints import auth, users, videos, comments

api_router = APIRouter()

# Paths are mounted at the root; clients address them without a prefix
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(users.router, tags=["users"])
api_router.include_router(videos.router, tags=["videos"])
api_router.include_router(comments.router, tags=["comments"])
