# ============================================================================
# FILE: tubeshare/api/dependencies.py
# ============================================================================
from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session
from tubeshare.db.session import get_db
from tubeshare.db.models.user import User
from tubeshare.core.exceptions import AuthError
from tubeshare.core.storage import UploadStorage
from tubeshare.services.user_service import user_service
from tubeshare.config import settings
from typing import Optional
import logging

logger = logging.getLogger(__name__)

def get_token(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    """
    The raw token travels in the Authorization header.
    A "Bearer " prefix is tolerated and stripped.
    """
    if not authorization:
        return None
    token = authorization.strip()
    if token.lower().startswith("bearer "):
        token = token[7:].strip()
    return token or None

def require_current_user(
    token: Optional[str] = Depends(get_token),
    db: Session = Depends(get_db)
) -> User:
    """
    Resolve the token to a user (raises 401 if missing or invalid)
    Use this dependency for protected endpoints
    """
    try:
        return user_service.get_user_from_token(db, token)
    except AuthError as e:
        logger.warning(f"Rejected token: {e.detail}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

def get_storage() -> UploadStorage:
    """Upload sink rooted at the configured directory"""
    return UploadStorage(settings.UPLOAD_DIR)
