# ============================================================================
# FILE: tubeshare/api/endpoints/auth.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from tubeshare.db.session import get_db
from tubeshare.api.dependencies import require_current_user
from tubeshare.schemas.user import RegisterRequest, LoginRequest
from tubeshare.schemas.profile import AuthResponse, UserDetail
from tubeshare.services.user_service import user_service
from tubeshare.core.exceptions import AuthError, ConflictError, InvalidPasswordError
from tubeshare.core.security import create_access_token
from tubeshare.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/register", response_model=AuthResponse)
def register(
    user_data: RegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new user account
    Returns the user and an access token
    """
    try:
        user = user_service.create_user(db, user_data)
    except (ConflictError, InvalidPasswordError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.detail)
    
    return {"user": user, "token": create_access_token(user.id)}

@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Login with email and password
    The error never tells which of the two was wrong
    """
    try:
        user = user_service.authenticate_user(db, credentials.email, credentials.password)
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.detail,
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    return {"user": user, "token": create_access_token(user.id)}

@router.get("/validate", response_model=UserDetail)
def validate(
    current_user: User = Depends(require_current_user)
):
    """
    Return the full user graph for the presented token
    Requires authentication
    """
    return current_user
