# ============================================================================
# FILE: tubeshare/api/endpoints/users.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from tubeshare.db.session import get_db
from tubeshare.api.dependencies import require_current_user
from tubeshare.schemas.user import UserBase, SubscribeRequest
from tubeshare.schemas.profile import UserDetail, UserSubscriptions
from tubeshare.services.user_service import user_service
from tubeshare.db.models.user import User

router = APIRouter()

@router.get("/users", response_model=List[UserDetail])
def list_users(db: Session = Depends(get_db)):
    return user_service.list_users(db)

@router.get("/users/{user_id}", response_model=UserDetail)
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = user_service.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user

@router.patch("/subscribe", response_model=UserSubscriptions)
def subscribe(
    body: SubscribeRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Subscribe the current user to another user
    Requires authentication
    """
    user = user_service.subscribe(db, current_user, body.subscribe_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user

@router.get("/usersToSubscribe", response_model=List[UserBase])
def users_to_subscribe(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Every user other than the current one
    Requires authentication
    """
    return user_service.list_users_to_subscribe(db, current_user.id)
