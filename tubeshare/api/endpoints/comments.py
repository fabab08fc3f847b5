# ============================================================================
# FILE: tubeshare/api/endpoints/comments.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from tubeshare.db.session import get_db
from tubeshare.api.dependencies import require_current_user
from tubeshare.schemas.comment import (
    CommentCreate,
    CommentReactionRequest,
    CommentWithReactions,
    CommentLikeBase,
    CommentDislikeBase,
)
from tubeshare.services.comment_service import comment_service
from tubeshare.db.models.user import User

router = APIRouter()

@router.post("/comments", response_model=CommentWithReactions)
def create_comment(
    comment_data: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Comment on a video
    Requires authentication
    """
    comment = comment_service.create_comment(db, current_user.id, comment_data)
    if not comment:
        raise HTTPException(status_code=404, detail="Video not found")
    return comment

@router.post("/comment_likes", response_model=CommentLikeBase)
def like_comment(
    body: CommentReactionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    like = comment_service.like_comment(db, current_user.id, body.comment_id)
    if not like:
        raise HTTPException(status_code=404, detail="Comment not found")
    return like

@router.post("/comment_dislikes", response_model=CommentDislikeBase)
def dislike_comment(
    body: CommentReactionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    dislike = comment_service.dislike_comment(db, current_user.id, body.comment_id)
    if not dislike:
        raise HTTPException(status_code=404, detail="Comment not found")
    return dislike
