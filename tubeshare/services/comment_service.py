# ============================================================================
# FILE: tubeshare/services/comment_service.py
# ============================================================================
from typing import Optional
from sqlalchemy.orm import Session, selectinload
from tubeshare.db.models.comment import Comment
from tubeshare.db.models.video import Video
from tubeshare.db.models.engagement import CommentLike, CommentDislike
from tubeshare.db.models import user  # noqa: F401
from tubeshare.schemas.comment import CommentCreate
import logging

logger = logging.getLogger(__name__)

class CommentService:
    """Service layer for comments and their reactions"""
    
    def create_comment(self, db: Session, user_id: int, comment_data: CommentCreate) -> Optional[Comment]:
        """Create a comment; returns None if the video does not exist"""
        if db.get(Video, comment_data.video_id) is None:
            return None
        
        try:
            comment = Comment(
                comment_text=comment_data.comment_text,
                user_id=user_id,
                video_id=comment_data.video_id,
            )
            db.add(comment)
            db.commit()
            logger.info(f"Comment created: {comment.id} on video {comment.video_id}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating comment: {e}")
            raise
        
        return (
            db.query(Comment)
            .options(selectinload(Comment.comment_likes), selectinload(Comment.comment_dislikes))
            .filter(Comment.id == comment.id)
            .first()
        )
    
    def _react(self, db: Session, row):
        try:
            db.add(row)
            db.commit()
            db.refresh(row)
            logger.info(f"{type(row).__name__} created: {row.id}")
            return row
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating {type(row).__name__}: {e}")
            raise
    
    def like_comment(self, db: Session, user_id: int, comment_id: int) -> Optional[CommentLike]:
        if db.get(Comment, comment_id) is None:
            return None
        return self._react(db, CommentLike(user_id=user_id, comment_id=comment_id))
    
    def dislike_comment(self, db: Session, user_id: int, comment_id: int) -> Optional[CommentDislike]:
        if db.get(Comment, comment_id) is None:
            return None
        return self._react(db, CommentDislike(user_id=user_id, comment_id=comment_id))

# Create singleton instance
comment_service = CommentService()
