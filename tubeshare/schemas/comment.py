# ============================================================================
# FILE: tubeshare/schemas/comment.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

class CommentCreate(BaseModel):
    comment_text: str = Field(alias="commentText")
    video_id: int = Field(alias="videoId")
    
    class Config:
        populate_by_name = True

class CommentReactionRequest(BaseModel):
    """Body of /comment_likes and /comment_dislikes"""
    comment_id: int = Field(alias="commentId")
    
    class Config:
        populate_by_name = True

class CommentLikeBase(BaseModel):
    id: int
    user_id: int = Field(alias="userId")
    comment_id: int = Field(alias="commentId")
    
    class Config:
        from_attributes = True
        populate_by_name = True

class CommentDislikeBase(CommentLikeBase):
    pass

class CommentBase(BaseModel):
    id: int
    comment_text: str = Field(alias="commentText")
    user_id: int = Field(alias="userId")
    video_id: int = Field(alias="videoId")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    
    class Config:
        from_attributes = True
        populate_by_name = True

class CommentWithReactions(CommentBase):
    """Comment as returned right after creation"""
    comment_likes: List[CommentLikeBase] = []
    comment_dislikes: List[CommentDislikeBase] = []
