# ============================================================================
# FILE: tubeshare/schemas/video.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from tubeshare.schemas.user import UserBase
from tubeshare.schemas.comment import CommentBase

class SearchRequest(BaseModel):
    searched_text: str = Field(alias="searchedText")
    
    class Config:
        populate_by_name = True

class VideoReactionRequest(BaseModel):
    """Body of /video_likes, /video_dislikes and /watch_later"""
    video_id: int = Field(alias="videoId")
    
    class Config:
        populate_by_name = True

class VideoLikeBase(BaseModel):
    id: int
    user_id: int = Field(alias="userId")
    video_id: int = Field(alias="videoId")
    
    class Config:
        from_attributes = True
        populate_by_name = True

class VideoDislikeBase(VideoLikeBase):
    pass

class WatchLaterBase(VideoLikeBase):
    pass

class VideoBase(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    url: str
    thumbnail: Optional[str] = None
    user_id: int = Field(alias="userId")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    
    class Config:
        from_attributes = True
        populate_by_name = True

class VideoWithUser(VideoBase):
    user: UserBase

class VideoDetail(VideoWithUser):
    """Video with uploader, comments and reactions"""
    comments: List[CommentBase] = []
    video_likes: List[VideoLikeBase] = []
    video_dislikes: List[VideoDislikeBase] = []

class WatchLaterWithVideo(WatchLaterBase):
    video: VideoWithUser

class VideoLikeWithVideo(VideoLikeBase):
    video: VideoWithUser

class WatchLaterWithUser(WatchLaterBase):
    """Watch-later entry as embedded in a user profile"""
    video: VideoBase
    user: UserBase
