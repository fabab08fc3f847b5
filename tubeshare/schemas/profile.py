# ============================================================================
# FILE: tubeshare/schemas/profile.py
# User record graphs returned by auth and user endpoints
# ============================================================================
from pydantic import BaseModel, Field
from typing import List
from tubeshare.schemas.user import UserBase
from tubeshare.schemas.video import VideoBase, VideoLikeBase, WatchLaterWithUser

class UserSubscriptions(UserBase):
    """User with uploads and both directions of the subscription relation"""
    videos: List[VideoBase] = []
    subscribed_by: List[UserBase] = Field(default=[], alias="subscribedBy")
    subscribing: List[UserBase] = []

class UserDetail(UserSubscriptions):
    """Full user graph resolved from a token"""
    watch_later: List[WatchLaterWithUser] = []
    video_likes: List[VideoLikeBase] = []

class AuthResponse(BaseModel):
    """Returned by /register and /login"""
    user: UserDetail
    token: str
