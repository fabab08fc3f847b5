# ============================================================================
# FILE: tubeshare/db/models/video.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from datetime import datetime
from tubeshare.db.base import Base

class Video(Base):
    """Uploaded video metadata; the binary lives in the upload directory"""
    __tablename__ = "videos"
    
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    url = Column(String, nullable=False)  # stored file path
    thumbnail = Column(String, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # Relationships
    user = relationship("User", back_populates="videos")
    comments = relationship("Comment", back_populates="video")
    video_likes = relationship("VideoLike", back_populates="video")
    video_dislikes = relationship("VideoDislike", back_populates="video")
    watch_later = relationship("WatchLater", back_populates="video")
