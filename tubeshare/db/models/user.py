# ============================================================================
# FILE: tubeshare/db/models/user.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from datetime import datetime
from tubeshare.db.base import Base

# Self many-to-many: subscriber -> subscribed
subscriptions = Table(
    "subscriptions",
    Base.metadata,
    Column("subscriber_id", Integer, ForeignKey("users.id"), primary_key=True),
    Column("subscribed_id", Integer, ForeignKey("users.id"), primary_key=True),
)

class User(Base):
    """Account that uploads, comments on and reacts to videos"""
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash, never serialised
    image = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # Relationships
    videos = relationship("Video", back_populates="user")
    comments = relationship("Comment", back_populates="user")
    subscribing = relationship(
        "User",
        secondary=subscriptions,
        primaryjoin=lambda: User.id == subscriptions.c.subscriber_id,
        secondaryjoin=lambda: User.id == subscriptions.c.subscribed_id,
        back_populates="subscribed_by",
    )
    subscribed_by = relationship(
        "User",
        secondary=subscriptions,
        primaryjoin=lambda: User.id == subscriptions.c.subscribed_id,
        secondaryjoin=lambda: User.id == subscriptions.c.subscriber_id,
        back_populates="subscribing",
    )
    video_likes = relationship("VideoLike", back_populates="user")
    video_dislikes = relationship("VideoDislike", back_populates="user")
    comment_likes = relationship("CommentLike", back_populates="user")
    comment_dislikes = relationship("CommentDislike", back_populates="user")
    watch_later = relationship("WatchLater", back_populates="user")
