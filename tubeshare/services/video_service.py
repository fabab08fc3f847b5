# ============================================================================
# FILE: tubeshare/services/video_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from tubeshare.db.models.video import Video
from tubeshare.db.models.engagement import VideoLike, VideoDislike, WatchLater
from tubeshare.db.models import user, comment  # noqa: F401  mappers referenced by VIDEO_GRAPH
import logging

logger = logging.getLogger(__name__)

VIDEO_GRAPH = (
    selectinload(Video.user),
    selectinload(Video.comments),
    selectinload(Video.video_likes),
    selectinload(Video.video_dislikes),
)

# Join rows returned together with their video and its uploader
WITH_VIDEO_AND_UPLOADER = (
    selectinload(WatchLater.video).selectinload(Video.user),
)

class VideoService:
    """Service layer for videos and per-video engagement"""
    
    def create_video(
        self,
        db: Session,
        user_id: int,
        title: str,
        description: Optional[str],
        url: str,
        thumbnail: Optional[str] = None,
    ) -> Video:
        """Create the row for an already stored upload"""
        try:
            video = Video(
                title=title,
                description=description,
                url=url,
                thumbnail=thumbnail,
                user_id=user_id,
            )
            db.add(video)
            db.commit()
            db.refresh(video)
            logger.info(f"Video created: {video.id} by user {user_id}")
            return video
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating video: {e}")
            raise
    
    def list_videos(self, db: Session) -> List[Video]:
        return db.query(Video).options(*VIDEO_GRAPH).order_by(Video.id).all()
    
    def get_video(self, db: Session, video_id: int) -> Optional[Video]:
        return db.query(Video).options(*VIDEO_GRAPH).filter(Video.id == video_id).first()
    
    def search_videos(self, db: Session, text: str) -> List[Video]:
        """
        Substring match on title. Case sensitivity follows the database's
        LIKE semantics; no ranking or pagination.
        """
        return (
            db.query(Video)
            .options(selectinload(Video.user))
            .filter(Video.title.contains(text, autoescape=True))
            .order_by(Video.id)
            .all()
        )
    
    def _add_row(self, db: Session, row):
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
    
    def like_video(self, db: Session, user_id: int, video_id: int) -> Optional[VideoLike]:
        """Add a like row; returns None if the video does not exist"""
        if db.get(Video, video_id) is None:
            return None
        return self._add_row(db, VideoLike(user_id=user_id, video_id=video_id))
    
    def dislike_video(self, db: Session, user_id: int, video_id: int) -> Optional[VideoDislike]:
        if db.get(Video, video_id) is None:
            return None
        return self._add_row(db, VideoDislike(user_id=user_id, video_id=video_id))
    
    def add_watch_later(self, db: Session, user_id: int, video_id: int) -> Optional[WatchLater]:
        if db.get(Video, video_id) is None:
            return None
        entry = self._add_row(db, WatchLater(user_id=user_id, video_id=video_id))
        return (
            db.query(WatchLater)
            .options(*WITH_VIDEO_AND_UPLOADER)
            .filter(WatchLater.id == entry.id)
            .first()
        )
    
    def list_watch_later(self, db: Session, user_id: int) -> List[WatchLater]:
        return (
            db.query(WatchLater)
            .options(*WITH_VIDEO_AND_UPLOADER)
            .filter(WatchLater.user_id == user_id)
            .order_by(WatchLater.id)
            .all()
        )
    
    def list_liked_videos(self, db: Session, user_id: int) -> List[VideoLike]:
        """The user's like rows, each with its video and uploader"""
        return (
            db.query(VideoLike)
            .options(selectinload(VideoLike.video).selectinload(Video.user))
            .filter(VideoLike.user_id == user_id)
            .order_by(VideoLike.id)
            .all()
        )

# Create singleton instance
video_service = VideoService()
