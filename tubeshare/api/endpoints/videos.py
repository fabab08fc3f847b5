# ============================================================================
# FILE: tubeshare/api/endpoints/videos.py
# ============================================================================
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session
from typing import List, Optional
from tubeshare.db.session import get_db
from tubeshare.api.dependencies import require_current_user, get_storage
from tubeshare.core.storage import UploadStorage
from tubeshare.schemas.video import (
    VideoBase,
    VideoDetail,
    VideoWithUser,
    VideoReactionRequest,
    VideoLikeBase,
    VideoDislikeBase,
    VideoLikeWithVideo,
    WatchLaterWithVideo,
    SearchRequest,
)
from tubeshare.services.video_service import video_service
from tubeshare.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/video", response_model=VideoBase)
def upload_video(
    title: str = Form(...),
    description: str = Form(...),
    thumbnail: Optional[str] = Form(None),
    url: UploadFile = File(...),
    db: Session = Depends(get_db),
    storage: UploadStorage = Depends(get_storage),
    current_user: User = Depends(require_current_user)
):
    """
    Upload a video file (multipart field "url") with its metadata
    Requires authentication
    """
    path = storage.save(url)
    try:
        return video_service.create_video(
            db,
            user_id=current_user.id,
            title=title,
            description=description,
            url=path,
            thumbnail=thumbnail,
        )
    except Exception:
        storage.discard(path)
        raise

@router.get("/videos", response_model=List[VideoDetail])
def list_videos(db: Session = Depends(get_db)):
    return video_service.list_videos(db)

@router.get("/videos/{video_id}", response_model=VideoDetail)
def get_video(video_id: int, db: Session = Depends(get_db)):
    video = video_service.get_video(db, video_id)
    if not video:
        raise HTTPException(status_code=404, detail="Video not found")
    return video

@router.post("/search", response_model=List[VideoWithUser])
def search_videos(body: SearchRequest, db: Session = Depends(get_db)):
    """
    Videos whose title contains the searched text
    Empty list when nothing matches
    """
    return video_service.search_videos(db, body.searched_text)

@router.post("/video_likes", response_model=VideoLikeBase)
def like_video(
    body: VideoReactionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Like a video. Every call adds a row.
    Requires authentication
    """
    like = video_service.like_video(db, current_user.id, body.video_id)
    if not like:
        raise HTTPException(status_code=404, detail="Video not found")
    return like

@router.post("/video_dislikes", response_model=VideoDislikeBase)
def dislike_video(
    body: VideoReactionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    dislike = video_service.dislike_video(db, current_user.id, body.video_id)
    if not dislike:
        raise HTTPException(status_code=404, detail="Video not found")
    return dislike

@router.post("/watch_later", response_model=WatchLaterWithVideo)
def add_watch_later(
    body: VideoReactionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Save a video to the current user's watch-later list
    Requires authentication
    """
    entry = video_service.add_watch_later(db, current_user.id, body.video_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Video not found")
    return entry

@router.get("/watch_later", response_model=List[WatchLaterWithVideo])
def list_watch_later(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    return video_service.list_watch_later(db, current_user.id)

@router.get("/likedVideos", response_model=List[VideoLikeWithVideo])
def liked_videos(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Like rows of the current user, each with its video
    Requires authentication
    """
    return video_service.list_liked_videos(db, current_user.id)
