# ============================================================================
# FILE: tubeshare/core/storage.py
# Upload sink for video binaries
# ============================================================================
from fastapi import UploadFile
import os
import shutil
import uuid
import logging

logger = logging.getLogger(__name__)

class UploadStorage:
    """Writes uploaded files under a single directory with collision-free names"""
    
    def __init__(self, root: str):
        self.root = root
    
    def build_name(self, original_filename: str) -> str:
        """Random key that keeps the client's extension"""
        _, ext = os.path.splitext(os.path.basename(original_filename or ""))
        return f"{uuid.uuid4().hex}{ext.lower()}"
    
    def save(self, upload: UploadFile) -> str:
        """
        Persist the upload and return the stored path (relative to the
        working directory, e.g. public/<key>.mp4)
        """
        os.makedirs(self.root, exist_ok=True)
        path = os.path.join(self.root, self.build_name(upload.filename))
        
        with open(path, "wb") as f:
            shutil.copyfileobj(upload.file, f)
        
        logger.info(f"Stored upload {upload.filename!r} -> {path}")
        return path
    
    def discard(self, path: str) -> None:
        """Remove a stored file whose row never got created"""
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.error(f"Failed to remove orphaned upload {path}: {e}")
