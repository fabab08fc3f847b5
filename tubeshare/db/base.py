# ============================================================================
# FILE: tubeshare/db/base.py
# ============================================================================
from sqlalchemy.orm import declarative_base

Base = declarative_base()

def import_models():
    """Register every model on Base.metadata before create_all"""
    from tubeshare.db.models import user, video, comment, engagement  # noqa: F401
