# ============================================================================
# FILE: tubeshare/core/logging.py
# ============================================================================
import logging
import sys
from tubeshare.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_configured = False

def setup_logging() -> None:
    """Configure the root logger once per process"""
    global _configured
    if _configured:
        return
    
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    
    root = logging.getLogger()
    root.setLevel(logging.getLevelName(settings.LOG_LEVEL.upper()))
    root.addHandler(handler)
    
    # SQL echo only when debugging
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )
    _configured = True
