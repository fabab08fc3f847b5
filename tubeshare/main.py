# ============================================================================
# FILE: tubeshare/main.py
# ============================================================================
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from tubeshare.api.router import api_router
from tubeshare.core.logging import setup_logging
from tubeshare.config import settings
import logging
import os

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title="TubeShare API",
    description="Video sharing backend: accounts, uploads, comments, likes and subscriptions",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)

# Uploaded videos are served back from the upload directory
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/public", StaticFiles(directory=settings.UPLOAD_DIR), name="public")

@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """Store errors reach the client as a generic 400 with the driver message"""
    message = str(getattr(exc, "orig", None) or exc)
    logger.error(f"Database error on {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"detail": message})

@app.on_event("startup")
async def startup_event():
    """Create database tables on startup"""
    logger.info("Starting TubeShare API")
    from tubeshare.db.base import Base, import_models
    from tubeshare.db.session import engine
    import_models()
    Base.metadata.create_all(bind=engine)

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down TubeShare API")

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

def run():
    """Console entry point"""
    import uvicorn
    uvicorn.run("tubeshare.main:app", host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
