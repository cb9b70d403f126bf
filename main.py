import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import init_db
from app.core.logging_config import setup_logging
from app.core.storage import LOCAL_URL_PREFIX
from app.api.endpoints import health, masters, subscriptions

setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info("Starting up Job Marketplace API...")
    init_db()
    logger.info("Models registered")

    yield

    logger.info("Shutting down Job Marketplace API...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Admin API for subscription plans, plan benefits and master data of the job marketplace",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix=settings.API_V1_STR)
app.include_router(subscriptions.router, prefix=settings.API_V1_STR)
app.include_router(masters.router, prefix=settings.API_V1_STR)

# Locally stored uploads (selfies) are served directly; with S3 the bucket serves them
if not settings.USE_S3:
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    app.mount(LOCAL_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


@app.get("/")
async def root():
    """Root endpoint - API health check"""
    return {
        "message": settings.PROJECT_NAME,
        "version": "1.0.0",
        "status": "healthy"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
