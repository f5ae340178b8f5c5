"""
Randomly Bot Service - FastAPI application.

Hosts the Bot Framework webhook for the Randomly Teams bot.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from randomly_bot.app.api.messages import router as messages_router
from randomly_bot.app.config import settings

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown."""
    logger.info("Randomly bot service starting up...")
    logger.info(f"Card templates under {settings.CONTENT_ROOT}, {len(settings.WINNER_IMAGE_URLS)} winner images")

    yield

    logger.info("Randomly bot service shutting down...")


app = FastAPI(
    title="Randomly Bot Service",
    description="Picks a random teammate from a Teams group chat or team",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(messages_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "randomly-bot",
        "version": "1.0.0"
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "randomly-bot",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "messages": "/api/messages"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
