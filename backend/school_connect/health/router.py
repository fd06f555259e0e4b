import time
import logging
from fastapi import APIRouter
from school_connect.health.schemas import HealthResponse
from school_connect.config.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["health"]
)

@router.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint to verify the API is running"""
    logger.debug(f"Health check called - Environment: {settings.APP_ENV}")

    return {
        'status': 'healthy',
        'environment': settings.APP_ENV,
        'timestamp': time.time()
    }
