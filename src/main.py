"""
Main application entry point.
"""

from src.api.app import create_app
from src.config.logging import get_logger
from src.config.settings import settings

logger = get_logger(__name__)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting route planning server", port=settings.API_PORT)

    uvicorn.run(
        "src.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )
