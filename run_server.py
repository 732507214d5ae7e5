import os

import uvicorn

from weather_api.config import settings
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="server")


if __name__ == "__main__":
    setup_logging(level=settings.log_level, service_name=settings.service_name)
    logger.info(f"Starting {settings.app_title} ({settings.environment})")

    uvicorn.run(
        "weather_api.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 8000)),
        reload=False,
    )
