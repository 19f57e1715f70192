import logging

import uvicorn

from .core.config import get_settings
from .core.logging import configure_logging

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Launching resume ATS API ({settings.env})")
    uvicorn.run(
        "resume_ats.main_api:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.env == "development",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
