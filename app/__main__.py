import logging

import uvicorn

from app.main import app
from app.settings import get_settings

logger = logging.getLogger("user_service")


def main() -> None:
    settings = get_settings()
    logger.info("Listening on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
