import uvicorn

from .config import settings
from .utils.logging import logger

def main():
    logger.info("Server started on %s:%s (env=%s)", settings.HOST, settings.PORT, settings.ENV)
    uvicorn.run("receipt_points.main:app", host=settings.HOST, port=settings.PORT,
                log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    main()
