import uvicorn
from constants import HOST, PORT, LOG_LEVEL, LOG_FILE
from logging_config import setup_logging, get_logging_config

# Setup logging before importing app
setup_logging(log_level=LOG_LEVEL, log_file=LOG_FILE)

from app import app
from logging_config import get_logger

logger = get_logger(__name__)


def main():
    logger.info(f"Starting mentoring session server on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT, log_config=get_logging_config(LOG_LEVEL, LOG_FILE))


if __name__ == "__main__":
    main()
