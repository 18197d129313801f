import logging
import os
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler

from config.settings import LOG_DIR, LOG_LEVEL

LOGGER_NAME = "Dagmaal"
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'

def setup_logging(log_dir=LOG_DIR, level=LOG_LEVEL):
    """
    Configure the "Dagmaal" logger: a daily log file under log_dir plus the
    console, both at the given level (name or number).

    Handlers go on the app logger rather than the root logger, so the level
    holds even when something else configured logging first. Calling it
    again replaces the previous handlers.
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(level)

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, f"dagmaal_{datetime.now().strftime('%Y%m%d')}.log")

    # Rotate at midnight, keep the last 7 days
    file_handler = TimedRotatingFileHandler(log_file, when="midnight", interval=1, backupCount=7, encoding='utf-8')
    console_handler = logging.StreamHandler()

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        app_logger.addHandler(handler)

    return app_logger

logger = setup_logging()
