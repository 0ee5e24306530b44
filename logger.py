import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path


def setup_logger() -> logging.Logger:
    """Configure and return the main application logger."""
    log_level = os.getenv('LOG_LEVEL', 'INFO').upper()

    logger = logging.getLogger('page_window')
    logger.setLevel(getattr(logging, log_level, logging.INFO))
    logger.handlers = []
    logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    logger.addHandler(console_handler)

    # File logging is opt-in; the control is usually embedded in a host app
    log_dir = os.getenv('PAGE_WINDOW_LOG_DIR')
    if not log_dir:
        return logger

    try:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_dir / 'page_window.log',
            maxBytes=10*1024*1024,  # 10MB
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s | %(levelname)s | %(message)s',
                            datefmt='%Y-%m-%d %H:%M:%S')
        )
        logger.addHandler(file_handler)

        error_handler = RotatingFileHandler(
            log_dir / 'errors.log',
            maxBytes=10*1024*1024,  # 10MB
            backupCount=3,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(
            logging.Formatter('%(asctime)s | %(levelname)s | %(message)s',
                            datefmt='%Y-%m-%d %H:%M:%S')
        )
        logger.addHandler(error_handler)

    except OSError as e:
        # Permissions or read-only filesystem: keep console logging only
        logger.warning(f"Could not create file handlers in {log_dir}: {e}")

    return logger


def setup_navigation_logger() -> logging.Logger:
    """Configure the logger that records every page change delivered to a caller."""
    logger = logging.getLogger('page_window.navigation')
    logger.setLevel(logging.INFO)
    logger.handlers = []
    logger.propagate = False

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('[NAVIGATION] %(message)s'))
    logger.addHandler(handler)

    return logger


logger = setup_logger()
navigation_logger = setup_navigation_logger()
