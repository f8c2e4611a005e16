import os
import logging

from datetime import datetime

from pythonjsonlogger.json import JsonFormatter


LOG_DIR_ENV = "SCORE_ADJUSTER_LOG_DIR"


def setup_logger(name="ScoreAdjuster", log_dir=None):
    """
    Set up a logger with a readable console handler and, when a log
    directory is configured, a JSON file handler for structured logging.

    Parameters:
        name (str): Logger name
        log_dir (str): Directory for log files. Falls back to the
            SCORE_ADJUSTER_LOG_DIR environment variable; no file
            handler is attached when neither is set.

    Returns:
        logging.Logger: Configured logger instance
    """
    log_dir = log_dir or os.getenv(LOG_DIR_ENV)

    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    # Avoid duplicate handlers if setup is called multiple times
    if logger.hasHandlers():
        logger.handlers.clear()

    # Prevent logs from bubbling up to the root logger (which causes duplicates)
    logger.propagate = False

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        date_str = datetime.now().strftime("%Y-%m-%d")
        log_file = os.path.join(log_dir, f"score_adjuster_{date_str}.log")

        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(JsonFormatter(
            '%(asctime)s %(levelname)s %(name)s %(message)s',
            rename_fields={'asctime': 'timestamp', 'levelname': 'level'}
        ))
        logger.addHandler(file_handler)

    # Console Handler (human-readable for debugging)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(levelname)s | %(name)s | %(message)s'))
    logger.addHandler(console_handler)

    return logger
