"""
Logging setup for the preview application.
Writes a dated log file under ~/.rainbow_preview/logs.
"""
import datetime
import logging
from pathlib import Path

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(name="rainbow", logs_dir=None, level=logging.INFO):
    """
    Setup a logger with file output
    Args:
        name (str): Logger name
        logs_dir (Path): Directory for log files, ~/.rainbow_preview/logs by default
        level (int): Logging level
    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear any existing handlers
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    if logs_dir is None:
        logs_dir = Path.home() / ".rainbow_preview" / "logs"
    logs_dir = Path(logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.datetime.now().strftime("%Y%m%d")
    log_file = logs_dir / f"rainbow_preview_{timestamp}.log"

    file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)

    return logger


def get_logger(name="rainbow"):
    """
    Get a configured logger, setting it up on first use
    Returns:
        logging.Logger: Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        setup_logger(name)
    return logger
