"""
Logging setup - file-based, since the terminal belongs to the UI
"""
import logging
from pathlib import Path

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_logging(log_dir: Path, level: str = "INFO") -> Path:
    """
    Send all package logging to ``<log_dir>/lumberjack.log``

    Returns:
        Path of the log file
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "lumberjack.log"

    logger = logging.getLogger("lumberjack")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Create file handler if not already exists
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    # Keep botocore's chatter out of the log unless something goes wrong
    logging.getLogger("botocore").setLevel(logging.WARNING)

    return log_file
