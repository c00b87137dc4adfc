"""Process-wide logging setup.

File handler: everything at the configured level, rotated at 10MB.
Console handler: WARNING and above only.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .configuration import LoggingConfig

_configured = False

LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

NOISY_LOGGERS = ("httpx", "httpcore", "urllib3", "watchdog", "streamlit.watcher")


def setup_logging(config: Optional[LoggingConfig] = None, force: bool = False) -> Path:
    """Install file and console handlers on the root logger.

    Safe to call on every Streamlit rerun; handlers are only installed once
    unless ``force`` is set.

    Returns:
        Path of the log file
    """
    global _configured
    config = config or LoggingConfig()
    logs_dir = Path(config.log_dir)
    log_file_path = logs_dir / "catalogue.log"

    if _configured and not force:
        return log_file_path

    logs_dir.mkdir(parents=True, exist_ok=True)
    file_log_level = LOG_LEVEL_MAP.get(config.level.upper(), logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)
    root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=config.max_bytes,
        backupCount=config.backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    logging.getLogger(__name__).info(f"Logging configured: file={log_file_path}, console=WARNING+")
    return log_file_path
