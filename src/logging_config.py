"""Logging configuration for the volunteer matcher."""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from config.settings import settings

# Thread name is included since dispatch threads share one matcher
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s"
CONSOLE_HANDLER_NAME = "volunteer-matcher.console"
FILE_HANDLER_NAME = "volunteer-matcher.file"


def _has_handler(root: logging.Logger, name: str) -> bool:
    return any(h.get_name() == name for h in root.handlers)


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Configure application-wide logging.

    Scripts call this bare; level and file then come from LOG_LEVEL and
    LOG_FILE. Handlers added here are named, so repeated calls only
    update the level. Handlers installed by a host process are kept.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR), defaults to settings
        log_file: Optional path for rotating file handler, defaults to settings
    """
    level = level or settings.log_level
    if log_file is None:
        log_file = settings.log_file

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        console = logging.StreamHandler()
        console.set_name(CONSOLE_HANDLER_NAME)
        console.setFormatter(fmt)
        root.addHandler(console)

    if log_file and not _has_handler(root, FILE_HANDLER_NAME):
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
        )
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)
