"""Optional debug log for diagnosing slow or broken status lines.

Modules log through logging.getLogger(__name__) under the cc_statusline
logger. Nothing is written unless configure_debug_logging() attaches the
rotating file handler, which only happens when debug is enabled.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .config import StatuslineConfig
from .paths import get_debug_log_path

MAX_LOG_SIZE = 1_048_576  # 1 MiB
MAX_LOG_FILES = 5

LOG_FORMAT = "[%(asctime)s.%(msecs)03d pid:%(process)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "cc_statusline"

_handler: Optional[logging.Handler] = None


def configure_debug_logging(
    config: StatuslineConfig,
    log_path: Optional[Path] = None,
) -> Optional[Path]:
    """Attach the rotating debug log handler if debug is enabled.

    Calling this again replaces the previous handler. The log directory is
    never created; if it does not exist the log stays off.

    Args:
        config: Resolved configuration.
        log_path: Log file to write. Defaults to ~/.claude/status_line_debug.log.

    Returns:
        Path of the active log file, or None if logging is disabled.
    """
    reset_debug_logging()

    if not config.debug:
        return None

    if log_path is None:
        log_path = get_debug_log_path()
    if log_path is None or not log_path.parent.is_dir():
        return None

    try:
        handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=MAX_LOG_SIZE,
            backupCount=MAX_LOG_FILES,
            encoding="utf-8",
        )
    except OSError:
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler.setLevel(logging.DEBUG)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    global _handler
    _handler = handler
    return log_path


def reset_debug_logging() -> None:
    """Detach and close the debug log handler, if any."""
    global _handler
    if _handler is None:
        return

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.removeHandler(_handler)
    logger.setLevel(logging.NOTSET)
    _handler.close()
    _handler = None
