"""Application logger writing to a rotating file under platformdirs user_log_dir.

The terminal belongs to the timer display while the countdown runs, so no
handler ever writes to stdout or stderr.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "focustimer_cli"
_LOG_FILE = "focustimer.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_root: logging.Logger | None = None


def _configure_root() -> logging.Logger:
    global _root
    if _root is not None:
        return _root

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    root = logging.getLogger(_APP_NAME)
    root.setLevel(logging.DEBUG)
    if not root.handlers:
        root.addHandler(handler)
    root.propagate = False

    _root = root
    return _root


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the application logger, or a child logger for *component*.

    The file handler is attached to the application logger on first call;
    children inherit it through propagation.
    """
    root = _configure_root()
    if component is None:
        return root
    return root.getChild(component)
