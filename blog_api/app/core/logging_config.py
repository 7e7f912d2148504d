"""
Logging setup shared by the API server and the maintenance scripts.

Every module logs through ``logging.getLogger(__name__)``; only the
root logger gets handlers, and only once per process.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_handlers(logfile: Optional[str] = None) -> List[logging.Handler]:
    """Console handler, plus a UTF-8 file handler when ``logfile`` is set."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Attach handlers to the root logger at ``level``.

    Does nothing when the root logger already has handlers (pytest's,
    or a previous ``create_app``).  Returns whether it configured
    anything.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in build_handlers(logfile):
        root.addHandler(handler)

    # Requests are already logged by ``core.middleware.log_request``.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return True
