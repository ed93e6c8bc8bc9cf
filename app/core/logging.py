"""
Logging Setup
=============

Configures the standard library logging once at application startup.
Modules log through ``logging.getLogger(__name__)``.
"""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging handler and level.

    Safe to call more than once; only the first call installs the handler,
    later calls just adjust the level.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG"). Defaults to INFO.
    """
    global _configured
    resolved = logging.getLevelName((level or "INFO").upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    if not _configured:
        logging.basicConfig(level=resolved, format=LOG_FORMAT)
        _configured = True
    else:
        logging.getLogger().setLevel(resolved)
