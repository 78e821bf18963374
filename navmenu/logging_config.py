"""Opt-in log output for the ``navmenu`` logger hierarchy.

The package only emits records; nothing here runs on import. Applications that
want to see filter rejections or render traces call :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "navmenu"

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_HANDLER_MARKER = "_navmenu_handler"


def configure_logging(
    level: int = logging.DEBUG,
    handler: Optional[logging.Handler] = None,
    *,
    propagate: bool = False,
) -> logging.Handler:
    """Attach a formatted handler to the ``navmenu`` logger and return it.

    Parameters
    ----------
    level:
        Level applied to the ``navmenu`` logger, so e.g. ``DEBUG`` shows the
        ``menu.add.rejected`` and ``trace.*`` events.
    handler:
        Handler receiving navmenu records. Defaults to ``sys.stderr``.
    propagate:
        Whether records still reach the root logger's handlers as well.

    Handlers installed by an earlier call are replaced; handlers the
    application attached to ``navmenu`` itself are kept.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    installed = handler if handler is not None else logging.StreamHandler(sys.stderr)
    installed.setFormatter(logging.Formatter(_LOG_FORMAT))
    setattr(installed, _HANDLER_MARKER, True)

    reset_logging()
    logger.setLevel(level)
    logger.propagate = propagate
    logger.addHandler(installed)
    return installed


def reset_logging() -> None:
    """Remove handlers added by :func:`configure_logging` and restore defaults."""

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            logger.removeHandler(existing)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


__all__ = ["PACKAGE_LOGGER", "configure_logging", "reset_logging"]
