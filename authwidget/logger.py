from __future__ import annotations

import logging
import os
import sys
import textwrap

logger = logging.getLogger("authwidget")

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_HANDLER_ATTR = "_authwidget_handler"


def _parse_level(raw: str | None, default: int = logging.WARNING) -> int:
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging() -> logging.Logger:
    """
    Attach a single stderr handler to the `authwidget` logger.

    Safe to call repeatedly (every create_app() does); the level is re-read from
    AUTHWIDGET_LOG_LEVEL each time.
    """
    level = _parse_level(os.environ.get("AUTHWIDGET_LOG_LEVEL"))
    logger.setLevel(level)
    if not any(getattr(h, _HANDLER_ATTR, False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)
    return logger


def debug_message(message: str) -> None:
    """
    Warn with a triple-quoted message, minus its source indentation.

    Blank lines at either end are trimmed and the text is framed by one newline on
    each side, so the message starts on its own line in the console.
    """
    normalized = "\n" + textwrap.dedent(message).strip("\n") + "\n"
    logger.warning(normalized)
