from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def ensure_console_logger(
    logger: logging.Logger,
    handler_name: str,
    *,
    level: int = logging.INFO,
    fmt: str = _DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> None:
    """Attach a single named console handler to *logger*.

    The handler writes to *stream*, or to the current ``sys.stdout`` when no
    stream is given.  Repeated calls reuse the handler installed first,
    pointing it at the requested stream and adjusting its level.
    """
    target = stream if stream is not None else sys.stdout
    for handler in logger.handlers:
        if getattr(handler, "name", None) == handler_name:
            if isinstance(handler, logging.StreamHandler):
                handler.setStream(target)
            handler.setLevel(level)
            logger.setLevel(level)
            return
    handler = logging.StreamHandler(target)
    handler.setLevel(level)
    handler.name = handler_name
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(level)
