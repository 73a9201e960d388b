from __future__ import annotations

import logging
from typing import IO, Optional

PROGRESS_FORMAT = "%(message)s"
ALERT_FORMAT = "%(levelname)s [%(name)s]: %(message)s"


class ProgressFormatter(logging.Formatter):
    """
    Bare messages for run progress, tagged messages for anything louder.

    "(Gen. g) BestSol = ..." / "(Iter. i) BestSol = ..." lines stay readable as
    a trace, while warnings and errors say where they come from.
    """

    def __init__(self) -> None:
        super().__init__(PROGRESS_FORMAT)
        self._alert = logging.Formatter(ALERT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno >= logging.WARNING:
            return self._alert.format(record)
        return super().format(record)


def configure_mhopt_logging(*, level: int = logging.INFO, stream: Optional[IO[str]] = None) -> Optional[logging.Handler]:
    """
    Send mhopt progress to the console at ``level``.

    Opt-in: library modules never configure logging themselves. When the
    application (or pytest) already installed handlers on the root or the
    "mhopt" logger only the level is adjusted and ``None`` is returned;
    otherwise the new handler is returned.
    """
    mhopt_logger = logging.getLogger("mhopt")
    mhopt_logger.setLevel(level)
    if logging.getLogger().handlers or mhopt_logger.handlers:
        return None

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ProgressFormatter())
    mhopt_logger.addHandler(handler)
    mhopt_logger.propagate = False
    return handler


__all__ = ["ProgressFormatter", "configure_mhopt_logging"]
