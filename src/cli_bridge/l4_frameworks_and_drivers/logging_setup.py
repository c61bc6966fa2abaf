"""Logging setup for the `clib` logger tree."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = '%(asctime)s %(levelname)s %(message)s'


def setup_logging(level: str, log_path: Path | None = None) -> logging.Handler:
    """Route `clib.*` records to *log_path*, or to stderr when no path is given.

    Replaces handlers installed by a previous call.
    """
    root = logging.getLogger('clib')
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding='utf-8')
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.setLevel(level)
    root.addHandler(handler)
    root.propagate = False
    logging.getLogger('clib.cli').debug('Logging started → %s', log_path or 'stderr')
    return handler
