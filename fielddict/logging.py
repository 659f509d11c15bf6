"""Logging setup for fielddict.

Records emitted under the ``fielddict`` logger carry the SObject currently
being analyzed as ``record.sobject``. The orchestrator binds it with
:func:`object_context`, so a log file shared by several runs (or several
service requests) can be read per object.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Iterator, List

ROOT_LOGGER = "fielddict"
CONSOLE_FORMAT = "[fielddict] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s [%(sobject)s] %(name)s: %(message)s"
NO_OBJECT = "-"

_current_object: ContextVar[str] = ContextVar("fielddict_object", default=NO_OBJECT)


class ObjectContextFilter(logging.Filter):
    """Stamps each record with the object bound by :func:`object_context`."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.sobject = _current_object.get()
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    full_name = f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER
    return logging.getLogger(full_name)


@contextmanager
def object_context(object_name: str) -> Iterator[None]:
    """Bind ``object_name`` to every fielddict record logged inside the block."""
    token = _current_object.set(object_name or NO_OBJECT)
    try:
        yield
    finally:
        _current_object.reset(token)


def set_verbosity(verbose: bool) -> None:
    """Switch the fielddict logger and its handlers between INFO and DEBUG."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install console (and optional file) handlers on the fielddict logger.

    Calling it again replaces the previous handlers.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers: List[logging.Handler] = [console]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        handler.addFilter(ObjectContextFilter())
        logger.addHandler(handler)

    set_verbosity(verbose)
    return logger


__all__ = [
    "ObjectContextFilter",
    "configure_logging",
    "get_logger",
    "object_context",
    "set_verbosity",
]
