"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/logger.py
Version:        2.1.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Logging for the GiroCode library. Silent by default; an
                application either attaches its own handlers to 'girocode'
                or calls setup_logging(). Account numbers are masked.
------------------------------------------------------------------------------
"""

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, TextIO

LIB_LOGGER_NAME = "girocode"

DEFAULT_FORMAT = "%(asctime)s [%(levelname).4s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(LIB_LOGGER_NAME).addHandler(logging.NullHandler())

# Handlers created by setup_logging(), replaced on the next call
_installed: List[logging.Handler] = []


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    component_levels: Optional[Dict[str, str]] = None,
    stream: Optional[TextIO] = None
) -> None:
    """
    Attaches console and optional file output to the 'girocode' logger.

    Calling it again replaces the handlers of the previous call. Handlers
    the application attached itself are left in place.

    Args:
        level: Level for the whole library (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional file that receives the same records.
        component_levels: Component name (e.g. 'builder') to level overrides.
        stream: Console stream, stderr by default.
    """
    root = logging.getLogger(LIB_LOGGER_NAME)

    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()

    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_path), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _installed.append(handler)

    for component, cmp_level in (component_levels or {}).items():
        set_component_level(component, cmp_level)


def get_logger(name: str) -> logging.Logger:
    """Returns the logger 'girocode.<name>' (names already prefixed are kept)."""
    if name == LIB_LOGGER_NAME or name.startswith(LIB_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LIB_LOGGER_NAME}.{name}")


def set_component_level(component: str, level: str) -> None:
    """Changes the level of one component; unknown level names are ignored."""
    numeric_level = getattr(logging, level.upper(), None)
    if isinstance(numeric_level, int):
        get_logger(component).setLevel(numeric_level)


def mask(value: str, visible: int = 4) -> str:
    """
    Hides all but the first and last `visible` characters of an account
    identifier for log output: DE02120300000000202051 -> DE02**************2051
    """
    if len(value) <= 2 * visible:
        return "*" * len(value)
    return value[:visible] + "*" * (len(value) - 2 * visible) + value[-visible:]
