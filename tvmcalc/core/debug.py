# tvmcalc/core/debug.py
"""
Logging / debug helpers.

- Module code logs through `logging.getLogger(__name__)` as usual.
- When TVM_DEBUG is on, `enable_debug_logging()` attaches a rotating file
  handler to the package logger so solver diagnostics land in
  logs/tvmcalc_debug.log (or TVM_LOG_PATH).
- `print_debug_exc()` always reports to stderr and best-effort to the file.
  Logging problems never break a calculation.
"""

from __future__ import annotations

import logging
import os
import sys
import traceback
from logging.handlers import RotatingFileHandler

PACKAGE_LOGGER = "tvmcalc"
DEFAULT_LOG_PATH = os.path.join("logs", "tvmcalc_debug.log")

_LOGGER: logging.Logger | None = None


def debug_enabled() -> bool:
    return os.getenv("TVM_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}


def get_debug_logger() -> logging.Logger:
    """Create/reuse the package logger with a rotating file handler."""
    global _LOGGER
    if _LOGGER is not None:
        return _LOGGER

    logger = logging.getLogger(PACKAGE_LOGGER)

    # Avoid duplicate handlers if reloaded in REPL/tests
    if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        log_path = os.getenv("TVM_LOG_PATH") or DEFAULT_LOG_PATH
        try:
            os.makedirs(os.path.dirname(log_path) or ".", exist_ok=True)
            handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter(
                    fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
                    datefmt="(%Y-%m-%d %H:%M:%S)",
                )
            )
            logger.addHandler(handler)
        except OSError as e:
            # stderr reporting in print_debug_exc keeps working without a file
            print(f"[TVM DEBUG] could not open log file {log_path}: {e}", file=sys.stderr)

    _LOGGER = logger
    return logger


def enable_debug_logging(force: bool = False) -> logging.Logger | None:
    """Turn on DEBUG output for the package when TVM_DEBUG (or force) asks for it."""
    if not (force or debug_enabled()):
        return None
    logger = get_debug_logger()
    logger.setLevel(logging.DEBUG)
    return logger


def reset_debug_logger() -> None:
    """Detach and close file handlers (tests, long-lived hosts)."""
    global _LOGGER
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        if isinstance(h, RotatingFileHandler):
            logger.removeHandler(h)
            h.close()
    logger.setLevel(logging.NOTSET)
    _LOGGER = None


def print_debug_exc(prefix: str, exc: BaseException) -> None:
    """Always print errors to stderr and best-effort log to file."""
    msg = f"{prefix}: {exc}"
    if debug_enabled():
        tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        msg = f"{msg}\n{tb}"

    print(f"[TVM ERROR] {msg}", file=sys.stderr, flush=True)

    if _LOGGER is not None and _LOGGER.handlers:
        _LOGGER.error(msg)


__all__ = [
    "PACKAGE_LOGGER",
    "DEFAULT_LOG_PATH",
    "debug_enabled",
    "get_debug_logger",
    "enable_debug_logging",
    "reset_debug_logger",
    "print_debug_exc",
]
