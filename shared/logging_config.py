"""Central logging configuration for the sketch sound helpers.

Format negotiation degrades silently: a sketch keeps running when none of its
declared formats is playable, and the only trace is a warning from
``sound_tools.resolver``.  This module sends those records to one log file
whose threshold comes from the ``logging.verbosity`` entry of ``sound.json``.

``SKETCH_SOUND_LOG_FILE`` names the log file outright; otherwise
``SKETCH_SOUND_LOG_DIR`` names the directory that holds ``sound.log``.
Without either, logs go under ``~/.sketch_sound/logs``.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_LOG_FILE_ENV = "SKETCH_SOUND_LOG_FILE"
_LOG_DIR_ENV = "SKETCH_SOUND_LOG_DIR"
_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_MANAGED_ATTR = "_sketch_sound_managed"


class LogVerbosity(str, Enum):
    """How much of the negotiation trail the log file keeps."""

    DISABLED = "disabled"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    VERBOSE = "verbose"

    @property
    def level(self) -> int:
        if self is LogVerbosity.DISABLED:
            return logging.CRITICAL + 1
        if self is LogVerbosity.VERBOSE:
            return logging.DEBUG
        return logging.getLevelName(self.name)

    @classmethod
    def parse(cls, value: "LogVerbosity | str") -> "LogVerbosity":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unsupported log verbosity: {value}") from exc


@dataclass
class _LoggingState:
    path: Path | None = None
    file_handler: logging.FileHandler | None = None
    verbosity: LogVerbosity = LogVerbosity.WARNING


_STATE = _LoggingState()


def ensure_sound_logging(verbosity: LogVerbosity | str | None = None) -> Path:
    """Install the sound log handlers once and return the log file path.

    ``verbosity`` (when given) becomes the file handler threshold, also on
    later calls.  A console handler at INFO is attached only when stderr is an
    interactive terminal nobody else is logging to.
    """

    if _STATE.file_handler is None:
        _install_handlers(_log_path_from_env())
    if verbosity is not None:
        set_file_log_verbosity(verbosity)
    assert _STATE.path is not None
    return _STATE.path


def set_file_log_verbosity(verbosity: LogVerbosity | str) -> None:
    level = LogVerbosity.parse(verbosity)
    if _STATE.file_handler is None:
        _install_handlers(_log_path_from_env())
    _STATE.verbosity = level
    assert _STATE.file_handler is not None
    _STATE.file_handler.setLevel(level.level)
    logging.getLogger(__name__).info("Sound log verbosity is now %s", level.value)


def get_file_log_verbosity() -> LogVerbosity:
    return _STATE.verbosity


def _install_handlers(log_path: Path) -> None:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT)
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(_STATE.verbosity.level)
    file_handler.setFormatter(formatter)
    setattr(file_handler, _MANAGED_ATTR, True)
    root.addHandler(file_handler)

    if _stderr_is_free_terminal(root):
        console = logging.StreamHandler()
        console.setLevel(logging.INFO)
        console.setFormatter(formatter)
        setattr(console, _MANAGED_ATTR, True)
        root.addHandler(console)

    _STATE.path = log_path
    _STATE.file_handler = file_handler
    logging.getLogger(__name__).info("Sound logs go to %s", log_path)


def _log_path_from_env() -> Path:
    explicit = os.environ.get(_LOG_FILE_ENV)
    if explicit:
        return Path(explicit).expanduser()
    directory = os.environ.get(_LOG_DIR_ENV)
    base = Path(directory).expanduser() if directory else Path.home() / ".sketch_sound" / "logs"
    return base / "sound.log"


def _stderr_is_free_terminal(root: logging.Logger) -> bool:
    stderr = getattr(sys, "stderr", None)
    isatty = getattr(stderr, "isatty", None)
    try:
        interactive = bool(callable(isatty) and isatty())
    except ValueError:  # closed stream
        return False
    if not interactive:
        return False
    return not any(
        isinstance(handler, logging.StreamHandler) and handler.stream is stderr
        for handler in root.handlers
    )


def _reset_for_tests() -> None:
    """Detach and close every handler this module installed."""

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _MANAGED_ATTR, False):
            root.removeHandler(handler)
            handler.close()
    _STATE.path = None
    _STATE.file_handler = None
    _STATE.verbosity = LogVerbosity.WARNING


__all__ = [
    "LogVerbosity",
    "ensure_sound_logging",
    "get_file_log_verbosity",
    "set_file_log_verbosity",
]
