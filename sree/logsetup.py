"""File logging under the user's home directory, with size-based rotation."""

from __future__ import annotations

import logging
import os
from pathlib import Path

MAX_LOG_SIZE = 10 * 1024 * 1024
MAX_LOG_FILES = 5
LOG_NAME = "sree.log"
LEVEL_ENV = "SREE_LOG"

_FORMAT = "%(asctime)s %(levelname)s %(name)s [thread %(thread)d] %(message)s"


def _default_log_dir() -> Path:
    try:
        home = Path.home()
    except RuntimeError as exc:
        raise RuntimeError("Could not determine home directory") from exc
    return home / ".sree" / "logs"


def rotate_logs_if_needed(log_file: str | os.PathLike[str]) -> None:
    """Shift sree.log to sree.log.1 (and older ones up) once it reaches the size limit."""
    log_file = Path(log_file)
    if not log_file.exists() or log_file.stat().st_size < MAX_LOG_SIZE:
        return

    log_dir = log_file.parent
    (log_dir / f"{LOG_NAME}.{MAX_LOG_FILES}").unlink(missing_ok=True)

    for i in range(MAX_LOG_FILES - 1, 0, -1):
        old_path = log_dir / f"{LOG_NAME}.{i}"
        if old_path.exists():
            old_path.replace(log_dir / f"{LOG_NAME}.{i + 1}")

    log_file.replace(log_dir / f"{LOG_NAME}.1")


def init(log_dir: str | os.PathLike[str] | None = None) -> Path:
    """Set up file logging and return the path of the active log file.

    The root logger logs at INFO and the package logger at DEBUG, unless the
    SREE_LOG environment variable names another level.
    """
    directory = Path(log_dir) if log_dir is not None else _default_log_dir()
    directory.mkdir(parents=True, exist_ok=True)

    log_file = directory / LOG_NAME
    rotate_logs_if_needed(log_file)

    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(_FORMAT))

    root = logging.getLogger()
    root.addHandler(handler)

    env_level = os.environ.get(LEVEL_ENV)
    if env_level:
        level = logging.getLevelName(env_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {env_level}")
        root.setLevel(level)
        logging.getLogger("sree").setLevel(level)
    else:
        root.setLevel(logging.INFO)
        logging.getLogger("sree").setLevel(logging.DEBUG)

    logging.getLogger("sree").info("Logging initialized")
    return log_file