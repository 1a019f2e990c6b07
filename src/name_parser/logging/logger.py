"""
Logging for the directory name parser.

Importing the package performs no logging I/O. Modules ask for a logger with
``get_logger(__name__)`` and get a plain logger in the ``name_parser``
hierarchy; nothing is written until an application entry point calls
``configure_logging``:

* master log file (default: ``logs/name_parser.log``)
* one file per module, opened the first time that module logs
* console output on stderr: WARNING, or DEBUG when ``debug: true``
* optional rotation (``logging.rotate`` in ``config/name_parser.yml``)

If the log directory cannot be created, file output is skipped and the
console handler still works.
"""

from __future__ import annotations

import logging
import sys
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional, Union

from name_parser.config import PROJECT_ROOT, NPConfig, get_config

BASE_LOGGER_NAME = "name_parser"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5

_configured: bool = False


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(path: Path, level: int, rotate: bool) -> logging.Handler:
    if rotate:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=ROTATE_MAX_BYTES,
            backupCount=ROTATE_BACKUPS,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(_formatter())
    return handler


class _StderrHandler(logging.StreamHandler):
    """Console handler that writes to whatever ``sys.stderr`` is at emit time."""

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


class _ModuleFileRouter(logging.Handler):
    """Send each module's records to ``<log_dir>/<module>.log``."""

    def __init__(self, log_dir: Path, level: int, rotate: bool):
        super().__init__(level)
        self.log_dir = log_dir
        self.rotate = rotate
        self._files: Dict[str, logging.Handler] = {}

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == BASE_LOGGER_NAME:
            return
        handler = self._files.get(record.name)
        if handler is None:
            path = self.log_dir / f"{record.name.replace('.', '_')}.log"
            handler = _file_handler(path, self.level, self.rotate)
            self._files[record.name] = handler
        handler.handle(record)

    def close(self) -> None:
        for handler in self._files.values():
            handler.close()
        self._files.clear()
        super().close()


def _resolve_log_dir(cfg: NPConfig) -> Path:
    value = cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs"
    log_dir = Path(value)
    return log_dir if log_dir.is_absolute() else PROJECT_ROOT / log_dir


def get_logger(name: Optional[str] = None) -> Logger:
    """Return a logger under the ``name_parser`` hierarchy. Attaches no handlers."""
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"
    return logging.getLogger(logger_name)


def configure_logging(
    cfg: Optional[NPConfig] = None,
    *,
    log_dir: Union[str, Path, None] = None,
    force: bool = False,
) -> Logger:
    """
    Attach console and file handlers to the ``name_parser`` base logger.

    Runs once per process unless ``force`` is set, in which case existing
    handlers are closed and replaced.
    """
    global _configured

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _configured and not force:
        return base

    for handler in list(base.handlers):
        base.removeHandler(handler)
        handler.close()

    cfg = cfg or get_config()
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    level = logging.DEBUG if cfg.debug else getattr(logging, level_name, logging.INFO)
    rotate = bool(cfg.logging.get("rotate", False))

    base.setLevel(level)
    base.propagate = False

    console = _StderrHandler()
    console.setLevel(logging.DEBUG if cfg.debug else logging.WARNING)
    console.setFormatter(_formatter())
    base.addHandler(console)

    target = Path(log_dir) if log_dir else _resolve_log_dir(cfg)
    try:
        target.mkdir(parents=True, exist_ok=True)
        master = target / cfg.logging.get("file", "name_parser.log")
        base.addHandler(_file_handler(master, level, rotate))
    except OSError as exc:
        base.warning("File logging disabled, cannot use %s: %s", target, exc)
    else:
        base.addHandler(_ModuleFileRouter(target, level, rotate))

    _configured = True
    return base
