"""JSON-lines logging for the badge pipeline, driven by ``DiagnosticsSettings``."""

from __future__ import annotations

import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import DiagnosticsSettings, config_path

ROOT_LOGGER = "namicon"
LOG_FILE_NAME = "namicon.log"

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_FIELDS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


def log_dir(base: Path | None = None) -> Path:
    path = (base or config_path().parent) / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra`` fields such as ``event`` are kept as keys."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_FIELDS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_logging(
    settings: DiagnosticsSettings | None = None,
    directory: Path | None = None,
) -> logging.Logger:
    """Attach the rotating JSON file handler to the ``namicon`` logger.

    Calling again only applies the (possibly changed) level, so the CLI and
    tests can reconfigure without stacking handlers.
    """
    settings = settings or DiagnosticsSettings()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(settings.log_level)
    if logger.handlers:
        return logger

    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(log_dir(directory) / LOG_FILE_NAME),
        when="midnight",
        backupCount=settings.keep_log_files,
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    if settings.log_to_console:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))
        logger.addHandler(console)

    logger.info(
        "logging configured level=%s",
        settings.log_level,
        extra={"event": "logging_configured"},
    )
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER)
