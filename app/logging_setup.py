"""
Logging setup.

- Console handler on the root logger
- Rotating file handlers for runtime + errors (skipped when LOG_DIR is empty)
- Request ID aware formatter
"""

from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from flask import g, has_request_context

from app.config import Settings

_FMT = "%(asctime)s [%(levelname)s] %(name)s %(request_id)s - %(message)s"


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            rid = g.get("request_id", "-") if has_request_context() else "-"
            record.request_id = rid
        return True


def _mk_handler(path: Path, level: int) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FMT))
    handler.addFilter(RequestIdFilter())
    handler._faq_voice = True  # type: ignore[attr-defined]
    return handler


def _drop_own_handlers(logger: logging.Logger) -> None:
    # create_app() may run more than once per process (tests, reloader)
    for h in list(logger.handlers):
        if getattr(h, "_faq_voice", False):
            logger.removeHandler(h)
            h.close()


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    runtime_logger = logging.getLogger("Runtime")
    _drop_own_handlers(root)
    _drop_own_handlers(runtime_logger)

    # Console (dev)
    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_FMT))
    console.addFilter(RequestIdFilter())
    console._faq_voice = True  # type: ignore[attr-defined]
    root.addHandler(console)

    if not settings.LOG_DIR:
        return

    # Files
    logs_dir = Path(settings.LOG_DIR)
    runtime_logger.addHandler(_mk_handler(logs_dir / "service.log", logging.INFO))
    root.addHandler(_mk_handler(logs_dir / "errors.log", logging.ERROR))
