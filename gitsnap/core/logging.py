"""Structured JSON logging for the application layer."""
import logging
import sys

from pythonjsonlogger import jsonlogger

from gitsnap.core.config import settings


def setup_logging() -> logging.Logger:
    """Attach a stdout JSON handler to the `gitsnap` logger (idempotent)."""
    app_logger = logging.getLogger("gitsnap")
    app_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    if not any(isinstance(h, logging.StreamHandler) for h in app_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            jsonlogger.JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s")
        )
        app_logger.addHandler(handler)

    # gunicorn/uvicorn configure the root logger separately
    app_logger.propagate = False
    return app_logger


logger = setup_logging()
