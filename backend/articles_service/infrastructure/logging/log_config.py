"""Centralized logging configuration.

Applies per-category log levels from Settings so that noisy loggers
(e.g. botocore request dumps, httpx/httpcore) can be silenced without
affecting other parts of the application.

Usage:
    from articles_service.infrastructure.logging.log_config import setup_logging
    setup_logging()   # Call once at startup (in main.py or lifespan)
"""

import logging
import sys
from logging.handlers import QueueHandler, QueueListener

from articles_service.config import get_settings
from articles_service.infrastructure.logging.remote_handler import RemoteLogHandler, start_remote_logging


# ── Logger-name → Settings-field mapping ────────────────────────────
#
# Each entry maps one or more Python logger names to a Settings field.
# When setup_logging() runs, it sets the level of each listed logger
# to the value of the corresponding setting.

_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_aws": [
        "boto3",
        "botocore",
        "urllib3",
    ],
    "log_level_http": [
        "httpx",
        "httpcore",
    ],
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
}

# Remote sink state; at most one listener runs per process.
_remote_queue_handler: QueueHandler | None = None
_remote_listener: QueueListener | None = None


def setup_logging() -> None:
    """Configure Python logging levels from application settings.

    Call this once during startup (e.g. in the FastAPI lifespan) and pair it
    with shutdown_logging() on exit.
    """
    global _remote_queue_handler, _remote_listener
    settings = get_settings()
    root_level = _parse_level(settings.log_level)

    # ── Root logger ────────────────────────────────────────────────
    root = logging.getLogger()
    root.setLevel(root_level)

    # Ensure at least one handler exists (uvicorn usually adds one,
    # but when running tests or scripts it may not).
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(levelname)-8s %(name)s — %(message)s",
            )
        )
        root.addHandler(handler)

    # ── Remote sink ────────────────────────────────────────────────
    logger_url = settings.logger_url.strip()
    if logger_url and _remote_listener is None:
        remote = RemoteLogHandler(logger_url, service=settings.app_title)
        _remote_queue_handler, _remote_listener = start_remote_logging(remote)
        root.addHandler(_remote_queue_handler)

    # ── Per-category loggers ───────────────────────────────────────
    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level: str = getattr(settings, settings_field, "INFO")
        level = _parse_level(raw_level)

        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s, aws=%s, http=%s, uvicorn=%s, remote=%s",
        settings.log_level,
        settings.log_level_aws,
        settings.log_level_http,
        settings.log_level_uvicorn,
        logger_url or "off",
    )


def shutdown_logging() -> None:
    """Flush and detach the remote sink started by setup_logging()."""
    global _remote_queue_handler, _remote_listener
    if _remote_listener is None:
        return

    logging.getLogger().removeHandler(_remote_queue_handler)
    _remote_listener.stop()
    for handler in _remote_listener.handlers:
        handler.close()
    _remote_queue_handler, _remote_listener = None, None


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
