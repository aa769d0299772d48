"""
Logging configuration for the send-message package.

Structured output through structlog, a timing helper for image encoding,
and address masking so full phone numbers never reach the logs.
"""

import logging
import sys
import time

import structlog

from ..config import settings

PACKAGE_LOGGER = "send_message"


def configure_logging(
    service_name: str | None = None,
    level: str | None = None,
    json_logs: bool | None = None,
) -> None:
    """
    Configure structured logging for an application embedding the package.

    The package itself never calls this. Arguments left out fall back to
    ``settings`` (SERVICE_NAME, LOG_LEVEL, JSON_LOGS).

    Args:
        service_name: Name added to every event as ``service``
        level: Level name for the ``send_message`` loggers (DEBUG, INFO, ...)
        json_logs: JSON lines when true, human-readable console lines otherwise
    """
    service_name = service_name or settings.service_name
    level_name = (level or settings.log_level).upper()
    if json_logs is None:
        json_logs = settings.json_logs

    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger(PACKAGE_LOGGER).setLevel(
        logging.getLevelNamesMapping().get(level_name, logging.INFO)
    )

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _tag_service(service_name),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _tag_service(service_name: str):
    def processor(logger, method_name, event_dict):
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


class Timer:
    """
    Context manager measuring wall-clock time of a block.

    Usage:
        with Timer() as t:
            data = encode_png(image)
        logger.debug("Image encoded", duration_ms=t.duration_ms)
    """

    def __init__(self):
        self._start: float = 0
        self._end: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self._end = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        return round((self._end - self._start) * 1000, 2)


def mask_address(address: str, visible_chars: int = 4) -> str:
    """Hide all but the trailing ``visible_chars`` characters of an address."""
    if not address:
        return ""
    if len(address) <= visible_chars:
        return address
    return "*" * (len(address) - visible_chars) + address[-visible_chars:]
