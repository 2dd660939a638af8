"""Structured logging for the API."""

import logging
import sys
import time
import uuid

import structlog
from flask import g, request
from pythonjsonlogger import jsonlogger

REQUEST_ID_HEADER = "X-Request-ID"


def _json_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "asctime": "timestamp"},
        )
    )
    handler.setLevel(level)
    return handler


def setup_logging(app):
    """Configure structlog and JSON output, and log each API request.

    Every request gets a short id, bound into the structlog context and
    echoed back in the ``X-Request-ID`` header. Only ``/api/`` paths are
    logged; server errors are logged at error level.
    """
    log_level = logging.DEBUG if app.debug else logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.dev.ConsoleRenderer()
                if app.debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if not app.debug:
        handler = _json_handler(log_level)
        # Services log through the "devlog" hierarchy, views through app.logger
        for logger in (app.logger, logging.getLogger("devlog")):
            logger.handlers = [handler]
            logger.setLevel(log_level)
        logging.getLogger("werkzeug").setLevel(logging.WARNING)

    @app.before_request
    def bind_request_context():
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        g.request_started = time.monotonic()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=g.request_id,
            method=request.method,
            path=request.path,
        )

    @app.after_request
    def log_api_request(response):
        request_id = g.get("request_id")
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id

        if request.path.startswith("/api/") and "request_started" in g:
            duration_ms = round((time.monotonic() - g.request_started) * 1000, 2)
            log = structlog.get_logger()
            if response.status_code >= 500:
                log.error(
                    "request_failed",
                    status_code=response.status_code,
                    duration_ms=duration_ms,
                )
            else:
                log.info(
                    "request_completed",
                    status_code=response.status_code,
                    duration_ms=duration_ms,
                )

        return response

    return app
