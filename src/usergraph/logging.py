"""
structlog setup for the usergraph service

Every log line written while an HTTP request is in flight carries the
request id and, for GraphQL requests, the operation being run.
"""

import logging
import secrets
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, TextIO

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
graphql_operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)

LOG_LEVELS = ("debug", "info", "warning", "error")


def add_request_fields(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor adding the current request id and GraphQL operation."""
    _ = logger, method_name

    request_id = request_id_ctx.get()
    if request_id:
        event_dict.setdefault("request_id", request_id)

    operation = graphql_operation_ctx.get()
    if operation:
        event_dict.setdefault("graphql_operation", operation)

    return event_dict


def resolve_log_level(log_level: str | None, debug: bool = False) -> int:
    """Map a CLI/settings level name to a stdlib level; debug mode implies DEBUG."""
    if log_level:
        return getattr(logging, log_level.upper(), logging.INFO)
    return logging.DEBUG if debug else logging.INFO


def configure_logging(
    log_level: str | None = None,
    debug: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        log_level: One of LOG_LEVELS; defaults to DEBUG in debug mode, INFO otherwise.
        debug: Render colored console output instead of JSON lines.
        stream: Where log lines go (default: stdout).
    """
    level = resolve_log_level(log_level, debug)

    logging.basicConfig(
        level=level,
        stream=stream or sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug or level == logging.DEBUG
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_fields,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def configure_demo_logging() -> None:
    """Keep stdout for demo results: only warnings and errors, written to stderr."""
    configure_logging(log_level="warning", stream=sys.stderr)


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


@contextmanager
def request_logging_context(graphql_operation: str | None = None) -> Iterator[str]:
    """Bind a fresh request id (and the GraphQL operation) for the enclosed block.

    Yields:
        The request id, to be echoed back in the X-Request-ID header.
    """
    request_id = secrets.token_hex(8)
    request_token = request_id_ctx.set(request_id)
    operation_token = graphql_operation_ctx.set(graphql_operation)
    try:
        yield request_id
    finally:
        graphql_operation_ctx.reset(operation_token)
        request_id_ctx.reset(request_token)
