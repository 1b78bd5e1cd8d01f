"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .config import settings
from .logging import get_logger, request_logging_context

logger = get_logger(__name__)

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")


def operation_name_from_document(query: str) -> str:
    """Best-effort operation label for a GraphQL document."""
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = _OPERATION_RE.search(query)
    if match:
        kind = "mutation:" if match.group(1) == "mutation" else ""
        return f"{kind}{match.group(2)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    """Find the GraphQL operation name of a request without logging its payload."""
    if request.url.path != settings.graphql_path:
        return None

    if request.method == "GET":
        params = request.query_params
        op = params.get("operationName")
        if op:
            return op
        q = params.get("query")
        return operation_name_from_document(q) if q else None

    if request.method == "POST":
        body = await request.body()
        if not body:
            return None
        content_type = request.headers.get("content-type", "")
        if content_type.startswith("application/graphql"):
            return operation_name_from_document(body.decode("utf-8", errors="replace"))
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        op = data.get("operationName")
        if isinstance(op, str) and op:
            return op
        q = data.get("query")
        if not isinstance(q, str) or not q:
            return None
        return operation_name_from_document(q)

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request inside a request id / GraphQL operation logging context."""

        graphql_operation = await extract_graphql_operation_name(request)

        with request_logging_context(graphql_operation) as request_id:
            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    "Request failed",
                    method=request.method,
                    path=request.url.path,
                    error=str(e),
                )
                raise

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )

            response.headers["X-Request-ID"] = request_id
            return response
