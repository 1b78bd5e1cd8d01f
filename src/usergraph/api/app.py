"""
Main FastAPI application for the usergraph service
"""

from contextlib import asynccontextmanager

import strawberry
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..config import settings
from ..context import GraphQLContext, create_context
from ..graphql.execution import GraphQLRequestError
from ..graphql.schema import create_schema, validate_schema
from ..logging import get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting usergraph API...", graphql_path=app.state.graphql_path)

    yield

    logger.info("Shutting down usergraph API...")


def create_app(
    context: GraphQLContext | None = None,
    schema: strawberry.Schema | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        context: Shared GraphQL context; a freshly seeded one is created if omitted.
        schema: GraphQL schema; the user directory schema is created if omitted.
    """
    if schema is None:
        schema = create_schema()

    logger.info("Validating GraphQL schema...")
    validate_schema(schema)

    app = FastAPI(
        title="usergraph",
        description="In-memory user directory exposed through GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.state.graphql_schema = schema
    app.state.graphql_context = context if context is not None else create_context()
    app.state.graphql_path = settings.graphql_path

    app.add_middleware(LoggingContextMiddleware)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(  # pyright: ignore [reportUnusedFunction]
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Answer unknown routes and unsupported methods with an empty 404."""
        if exc.status_code in (404, 405):
            return Response(status_code=404)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "HTTP error", "detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(GraphQLRequestError)
    async def graphql_request_error_handler(  # pyright: ignore [reportUnusedFunction]
        request: Request, exc: GraphQLRequestError
    ) -> JSONResponse:
        """Reject requests that do not carry a usable GraphQL request."""
        logger.warning(
            "Rejected GraphQL request",
            method=request.method,
            path=request.url.path,
            error=str(exc),
        )
        return JSONResponse(status_code=400, content={"error": "Bad Request", "detail": str(exc)})

    from .endpoints import graphql, playground

    app.include_router(playground.router)
    app.include_router(graphql.create_graphql_router(settings.graphql_path))
    logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)

    return app
