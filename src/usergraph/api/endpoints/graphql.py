"""
GraphQL endpoints.

Both GET and POST decode a fully buffered request, then hand it to the
synchronous executor on the worker thread pool.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from ...graphql.execution import GraphQLRequest, execute_request
from ...logging import get_logger

logger = get_logger(__name__)


async def _execute(request: Request, graphql_request: GraphQLRequest) -> JSONResponse:
    schema = request.app.state.graphql_schema
    context = request.app.state.graphql_context

    result = await run_in_threadpool(execute_request, schema, graphql_request, context)

    if result.errors:
        logger.info(
            "GraphQL request finished with errors",
            operation_name=graphql_request.operation_name,
            executed=result.executed,
            error_count=len(result.errors),
        )

    return JSONResponse(result.to_dict())


def create_graphql_router(path: str = "/graphql") -> APIRouter:
    """Create the router serving GraphQL execution at ``path``."""
    router = APIRouter()

    @router.get(path)
    async def graphql_get(request: Request) -> JSONResponse:  # pyright: ignore [reportUnusedFunction]
        """Execute a GraphQL request passed as query parameters."""
        graphql_request = GraphQLRequest.from_query_params(request.query_params)
        return await _execute(request, graphql_request)

    @router.post(path)
    async def graphql_post(request: Request) -> JSONResponse:  # pyright: ignore [reportUnusedFunction]
        """Execute a GraphQL request passed as the request body."""
        body = await request.body()
        graphql_request = GraphQLRequest.from_body(body, request.headers.get("content-type"))
        return await _execute(request, graphql_request)

    return router
