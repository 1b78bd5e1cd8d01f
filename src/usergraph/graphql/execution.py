"""
Synchronous GraphQL execution

Decodes GraphQL requests coming from HTTP and runs them against the
strawberry schema. Resolvers never suspend, so execution is a plain
function call that the HTTP layer can hand off to a worker thread.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import strawberry
from graphql import DocumentNode, GraphQLError, OperationDefinitionNode, get_operation_ast, parse
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..logging import get_logger

logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"
GRAPHQL_CONTENT_TYPE = "application/graphql"


class GraphQLRequestError(Exception):
    """Raised when an HTTP request does not carry a usable GraphQL request."""


class GraphQLRequest(BaseModel):
    """A GraphQL request as sent over HTTP."""

    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(..., min_length=1, description="GraphQL document")
    operation_name: str | None = Field(
        default=None, alias="operationName", description="Operation to run"
    )
    variables: dict[str, Any] | None = Field(default=None, description="Variable values")

    @classmethod
    def from_query_params(cls, params: Mapping[str, str]) -> "GraphQLRequest":
        """Decode a request from GET query parameters.

        ``variables`` arrives as a JSON-encoded object.
        """
        variables = None
        raw_variables = params.get("variables")
        if raw_variables:
            try:
                variables = json.loads(raw_variables)
            except json.JSONDecodeError as e:
                raise GraphQLRequestError("'variables' is not valid JSON") from e

        return cls._build(params.get("query"), params.get("operationName") or None, variables)

    @classmethod
    def from_body(cls, body: bytes, content_type: str | None) -> "GraphQLRequest":
        """Decode a request from a POST body.

        ``application/json`` bodies carry ``query``, ``operationName`` and
        ``variables``; ``application/graphql`` bodies are the bare document.
        """
        media_type = (content_type or "").split(";")[0].strip().lower()

        if media_type == GRAPHQL_CONTENT_TYPE:
            try:
                return cls._build(body.decode("utf-8"), None, None)
            except UnicodeDecodeError as e:
                raise GraphQLRequestError("Request body is not valid UTF-8") from e

        if media_type != JSON_CONTENT_TYPE:
            raise GraphQLRequestError(f"Unsupported content type: {media_type or 'none'}")

        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise GraphQLRequestError("Request body is not valid JSON") from e

        if not isinstance(payload, dict):
            raise GraphQLRequestError("Request body must be a JSON object")

        return cls._build(
            payload.get("query"), payload.get("operationName"), payload.get("variables")
        )

    @classmethod
    def _build(cls, query: Any, operation_name: Any, variables: Any) -> "GraphQLRequest":
        if not isinstance(query, str) or not query.strip():
            raise GraphQLRequestError("Missing 'query' in request")

        try:
            return cls.model_validate(
                {"query": query, "operationName": operation_name, "variables": variables}
            )
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            )
            raise GraphQLRequestError(f"Invalid GraphQL request: {problems}") from e


@dataclass
class GraphQLResponse:
    """Outcome of executing a GraphQL document.

    ``executed`` is False when the request failed before any resolver ran
    (syntax, validation, operation selection or variable errors); the JSON
    envelope then carries no ``data`` key.
    """

    data: dict[str, Any] | None = None
    errors: list[GraphQLError] = field(default_factory=list)
    executed: bool = True

    @property
    def formatted_errors(self) -> list[dict[str, Any]]:
        return [error.formatted for error in self.errors]

    def to_dict(self) -> dict[str, Any]:
        """Build the JSON response envelope."""
        payload: dict[str, Any] = {}
        if self.executed:
            payload["data"] = self.data
        if self.errors:
            payload["errors"] = self.formatted_errors
        return payload


def _operation_selection_message(document: DocumentNode, operation_name: str | None) -> str:
    if operation_name:
        return f"Unknown operation named '{operation_name}'."
    if any(isinstance(d, OperationDefinitionNode) for d in document.definitions):
        return "Must provide operation name if query contains multiple operations."
    return "Must provide an operation."


def _reject(schema: strawberry.Schema, errors: list[GraphQLError]) -> GraphQLResponse:
    schema.process_errors(errors)
    return GraphQLResponse(errors=errors, executed=False)


def execute(
    schema: strawberry.Schema,
    query: str,
    operation_name: str | None = None,
    variables: dict[str, Any] | None = None,
    context: Any = None,
) -> GraphQLResponse:
    """Parse, validate and execute ``query`` against ``schema``.

    Mutation root fields run serially in document order; sibling fields keep
    executing after a resolver error, which is collected into ``errors``.
    """
    try:
        document = parse(query)
    except GraphQLError as error:
        return _reject(schema, [error])

    if get_operation_ast(document, operation_name) is None:
        message = _operation_selection_message(document, operation_name)
        return _reject(schema, [GraphQLError(message)])

    result = schema.execute_sync(
        query,
        variable_values=variables,
        context_value=context,
        operation_name=operation_name,
    )
    errors = list(result.errors or [])

    # Field errors always carry a response path; request errors never do.
    executed = result.data is not None or not errors or any(e.path for e in errors)

    logger.debug(
        "GraphQL document executed",
        operation_name=operation_name,
        executed=executed,
        error_count=len(errors),
    )

    return GraphQLResponse(data=result.data, errors=errors, executed=executed)


def execute_request(
    schema: strawberry.Schema, request: GraphQLRequest, context: Any = None
) -> GraphQLResponse:
    """Execute a decoded HTTP GraphQL request."""
    return execute(
        schema,
        request.query,
        operation_name=request.operation_name,
        variables=request.variables,
        context=context,
    )
