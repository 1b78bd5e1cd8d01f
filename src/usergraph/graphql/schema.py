"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema

from ..logging import get_logger
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)


class UserGraphSchema(strawberry.Schema):
    """Strawberry schema that reports GraphQL errors through structlog."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: Any = None,
    ) -> None:
        for error in errors:
            logger.warning("GraphQL error", error=error.message, path=error.path)


def create_schema() -> UserGraphSchema:
    """Create the GraphQL schema with the user query and mutation roots."""
    return UserGraphSchema(query=Query, mutation=Mutation)


def validate_schema(schema: strawberry.Schema) -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved type references and invalid field definitions early,
    causing the server to fail fast instead of failing on the first request.

    Raises:
        Exception: If the schema is invalid
    """
    errors = gql_validate_schema(schema._schema)
    if errors:
        error_messages = [str(e) for e in errors]
        logger.error("GraphQL schema validation failed", errors=error_messages)
        raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

    logger.info("GraphQL schema validation successful")
