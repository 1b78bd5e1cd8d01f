"""
Create a user with a mutation, then read it back with a query, against the
same schema and seeded context the HTTP server uses.
"""

from typing import Any

from ..context import GraphQLContext, create_context
from ..graphql.execution import execute
from ..graphql.schema import create_schema
from ..logging import get_logger
from . import DemoError, check_result

logger = get_logger(__name__)

CREATE_USER_MUTATION = """
mutation createUser {
  createUser(id: "2", name: "name", email: "name@example.com") {
    id
  }
}
"""

GET_USER_QUERY = """
query getUser {
  user(id: "2") {
    id
    name
    email
  }
}
"""

EXPECTED = {"user": {"id": "2", "name": "name", "email": "name@example.com"}}


def run(context: GraphQLContext | None = None) -> dict[str, Any]:
    """Run the create-then-read scenario and check the final result."""
    if context is None:
        context = create_context()
    schema = create_schema()

    created = execute(schema, CREATE_USER_MUTATION, context=context)
    if created.errors:
        raise DemoError(f"createUser failed: {created.errors[0].message}")

    data = check_result(execute(schema, GET_USER_QUERY, context=context), EXPECTED)
    logger.info("Users demo succeeded")
    return data
