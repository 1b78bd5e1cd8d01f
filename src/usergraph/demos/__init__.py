"""
Offline demonstrations that run a fixed GraphQL document against a schema
and check the result.
"""

from typing import Any

from ..graphql.execution import GraphQLResponse


class DemoError(RuntimeError):
    """Raised when a demonstration produces an unexpected result."""


def check_result(result: GraphQLResponse, expected: dict[str, Any]) -> dict[str, Any]:
    """Return ``result.data`` if it matches ``expected`` without errors."""
    if result.errors:
        messages = "; ".join(error.message for error in result.errors)
        raise DemoError(f"Unexpected GraphQL errors: {messages}")
    if result.data != expected:
        raise DemoError(f"Expected {expected!r}, got {result.data!r}")
    return result.data
