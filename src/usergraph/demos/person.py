"""
Query a schema whose single resolver returns a fixed person.
"""

from typing import Any

import strawberry

from ..graphql.execution import execute
from ..logging import get_logger
from . import check_result

logger = get_logger(__name__)

PERSON_QUERY = "query { person { id name age } }"

EXPECTED = {"person": {"id": "1", "name": "name", "age": 23}}


@strawberry.type
class Person:
    id: str
    name: str
    age: int


@strawberry.type
class Query:
    @strawberry.field
    def person(self) -> Person:
        return Person(id="1", name="name", age=23)


def create_person_schema() -> strawberry.Schema:
    return strawberry.Schema(query=Query)


def run() -> dict[str, Any]:
    """Execute the person query and check the result."""
    result = execute(create_person_schema(), PERSON_QUERY)
    data = check_result(result, EXPECTED)
    logger.info("Person demo succeeded")
    return data
