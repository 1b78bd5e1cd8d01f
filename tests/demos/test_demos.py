"""Tests for the offline GraphQL demonstrations."""

import pytest

from usergraph.context import GraphQLContext, create_context
from usergraph.demos import DemoError, check_result, person, users
from usergraph.graphql.execution import GraphQLResponse
from usergraph.store import UserStore


def test_person_demo():
    assert person.run() == {"person": {"id": "1", "name": "name", "age": 23}}


def test_users_demo_creates_and_reads_back():
    context = create_context()

    assert users.run(context) == {
        "user": {"id": "2", "name": "name", "email": "name@example.com"}
    }
    assert context.store.lookup("1") is not None
    assert context.store.lookup("2") is not None


def test_users_demo_on_empty_store():
    assert users.run(GraphQLContext(store=UserStore()))["user"]["id"] == "2"


def test_check_result_rejects_mismatch():
    with pytest.raises(DemoError, match="Expected"):
        check_result(GraphQLResponse(data={"a": 1}), {"a": 2})


def test_check_result_rejects_errors():
    from graphql import GraphQLError

    with pytest.raises(DemoError, match="boom"):
        check_result(GraphQLResponse(data=None, errors=[GraphQLError("boom")]), {})
