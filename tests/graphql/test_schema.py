"""
Tests for the user directory GraphQL schema
"""

import pytest
import strawberry

from usergraph.graphql.schema import create_schema, validate_schema
from usergraph.graphql.types.user import User
from usergraph.store import UserRecord


def test_schema_shape():
    schema = create_schema()
    graphql_schema = schema._schema

    user_type = graphql_schema.get_type("User")
    assert {name: str(f.type) for name, f in user_type.fields.items()} == {
        "id": "String!",
        "name": "String!",
        "email": "String!",
    }

    user_field = graphql_schema.query_type.fields["user"]
    assert str(user_field.type) == "User"
    assert {name: str(a.type) for name, a in user_field.args.items()} == {"id": "String!"}

    create_field = graphql_schema.mutation_type.fields["createUser"]
    assert str(create_field.type) == "User!"
    assert {name: str(a.type) for name, a in create_field.args.items()} == {
        "id": "String!",
        "name": "String!",
        "email": "String!",
    }


def test_validate_schema_accepts_user_schema():
    validate_schema(create_schema())


def test_validate_schema_rejects_invalid_schema(monkeypatch):
    schema = create_schema()
    monkeypatch.setattr(
        "usergraph.graphql.schema.gql_validate_schema", lambda _schema: ["broken type"]
    )

    with pytest.raises(Exception, match="broken type"):
        validate_schema(schema)


def test_user_from_record():
    user = User.from_record(UserRecord(id="1", name="name", email="name@example.com"))

    assert isinstance(user, User)
    assert (user.id, user.name, user.email) == ("1", "name", "name@example.com")


def test_schema_is_a_strawberry_schema():
    assert isinstance(create_schema(), strawberry.Schema)
