"""Unit tests for request logging helpers."""

import logging
import string

import pytest

from usergraph.logging import (
    add_request_fields,
    graphql_operation_ctx,
    request_id_ctx,
    request_logging_context,
    resolve_log_level,
)
from usergraph.middleware import operation_name_from_document


@pytest.mark.parametrize(
    ("document", "expected"),
    [
        ('query getUser { user(id: "1") { id } }', "getUser"),
        ('mutation createUser { createUser(id: "1", name: "n", email: "e") { id } }',
         "mutation:createUser"),
        ('{ user(id: "1") { id } }', "unnamed_operation"),
        ("query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
    ],
)
def test_operation_name_from_document(document, expected):
    assert operation_name_from_document(document) == expected


class TestRequestLoggingContext:
    """Test the request id / operation context manager."""

    def test_binds_and_resets(self):
        with request_logging_context("getUser") as request_id:
            assert request_id_ctx.get() == request_id
            assert graphql_operation_ctx.get() == "getUser"

        assert request_id_ctx.get() is None
        assert graphql_operation_ctx.get() is None

    def test_resets_after_exception(self):
        with pytest.raises(RuntimeError):
            with request_logging_context("getUser"):
                raise RuntimeError("boom")

        assert request_id_ctx.get() is None
        assert graphql_operation_ctx.get() is None

    def test_request_ids_are_unique_hex(self):
        ids = set()
        for _ in range(100):
            with request_logging_context() as request_id:
                ids.add(request_id)

        assert len(ids) == 100
        assert all(len(request_id) == 16 for request_id in ids)
        assert all(set(request_id) <= set(string.hexdigits) for request_id in ids)


class TestAddRequestFields:
    """Test the structlog processor."""

    def test_outside_request_adds_nothing(self):
        event = add_request_fields(None, "info", {"event": "hello"})

        assert event == {"event": "hello"}

    def test_inside_request_adds_fields(self):
        with request_logging_context("mutation:createUser") as request_id:
            event = add_request_fields(None, "info", {"event": "hello"})

        assert event["request_id"] == request_id
        assert event["graphql_operation"] == "mutation:createUser"

    def test_explicit_fields_win(self):
        with request_logging_context("getUser"):
            event = add_request_fields(None, "info", {"event": "hello", "request_id": "mine"})

        assert event["request_id"] == "mine"

    def test_missing_operation_is_omitted(self):
        with request_logging_context():
            event = add_request_fields(None, "info", {"event": "hello"})

        assert "request_id" in event
        assert "graphql_operation" not in event


@pytest.mark.parametrize(
    ("log_level", "debug", "expected"),
    [
        ("warning", False, logging.WARNING),
        ("DEBUG", False, logging.DEBUG),
        ("error", True, logging.ERROR),
        (None, True, logging.DEBUG),
        (None, False, logging.INFO),
        ("bogus", False, logging.INFO),
    ],
)
def test_resolve_log_level(log_level, debug, expected):
    assert resolve_log_level(log_level, debug) == expected
