"""
Shared pytest fixtures and configuration for all tests.
"""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from usergraph.api.app import create_app
from usergraph.context import GraphQLContext, create_context
from usergraph.graphql.schema import UserGraphSchema, create_schema
from usergraph.store import UserStore


@pytest.fixture
def schema() -> UserGraphSchema:
    return create_schema()


@pytest.fixture
def seeded_context() -> GraphQLContext:
    """Context holding the seed user {"1", "name", "name@example.com"}."""
    return create_context()


@pytest.fixture
def empty_context() -> GraphQLContext:
    return GraphQLContext(store=UserStore())


@pytest.fixture
def app(seeded_context: GraphQLContext) -> FastAPI:
    return create_app(context=seeded_context)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
