"""
Shared pytest fixtures for the store, schema and HTTP tests.
"""

import sys
from pathlib import Path

import pytest

# Make the root modules importable without installing the project
sys.path.insert(0, str(Path(__file__).parent.parent))

from graphql import graphql_sync

from tweet_store import Store
from tweet_schema import tweet_schema


@pytest.fixture
def store():
    """A freshly seeded store."""
    return Store()


@pytest.fixture
def execute(store):
    """Run a GraphQL operation against the schema with the test store."""

    def _execute(source, variables=None):
        return graphql_sync(
            tweet_schema,
            source,
            context_value={"store": store},
            variable_values=variables,
        )

    return _execute


@pytest.fixture
def client(store):
    """Flask test client wired to the test store."""
    from server import create_app

    app = create_app(store=store)
    app.config["TESTING"] = True
    return app.test_client()
