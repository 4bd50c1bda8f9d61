"""
Shared pytest fixtures for the task service test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure test
isolation by giving every test its own application and a freshly seeded
task store.

Key Concepts Demonstrated:
- Fixture scopes and dependencies
- Test data factories
- Test client creation
"""

import os
import pytest
from typing import Any
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from task_app import STORE_EXTENSION, create_app
from task_app.models import Task
from task_app.store import TaskStore


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="function")
def app():
    """
    Create a fresh application for each test.

    The task store lives on the application, so a function-scoped app
    means every test starts from the two seed tasks.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def store(app) -> TaskStore:
    """Return the task store served by the application fixture."""
    return app.extensions[STORE_EXTENSION]


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def task_factory(store):
    """
    Factory fixture for creating stored Task instances.

    Args:
        store: Task store fixture.

    Returns:
        Function that creates, stores and returns Task instances.

    Example:
        def test_something(task_factory):
            task = task_factory(description="My Task")
            assert task.id in store
    """

    def _create_task(
        task_id: str | None = None,
        description: str | None = None,
        note: str | None = None,
        applications: list[str] | None = None,
    ) -> Task:
        """
        Create a task with the given or default values.

        Args:
            task_id: Task id (defaults to a random UUID string).
            description: Task description (defaults to random sentence).
            note: Task note (defaults to random paragraph).
            applications: Application names (defaults to two random words).

        Returns:
            The stored Task instance.
        """
        task = Task(
            id=task_id or fake.uuid4(),
            description=description or fake.sentence(nb_words=4),
            note=note or fake.paragraph(),
            applications=applications if applications is not None else fake.words(nb=2),
        )
        store.insert(task)
        return task

    return _create_task


@pytest.fixture
def sample_task(task_factory) -> Task:
    """Create a single stored task with known values."""
    return task_factory(
        task_id="sample",
        description="Sample Task",
        note="This is a sample task for testing",
        applications=["Terminal"],
    )


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def valid_task_data() -> dict[str, Any]:
    """
    Provide a complete task payload with an unused id.

    Returns:
        Dictionary with valid task field values.
    """
    return {
        "id": fake.uuid4(),
        "description": fake.sentence(nb_words=5),
        "note": fake.paragraph(),
        "applications": ["VS Code", "Terminal"],
    }


@pytest.fixture
def api_headers() -> dict[str, str]:
    """
    Provide common headers for API requests.

    Returns:
        Dictionary of HTTP headers.
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json"
    }
