"""Pytest configuration. Run from the project root; pyproject.toml puts src/ and . on the path."""

import pytest

from form_entity_guard.infrastructure.di.container import GuardContainer


@pytest.fixture(autouse=True)
def reset_container():
    """Each test starts with a fresh container singleton."""
    GuardContainer.reset()
    yield
    GuardContainer.reset()
