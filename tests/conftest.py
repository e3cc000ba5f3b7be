"""Global pytest fixtures for PATTERNBOOK."""

import pytest

from patternbook.framework import Facade

pytest_plugins = [
    "tests.fixtures.posts",
]


@pytest.fixture(autouse=True)
def _reset_facades():
    """Facades share class-level state; give every test a clean slate."""
    Facade.set_container(None)
    yield
    Facade.set_container(None)
