"""
Pytest configuration and shared fixtures.
"""

import pytest

from base_converter import app as flask_app


@pytest.fixture
def app():
    """The converter app in testing mode."""
    flask_app.config.update(TESTING=True)
    yield flask_app


@pytest.fixture
def client(app):
    """A test client for the converter app."""
    return app.test_client()
