from __future__ import annotations

import pytest

from selectorkit.builder import SelectorBuilder
from selectorkit.config import SelectorKitConfig
from selectorkit.web.app import create_app


@pytest.fixture
def builder() -> SelectorBuilder:
    return SelectorBuilder()


@pytest.fixture
def app():
    """Create a Flask app for testing."""
    application = create_app(config=SelectorKitConfig())
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
