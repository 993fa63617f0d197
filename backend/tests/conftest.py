from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from app import create_app
from config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    flask_app = create_app(settings)
    with flask_app.test_client() as test_client:
        yield test_client
