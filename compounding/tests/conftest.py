from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from compounding.app import create_app
from compounding.config import Config


@pytest.fixture()
def client() -> FlaskClient:
    flask_app = create_app(Config())
    with flask_app.test_client() as test_client:
        yield test_client
