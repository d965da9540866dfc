from __future__ import annotations

from datetime import datetime

import pytest
from flask import Flask


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 30, 0)


@pytest.fixture
def flask_app() -> Flask:
    app = Flask(__name__)
    app.secret_key = "test-secret"
    app.config["TESTING"] = True
    return app


@pytest.fixture
def login_as():
    def _login(client, *, user_id: int, role: str, name: str = "Test User") -> None:
        with client.session_transaction() as sess:
            sess["user_id"] = user_id
            sess["role"] = role
            sess["name"] = name

    return _login
