# Shared fixtures: mocked UserService, app/client with the auth gate overridden
import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-the-users-api-suite")

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from todo_api.core.security import get_current_user
from todo_api.main import create_app
from todo_api.schemas.user_schema import User
from todo_api.services.user_service import UserService

CURRENT_USER = User(
    id=UUID("0b6f9a52-5d0e-4b8e-9a55-2f1d3c4e5a6b"),
    email="alice@example.com",
    first_name="Alice",
    last_name="Nguyen",
    created_at=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc),
    updated_at=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc),
)


@pytest.fixture
def user_service():
    return AsyncMock(spec=UserService)


@pytest.fixture
def app(user_service):
    app = create_app(user_service=user_service)
    app.dependency_overrides[get_current_user] = lambda: CURRENT_USER.id
    return app


@pytest.fixture
def client(app):
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
