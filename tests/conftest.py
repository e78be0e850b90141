"""
Shared pytest fixtures for user accounts tests.
"""
import dataclasses
import os
from typing import Any, Dict, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId

from user_accounts.core.exceptions import UserAlreadyExistsError
from user_accounts.domain.models.user import User
from user_accounts.domain.repositories.user_repository import UserRepository


TEST_JWT_SECRET = "test_jwt_secret"


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_user_accounts",
        "JWT_SECRET": "test_secret_key_for_testing_only",
        "BCRYPT_ROUNDS": "4",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = TEST_JWT_SECRET
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 120
    mock.bcrypt_rounds = 4
    mock.cors_origin = "http://localhost:5173"
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("user_accounts.core.config.get_settings", return_value=mock), patch(
        "user_accounts.core.security.get_settings", return_value=mock
    ):
        yield mock


class InMemoryUserRepository(UserRepository):
    """UserRepository backed by a dict, with the same uniqueness rules as the Mongo index."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    def _email_taken(self, email: str, exclude_id: Optional[str] = None) -> bool:
        return any(u.email == email and u.id != exclude_id for u in self.users.values())

    async def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def create(self, user: User) -> User:
        if self._email_taken(user.email):
            raise UserAlreadyExistsError(user.email)
        saved = dataclasses.replace(user, id=str(ObjectId()))
        self.users[saved.id] = saved
        return saved

    async def update(self, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
        user = self.users.get(user_id)
        if user is None:
            return None
        if "email" in changes and self._email_taken(changes["email"], exclude_id=user_id):
            raise UserAlreadyExistsError(changes["email"])
        updated = dataclasses.replace(user, **changes)
        self.users[user_id] = updated
        return updated

    async def delete(self, user_id: str) -> bool:
        return self.users.pop(user_id, None) is not None


@pytest.fixture
def memory_user_repo():
    return InMemoryUserRepository()
