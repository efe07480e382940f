"""
Integration Tests for User Repository and registration races.
"""

from unittest.mock import patch

import pytest

from quirknotes.core.exceptions import ConflictError
from quirknotes.repositories.user import UserRepository
from quirknotes.schemas.user import UserCredentials
from quirknotes.services.auth import AuthService
from tests.conftest import TEST_BCRYPT_ROUNDS


@pytest.fixture
def repo(db_session):
    return UserRepository(db_session)


class TestRegister:
    async def test_stores_user(self, repo):
        await repo.register("alice", "$2b$04$hash")

        user = await repo.get_by_username("alice")
        assert user is not None
        assert user.password_hash == "$2b$04$hash"

    async def test_duplicate_username_rejected(self, repo):
        await repo.register("alice", "$2b$04$hash")

        with pytest.raises(ConflictError, match="Username already exists."):
            await repo.register("alice", "$2b$04$other")

    async def test_usernames_are_case_sensitive(self, repo):
        await repo.register("alice", "$2b$04$hash")

        assert await repo.get_by_username("Alice") is None


class TestConcurrentRegistration:
    async def test_unique_index_rejects_duplicate_that_passed_lookup(
        self, db_session, token_service
    ):
        """A racing register that misses the lookup still fails as a conflict."""
        service = AuthService(db_session, token_service, bcrypt_rounds=TEST_BCRYPT_ROUNDS)
        await service.register(UserCredentials(username="alice", password="secret1"))

        with patch.object(UserRepository, "get_by_username", return_value=None):
            with pytest.raises(ConflictError, match="Username already exists."):
                await service.register(UserCredentials(username="alice", password="secret2"))
