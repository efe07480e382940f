"""
Unit Test Fixtures.

Fixtures for unit tests - the database is mocked.
Unit tests should be fast and isolated, never touching a real database.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from quirknotes.core.auth import AuthGateway
from quirknotes.core.security import TokenService


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    Mock database session for unit tests.

    Usage:
        def test_service(mock_db_session: AsyncMock):
            service = NoteService(mock_db_session, gateway)
    """
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def gateway(token_service: TokenService) -> AuthGateway:
    """Auth gateway backed by the test token service."""
    return AuthGateway(token_service)


@pytest.fixture
def auth_header(token_service: TokenService):
    """
    Build an Authorization header value for a username.

    Usage:
        header = auth_header("alice")
    """

    def _build(username: str) -> str:
        return f"Bearer {token_service.issue(username)}"

    return _build
