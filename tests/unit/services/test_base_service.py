"""
Unit Tests for Base Service.

Tests storage error translation and required-field validation.
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from quirknotes.core.exceptions import ConflictError, DatabaseError, ValidationError
from quirknotes.services.base import BaseService


@pytest.fixture
def service():
    """Create a BaseService instance."""
    return BaseService(AsyncMock())


class TestExecuteDbOperation:
    """Tests for _execute_db_operation method."""

    async def test_returns_result_on_success(self, service):
        async def successful_operation():
            return "note-1"

        assert await service._execute_db_operation("create_note", successful_operation()) == "note-1"

    async def test_unique_violation_uses_conflict_message(self, service):
        async def failing_operation():
            raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: users.username"))

        with pytest.raises(ConflictError) as exc_info:
            await service._execute_db_operation(
                "register_user",
                failing_operation(),
                conflict_message="Username already exists.",
            )

        assert exc_info.value.message == "Username already exists."

    async def test_duplicate_key_is_conflict(self, service):
        async def failing_operation():
            raise IntegrityError("INSERT", {}, Exception("duplicate key value violates unique constraint"))

        with pytest.raises(ConflictError):
            await service._execute_db_operation("register_user", failing_operation())

    async def test_other_integrity_error_is_database_error(self, service):
        async def failing_operation():
            raise IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed"))

        with pytest.raises(DatabaseError, match="constraint violation"):
            await service._execute_db_operation("create_note", failing_operation())

    async def test_sqlalchemy_error_is_database_error(self, service):
        async def failing_operation():
            raise SQLAlchemyError("Connection lost")

        with pytest.raises(DatabaseError, match="operation failed"):
            await service._execute_db_operation("list_notes", failing_operation())


class TestValidateRequired:
    """Tests for _validate_required method."""

    def test_passes_when_all_fields_present(self, service):
        service._validate_required({"title": "a", "content": "b"}, ["title", "content"])

    def test_whitespace_only_value_counts_as_present(self, service):
        service._validate_required({"password": "        ", "title": " "}, ["password", "title"])

    def test_reports_every_missing_field(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service._validate_required({"title": None, "content": ""}, ["title", "content"])

        assert exc_info.value.details["missing_fields"] == ["title", "content"]

    def test_uses_given_message(self, service):
        with pytest.raises(ValidationError, match="Title and content are both required."):
            service._validate_required(
                {},
                ["title"],
                message="Title and content are both required.",
            )
