"""
Unit Tests for Core Utilities.
"""

from uuid import uuid4

import pytest

from quirknotes.core.exceptions import ValidationError
from quirknotes.core.utils import normalize_id, utc_now


class TestUtcNow:
    def test_is_timezone_naive(self):
        assert utc_now().tzinfo is None


class TestNormalizeId:
    def test_accepts_canonical_uuid(self):
        value = str(uuid4())
        assert normalize_id(value) == value

    def test_normalizes_uppercase(self):
        value = str(uuid4())
        assert normalize_id(value.upper()) == value

    @pytest.mark.parametrize("value", ["", "123", "not-an-id", "65a1f0c2e4b0a1b2c3d4e5f6"])
    def test_rejects_malformed(self, value):
        with pytest.raises(ValidationError, match="Invalid note ID."):
            normalize_id(value, "Invalid note ID.")
