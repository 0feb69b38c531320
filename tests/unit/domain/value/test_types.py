"""Unit tests for domain value objects."""

import pytest
from pydantic import ValidationError

from forum.domain.value import Username, default_id_generator


class TestUsername:
    """Tests for Username."""

    def test_accepts_word_characters(self):
        assert Username("dicoding_123").root == "dicoding_123"

    @pytest.mark.parametrize(
        "value", ["", "has space", "a" * 51, "dash-name", "dicoding\n"]
    )
    def test_rejects_invalid_usernames(self, value):
        with pytest.raises(ValidationError):
            Username(value)


def test_default_id_generator_is_unique():
    """Generated suffixes should not repeat."""
    assert default_id_generator() != default_id_generator()
