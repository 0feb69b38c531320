"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from forum.config import AuthSettings
from forum.domain.service import JWTService
from forum.util.jwt import JWTError
from tests.conftest import make_token

SETTINGS = AuthSettings(jwt_secret="test-secret")


@pytest.fixture
def jwt_service():
    return JWTService(SETTINGS)


class TestJWTService:
    """Tests for JWTService."""

    def test_signed_token_verifies(self, jwt_service):
        token = make_token("user-123", SETTINGS)

        payload = jwt_service.verify_token(token)

        assert payload.user_id == "user-123"

    def test_token_signed_with_other_secret_is_rejected(self, jwt_service):
        token = make_token("user-123", AuthSettings(jwt_secret="another-secret"))

        with pytest.raises(JWTError, match="Invalid token"):
            jwt_service.verify_token(token)

    def test_expired_token_is_rejected(self, jwt_service):
        token = make_token("user-123", SETTINGS, expires_in=timedelta(minutes=-1))

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_get_user_id_from_bad_token_is_none(self, jwt_service, token):
        assert jwt_service.get_user_id_from_token(token) is None

    def test_get_user_id_from_valid_token(self, jwt_service):
        token = make_token("user-123", SETTINGS)

        assert jwt_service.get_user_id_from_token(token) == "user-123"

    def test_token_without_user_id_is_rejected(self, jwt_service):
        token = jwt.encode(
            {
                "username": "dicoding",
                "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
            },
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="claims"):
            jwt_service.verify_token(token)
        assert jwt_service.get_user_id_from_token(token) is None
