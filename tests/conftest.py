"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import jwt

from forum.config import AuthSettings
from forum.domain.model import User
from forum.domain.value import UserId, Username

FIXED_DATE = datetime(2021, 8, 8, 7, 19, 9, tzinfo=timezone.utc)


def make_user(user_id: str = "user-123", username: str = "dicoding") -> User:
    """Build a user for seeding repositories.

    Args:
        user_id: User ID
        username: Username (letters, digits, underscores)

    Returns:
        User domain model
    """
    return User(
        id=UserId(user_id),
        username=Username(username),
        fullname=f"{username.title()} Indonesia",
        created_at=FIXED_DATE,
    )


def make_token(
    user_id: str,
    settings: AuthSettings | None = None,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Sign an access token the way the auth service does."""
    settings = settings or AuthSettings()
    return jwt.encode(
        {"user_id": user_id, "exp": datetime.now(timezone.utc) + expires_in},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


def auth_header(user_id: str) -> dict[str, str]:
    """Cookie header carrying an access token for the given user."""
    return {"Cookie": f"auth_token={make_token(user_id)}"}
