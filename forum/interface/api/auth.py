"""Resolving the calling user."""

from forum.domain.service import JWTService
from forum.interface.error import AuthenticationError


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Return the authenticated user's ID.

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise AuthenticationError("Missing authentication")
    return user_id
