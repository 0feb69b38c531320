"""Access token helpers.

Tokens are minted by the authentication service; this API only decodes them
to find out who is calling.
"""

from datetime import datetime

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from forum.config import AuthSettings


class TokenPayload(BaseModel):
    """Access token claims."""

    user_id: str
    exp: datetime


class JWTError(Exception):
    """Token could not be decoded or has expired."""

    pass


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode an access token.

    Args:
        token: Encoded JWT
        settings: Authentication settings

    Returns:
        Decoded claims

    Raises:
        JWTError: If the token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload(**payload)
    except PydanticValidationError:
        raise JWTError("Token is missing required claims")
