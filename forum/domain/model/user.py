"""User entity.

Users are provisioned by the external auth service. The forum only needs
their username to render threads, comments and replies.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId, Username


class User(DomainModel):
    """Forum user."""

    id: UserId
    username: Username
    fullname: str = Field(min_length=1, max_length=255)
    created_at: datetime = Field(default_factory=datetime.now)
