"""Shared in-memory storage.

The in-memory repositories all read and write one ``InMemoryDatabase`` so
that a thread added through one repository is visible to the others, the
way tables are in PostgreSQL.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from forum.domain.error import NotFoundError
from forum.domain.model import Like, User
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ThreadRow(BaseModel):
    id: ThreadId
    title: str
    body: str
    owner: UserId
    date: datetime = Field(default_factory=_now)


class CommentRow(BaseModel):
    id: CommentId
    thread: ThreadId
    owner: UserId
    content: str
    date: datetime = Field(default_factory=_now)
    is_deleted: bool = False


class ReplyRow(BaseModel):
    id: ReplyId
    comment: CommentId
    owner: UserId
    content: str
    date: datetime = Field(default_factory=_now)
    is_deleted: bool = False


class InMemoryDatabase:
    """Tables kept in dicts, keyed by primary key in insertion order."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.threads: dict[ThreadId, ThreadRow] = {}
        self.comments: dict[CommentId, CommentRow] = {}
        self.replies: dict[ReplyId, ReplyRow] = {}
        # Keyed by (owner, comment), mirroring the unique constraint
        self.likes: dict[tuple[UserId, CommentId], Like] = {}

    def username_of(self, user_id: UserId) -> str:
        """Resolve a username the way the SQL joins do."""
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user.username.root
