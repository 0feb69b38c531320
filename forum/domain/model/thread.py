"""Thread entities.

A thread is the top-level discussion unit. It owns zero or more comments.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.comment import CommentDetail
from forum.domain.model.common import DomainModel, PayloadModel
from forum.domain.value import ThreadId, UserId


class NewThread(PayloadModel):
    """Validated payload for creating a thread."""

    title: str = Field(min_length=1, max_length=255)
    body: str = Field(min_length=1)
    owner: UserId = Field(min_length=1)


class AddedThread(DomainModel):
    """Thread as returned after insertion."""

    id: ThreadId
    title: str
    owner: UserId


class ThreadRecord(DomainModel):
    """Thread row joined with its owner's username."""

    id: ThreadId
    title: str
    body: str
    date: datetime
    username: str


class ThreadDetail(DomainModel):
    """Thread with its comments and their replies, ready for presentation."""

    id: ThreadId
    title: str
    body: str
    date: datetime
    username: str
    comments: list[CommentDetail] = []

    @classmethod
    def from_record(
        cls, record: ThreadRecord, comments: list[CommentDetail]
    ) -> "ThreadDetail":
        """Attach assembled comments to a thread record."""
        return cls(
            id=record.id,
            title=record.title,
            body=record.body,
            date=record.date,
            username=record.username,
            comments=comments,
        )
