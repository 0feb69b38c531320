"""Reply entities.

Replies answer a comment. Like comments they are soft deleted.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel, PayloadModel
from forum.domain.value import DELETED_REPLY_CONTENT, CommentId, ReplyId, UserId


class NewReply(PayloadModel):
    """Validated payload for replying to a comment."""

    content: str = Field(min_length=1)
    owner: UserId = Field(min_length=1)
    comment: CommentId = Field(min_length=1)


class AddedReply(DomainModel):
    """Reply as returned after insertion."""

    id: ReplyId
    content: str
    owner: UserId


class ReplyRecord(DomainModel):
    """Reply row joined with its owner's username."""

    id: ReplyId
    comment: CommentId
    username: str
    date: datetime
    content: str
    is_deleted: bool = False


class ReplyDetail(DomainModel):
    """Reply view inside a comment detail."""

    id: ReplyId
    username: str
    date: datetime
    content: str

    @classmethod
    def from_record(cls, record: ReplyRecord) -> "ReplyDetail":
        """Build the view, masking the content of a deleted reply."""
        return cls(
            id=record.id,
            username=record.username,
            date=record.date,
            content=DELETED_REPLY_CONTENT if record.is_deleted else record.content,
        )
