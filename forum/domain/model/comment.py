"""Comment entities.

Comments belong to exactly one thread and own zero or more replies.
Deleted comments are kept; their content is masked when presented.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel, PayloadModel
from forum.domain.model.reply import ReplyDetail
from forum.domain.value import DELETED_COMMENT_CONTENT, CommentId, ThreadId, UserId


class NewComment(PayloadModel):
    """Validated payload for commenting on a thread."""

    content: str = Field(min_length=1)
    owner: UserId = Field(min_length=1)
    thread: ThreadId = Field(min_length=1)


class AddedComment(DomainModel):
    """Comment as returned after insertion."""

    id: CommentId
    content: str
    owner: UserId


class CommentRecord(DomainModel):
    """Comment row joined with its owner's username."""

    id: CommentId
    username: str
    date: datetime
    content: str
    is_deleted: bool = False


class CommentDetail(DomainModel):
    """Comment view inside a thread detail."""

    id: CommentId
    username: str
    date: datetime
    content: str
    like_count: int = Field(default=0, ge=0)
    replies: list[ReplyDetail] = []

    @classmethod
    def from_record(
        cls,
        record: CommentRecord,
        replies: list[ReplyDetail],
        like_count: int = 0,
    ) -> "CommentDetail":
        """Build the view, masking the content of a deleted comment."""
        return cls(
            id=record.id,
            username=record.username,
            date=record.date,
            content=DELETED_COMMENT_CONTENT if record.is_deleted else record.content,
            like_count=like_count,
            replies=replies,
        )
