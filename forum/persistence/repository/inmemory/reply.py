"""In-memory reply repository for testing."""

from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.model import AddedReply, NewReply, ReplyRecord
from forum.domain.repository import ReplyRepository
from forum.domain.value import (
    CommentId,
    IdGenerator,
    ReplyId,
    ThreadId,
    UserId,
    default_id_generator,
)

from .database import InMemoryDatabase, ReplyRow


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(
        self,
        database: InMemoryDatabase,
        id_generator: IdGenerator = default_id_generator,
    ) -> None:
        self.database = database
        self.id_generator = id_generator

    async def verify_available_reply(
        self, thread_id: ThreadId, comment_id: CommentId, reply_id: ReplyId
    ) -> None:
        """Raise NotFoundError unless a live reply exists under the comment."""
        row = self.database.replies.get(reply_id)
        comment = self.database.comments.get(comment_id)
        if (
            row is None
            or row.is_deleted
            or row.comment != comment_id
            or comment is None
            or comment.thread != thread_id
        ):
            raise NotFoundError("Reply", reply_id)

    async def verify_reply_owner(self, reply_id: ReplyId, owner_id: UserId) -> None:
        """Raise unless owner_id wrote the reply."""
        row = self.database.replies.get(reply_id)
        if row is None:
            raise NotFoundError("Reply", reply_id)
        if row.owner != owner_id:
            raise AuthorizationError("reply", reply_id, owner_id)

    async def add_reply(self, new_reply: NewReply) -> AddedReply:
        """Insert a reply."""
        row = ReplyRow(
            id=ReplyId(f"reply-{self.id_generator()}"),
            comment=new_reply.comment,
            owner=new_reply.owner,
            content=new_reply.content,
        )
        self.database.replies[row.id] = row
        return AddedReply(id=row.id, content=row.content, owner=row.owner)

    async def delete_reply_by_id(self, reply_id: ReplyId) -> None:
        """Mark a reply as deleted."""
        row = self.database.replies.get(reply_id)
        if row is None:
            raise NotFoundError("Reply", reply_id)
        self.database.replies[reply_id] = row.model_copy(update={"is_deleted": True})

    async def get_replies_by_comment_id(self, comment_id: CommentId) -> list[ReplyRecord]:
        """Get every reply of a comment, oldest first."""
        rows = sorted(
            (r for r in self.database.replies.values() if r.comment == comment_id),
            key=lambda r: r.date,
        )
        return [
            ReplyRecord(
                id=row.id,
                comment=row.comment,
                username=self.database.username_of(row.owner),
                date=row.date,
                content=row.content,
                is_deleted=row.is_deleted,
            )
            for row in rows
        ]
