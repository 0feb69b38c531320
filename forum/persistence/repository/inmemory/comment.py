"""In-memory comment repository for testing."""

from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.model import AddedComment, CommentRecord, NewComment
from forum.domain.repository import CommentRepository
from forum.domain.value import (
    CommentId,
    IdGenerator,
    ThreadId,
    UserId,
    default_id_generator,
)

from .database import CommentRow, InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(
        self,
        database: InMemoryDatabase,
        id_generator: IdGenerator = default_id_generator,
    ) -> None:
        self.database = database
        self.id_generator = id_generator

    async def verify_available_comment(
        self,
        thread_id: ThreadId,
        comment_id: CommentId,
        *,
        include_deleted: bool = False,
    ) -> None:
        """Raise NotFoundError unless the comment exists in the thread."""
        row = self.database.comments.get(comment_id)
        if (
            row is None
            or row.thread != thread_id
            or (row.is_deleted and not include_deleted)
        ):
            raise NotFoundError("Comment", comment_id)

    async def verify_comment_owner(self, comment_id: CommentId, owner_id: UserId) -> None:
        """Raise unless owner_id wrote the comment."""
        row = self.database.comments.get(comment_id)
        if row is None:
            raise NotFoundError("Comment", comment_id)
        if row.owner != owner_id:
            raise AuthorizationError("comment", comment_id, owner_id)

    async def add_comment(self, new_comment: NewComment) -> AddedComment:
        """Insert a comment."""
        row = CommentRow(
            id=CommentId(f"comment-{self.id_generator()}"),
            thread=new_comment.thread,
            owner=new_comment.owner,
            content=new_comment.content,
        )
        self.database.comments[row.id] = row
        return AddedComment(id=row.id, content=row.content, owner=row.owner)

    async def delete_comment_by_id(
        self, comment_id: CommentId, thread_id: ThreadId
    ) -> None:
        """Mark a comment as deleted."""
        row = self.database.comments.get(comment_id)
        if row is None or row.thread != thread_id:
            raise NotFoundError("Comment", comment_id)
        self.database.comments[comment_id] = row.model_copy(update={"is_deleted": True})

    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> list[CommentRecord]:
        """Get every comment of a thread, oldest first."""
        rows = sorted(
            (c for c in self.database.comments.values() if c.thread == thread_id),
            key=lambda c: c.date,
        )
        return [
            CommentRecord(
                id=row.id,
                username=self.database.username_of(row.owner),
                date=row.date,
                content=row.content,
                is_deleted=row.is_deleted,
            )
            for row in rows
        ]
