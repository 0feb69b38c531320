"""In-memory like repository for testing."""

from forum.domain.model import Like
from forum.domain.repository import LikeRepository
from forum.domain.value import (
    CommentId,
    IdGenerator,
    LikeId,
    UserId,
    default_id_generator,
)

from .database import InMemoryDatabase


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing.

    The read and the write of a toggle happen without an ``await`` in
    between, so toggles cannot interleave on the event loop.
    """

    def __init__(
        self,
        database: InMemoryDatabase,
        id_generator: IdGenerator = default_id_generator,
    ) -> None:
        self.database = database
        self.id_generator = id_generator

    async def toggle_comment_like(self, owner_id: UserId, comment_id: CommentId) -> bool:
        """Flip the like of owner_id on comment_id and return the new state."""
        key = (owner_id, comment_id)
        like = self.database.likes.get(key)
        if like is None:
            like = Like(
                id=LikeId(f"like-{self.id_generator()}"),
                owner=owner_id,
                comment=comment_id,
            )
        else:
            like = like.model_copy(update={"is_liked": not like.is_liked})
        self.database.likes[key] = like
        return like.is_liked

    async def count_comment_likes(self, comment_id: CommentId) -> int:
        """Count records currently marked as liked."""
        return sum(
            1
            for like in self.database.likes.values()
            if like.comment == comment_id and like.is_liked
        )
