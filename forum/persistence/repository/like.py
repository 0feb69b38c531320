"""PostgreSQL implementation of Like repository."""

from sqlalchemy import func, not_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.repository import LikeRepository
from forum.domain.value import CommentId, IdGenerator, UserId, default_id_generator
from forum.persistence.tables import comment_likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository.

    Toggling is a single upsert: the first toggle inserts a liked record and
    every later one flips ``is_liked`` on the existing row. Concurrent
    toggles for the same pair serialize on the unique constraint.
    """

    def __init__(
        self, session: AsyncSession, id_generator: IdGenerator = default_id_generator
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            id_generator: Source of the random part of new like IDs
        """
        self.session = session
        self.id_generator = id_generator

    async def toggle_comment_like(self, owner_id: UserId, comment_id: CommentId) -> bool:
        """Flip the like of owner_id on comment_id and return the new state."""
        stmt = (
            insert(comment_likes_table)
            .values(
                id=f"like-{self.id_generator()}",
                owner=owner_id,
                comment=comment_id,
                is_liked=True,
            )
            .on_conflict_do_update(
                index_elements=[
                    comment_likes_table.c.owner,
                    comment_likes_table.c.comment,
                ],
                set_={"is_liked": not_(comment_likes_table.c.is_liked)},
            )
            .returning(comment_likes_table.c.is_liked)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_comment_likes(self, comment_id: CommentId) -> int:
        """Count records currently marked as liked."""
        stmt = (
            select(func.count())
            .select_from(comment_likes_table)
            .where(
                comment_likes_table.c.comment == comment_id,
                comment_likes_table.c.is_liked.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
