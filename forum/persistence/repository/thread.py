"""PostgreSQL implementation of Thread repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import NotFoundError
from forum.domain.model import AddedThread, NewThread, ThreadRecord
from forum.domain.repository import ThreadRepository
from forum.domain.value import IdGenerator, ThreadId, default_id_generator
from forum.persistence.mappers import row_to_thread_record
from forum.persistence.tables import threads_table, users_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(
        self, session: AsyncSession, id_generator: IdGenerator = default_id_generator
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            id_generator: Source of the random part of new thread IDs
        """
        self.session = session
        self.id_generator = id_generator

    async def add_thread(self, new_thread: NewThread) -> AddedThread:
        """Insert a thread and return its ID, title and owner."""
        stmt = (
            threads_table.insert()
            .values(
                id=f"thread-{self.id_generator()}",
                title=new_thread.title,
                body=new_thread.body,
                owner=new_thread.owner,
            )
            .returning(threads_table.c.id, threads_table.c.title, threads_table.c.owner)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        return AddedThread(**row)

    async def verify_available_thread(self, thread_id: ThreadId) -> None:
        """Raise NotFoundError unless the thread exists."""
        stmt = select(threads_table.c.id).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        if result.first() is None:
            raise NotFoundError("Thread", thread_id)

    async def get_thread_by_id(self, thread_id: ThreadId) -> ThreadRecord:
        """Fetch a thread joined with its owner's username."""
        stmt = (
            select(
                threads_table.c.id,
                threads_table.c.title,
                threads_table.c.body,
                threads_table.c.date,
                users_table.c.username,
            )
            .join(users_table, users_table.c.id == threads_table.c.owner)
            .where(threads_table.c.id == thread_id)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            raise NotFoundError("Thread", thread_id)
        return row_to_thread_record(dict(row))
