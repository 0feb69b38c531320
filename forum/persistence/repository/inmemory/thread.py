"""In-memory thread repository for testing."""

from forum.domain.error import NotFoundError
from forum.domain.model import AddedThread, NewThread, ThreadRecord
from forum.domain.repository import ThreadRepository
from forum.domain.value import IdGenerator, ThreadId, default_id_generator

from .database import InMemoryDatabase, ThreadRow


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(
        self,
        database: InMemoryDatabase,
        id_generator: IdGenerator = default_id_generator,
    ) -> None:
        self.database = database
        self.id_generator = id_generator

    async def add_thread(self, new_thread: NewThread) -> AddedThread:
        """Insert a thread."""
        row = ThreadRow(
            id=ThreadId(f"thread-{self.id_generator()}"),
            title=new_thread.title,
            body=new_thread.body,
            owner=new_thread.owner,
        )
        self.database.threads[row.id] = row
        return AddedThread(id=row.id, title=row.title, owner=row.owner)

    async def verify_available_thread(self, thread_id: ThreadId) -> None:
        """Raise NotFoundError unless the thread exists."""
        if thread_id not in self.database.threads:
            raise NotFoundError("Thread", thread_id)

    async def get_thread_by_id(self, thread_id: ThreadId) -> ThreadRecord:
        """Fetch a thread with its owner's username."""
        row = self.database.threads.get(thread_id)
        if row is None:
            raise NotFoundError("Thread", thread_id)
        return ThreadRecord(
            id=row.id,
            title=row.title,
            body=row.body,
            date=row.date,
            username=self.database.username_of(row.owner),
        )
