"""Thread repository interface."""

from abc import ABC, abstractmethod

from forum.domain.model.thread import AddedThread, NewThread, ThreadRecord
from forum.domain.value import ThreadId


class ThreadRepository(ABC):
    """Repository for Thread entity.

    Defines the contract for thread persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def add_thread(self, new_thread: NewThread) -> AddedThread:
        """Insert a thread.

        Args:
            new_thread: Validated thread payload

        Returns:
            The persisted thread including its generated ID
        """
        pass

    @abstractmethod
    async def verify_available_thread(self, thread_id: ThreadId) -> None:
        """Check that a thread exists.

        Args:
            thread_id: The thread ID

        Raises:
            NotFoundError: If the thread does not exist
        """
        pass

    @abstractmethod
    async def get_thread_by_id(self, thread_id: ThreadId) -> ThreadRecord:
        """Get a thread joined with its owner's username.

        Args:
            thread_id: The thread ID

        Returns:
            The thread record

        Raises:
            NotFoundError: If the thread does not exist
        """
        pass
