"""Comment repository interface."""

from abc import ABC, abstractmethod

from forum.domain.model.comment import AddedComment, CommentRecord, NewComment
from forum.domain.value import CommentId, ThreadId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def verify_available_comment(
        self,
        thread_id: ThreadId,
        comment_id: CommentId,
        *,
        include_deleted: bool = False,
    ) -> None:
        """Check that a comment exists within a thread.

        Args:
            thread_id: The thread the comment must belong to
            comment_id: The comment ID
            include_deleted: Accept a soft deleted comment

        Raises:
            NotFoundError: If the comment is missing or in another thread, or
                is deleted and include_deleted is False
        """
        pass

    @abstractmethod
    async def verify_comment_owner(self, comment_id: CommentId, owner_id: UserId) -> None:
        """Check that a user owns a comment.

        Args:
            comment_id: The comment ID
            owner_id: The acting user

        Raises:
            AuthorizationError: If the user is not the owner
        """
        pass

    @abstractmethod
    async def add_comment(self, new_comment: NewComment) -> AddedComment:
        """Insert a comment.

        Args:
            new_comment: Validated comment payload

        Returns:
            The persisted comment including its generated ID
        """
        pass

    @abstractmethod
    async def delete_comment_by_id(
        self, comment_id: CommentId, thread_id: ThreadId
    ) -> None:
        """Soft delete a comment.

        Args:
            comment_id: The comment ID
            thread_id: The thread the comment belongs to
        """
        pass

    @abstractmethod
    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> list[CommentRecord]:
        """Get all comments of a thread, deleted ones included, oldest first.

        Args:
            thread_id: The thread ID

        Returns:
            Comment records in creation order
        """
        pass
