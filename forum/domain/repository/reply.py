"""Reply repository interface."""

from abc import ABC, abstractmethod

from forum.domain.model.reply import AddedReply, NewReply, ReplyRecord
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId


class ReplyRepository(ABC):
    """Repository for Reply entity.

    Defines the contract for reply persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def verify_available_reply(
        self, thread_id: ThreadId, comment_id: CommentId, reply_id: ReplyId
    ) -> None:
        """Check that a live reply exists under a comment of a thread.

        Args:
            thread_id: The thread the comment must belong to
            comment_id: The comment the reply must belong to
            reply_id: The reply ID

        Raises:
            NotFoundError: If the reply is missing, deleted, or elsewhere
        """
        pass

    @abstractmethod
    async def verify_reply_owner(self, reply_id: ReplyId, owner_id: UserId) -> None:
        """Check that a user owns a reply.

        Args:
            reply_id: The reply ID
            owner_id: The acting user

        Raises:
            AuthorizationError: If the user is not the owner
        """
        pass

    @abstractmethod
    async def add_reply(self, new_reply: NewReply) -> AddedReply:
        """Insert a reply.

        Args:
            new_reply: Validated reply payload

        Returns:
            The persisted reply including its generated ID
        """
        pass

    @abstractmethod
    async def delete_reply_by_id(self, reply_id: ReplyId) -> None:
        """Soft delete a reply.

        Args:
            reply_id: The reply ID
        """
        pass

    @abstractmethod
    async def get_replies_by_comment_id(self, comment_id: CommentId) -> list[ReplyRecord]:
        """Get all replies of a comment, deleted ones included, oldest first.

        Args:
            comment_id: The comment ID

        Returns:
            Reply records belonging to that comment only
        """
        pass
