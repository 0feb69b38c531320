"""Delete reply use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.repository import CommentRepository, ReplyRepository, ThreadRepository
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    thread_id: str
    comment_id: str
    reply_id: str
    owner: str  # Current user ID (must be author)


class DeleteReplyUseCase(BaseUseCase):
    """Use case for soft deleting a reply."""

    def __init__(
        self,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize delete reply use case.

        Args:
            reply_repository: Reply repository
            comment_repository: Comment repository
            thread_repository: Thread repository
        """
        self.reply_repository = reply_repository
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository

    async def execute(self, request: DeleteReplyRequest) -> None:
        """Execute delete reply flow.

        Checks run in this order and the first failure stops the flow:
        1. Thread exists
        2. Comment exists within the thread, deleted or not
        3. Reply exists under the comment
        4. Current user owns the reply

        Args:
            request: Delete reply request

        Raises:
            NotFoundError: If the thread, comment or reply does not exist
            AuthorizationError: If the user doesn't own the reply
        """
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)
        reply_id = ReplyId(request.reply_id)
        owner = UserId(request.owner)

        with logfire.span(
            "delete_reply",
            thread_id=thread_id,
            comment_id=comment_id,
            reply_id=reply_id,
            owner=owner,
        ):
            await self.thread_repository.verify_available_thread(thread_id)
            await self.comment_repository.verify_available_comment(
                thread_id, comment_id, include_deleted=True
            )
            await self.reply_repository.verify_available_reply(
                thread_id, comment_id, reply_id
            )
            await self.reply_repository.verify_reply_owner(reply_id, owner)
            await self.reply_repository.delete_reply_by_id(reply_id)

            logfire.info("Reply deleted", reply_id=reply_id, comment_id=comment_id)
