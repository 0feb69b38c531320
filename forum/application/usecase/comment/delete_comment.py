"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.repository import CommentRepository, ThreadRepository
from forum.domain.value import CommentId, ThreadId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    thread_id: str
    comment_id: str
    owner: str  # Current user ID (must be author)


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft deleting a comment."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_repository: Comment repository
            thread_repository: Thread repository
        """
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Checks run in this order and the first failure stops the flow:
        1. Thread exists
        2. Comment exists within the thread
        3. Current user owns the comment

        Args:
            request: Delete comment request

        Raises:
            NotFoundError: If the thread or comment does not exist
            AuthorizationError: If the user doesn't own the comment
        """
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)
        owner = UserId(request.owner)

        with logfire.span(
            "delete_comment", thread_id=thread_id, comment_id=comment_id, owner=owner
        ):
            await self.thread_repository.verify_available_thread(thread_id)
            await self.comment_repository.verify_available_comment(thread_id, comment_id)
            await self.comment_repository.verify_comment_owner(comment_id, owner)
            await self.comment_repository.delete_comment_by_id(comment_id, thread_id)

            logfire.info("Comment deleted", comment_id=comment_id, thread_id=thread_id)
