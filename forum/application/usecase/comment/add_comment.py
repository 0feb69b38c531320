"""Add comment use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddedComment, NewComment
from forum.domain.repository import CommentRepository, ThreadRepository
from forum.domain.value import ThreadId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    thread_id: str
    owner: str  # User ID from authenticated user
    content: Any = None  # Validated by NewComment


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a thread."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_repository: Comment repository
            thread_repository: Thread repository
        """
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository

    async def execute(self, request: AddCommentRequest) -> AddedComment:
        """Execute add comment flow.

        Steps:
        1. Verify the thread exists
        2. Build the validated comment payload
        3. Insert it

        Args:
            request: Add comment request

        Returns:
            The persisted comment, unchanged

        Raises:
            NotFoundError: If the thread does not exist
            ValidationError: If the content is missing or malformed
        """
        thread_id = ThreadId(request.thread_id)

        with logfire.span("add_comment", thread_id=thread_id, owner=request.owner):
            await self.thread_repository.verify_available_thread(thread_id)

            new_comment = NewComment(
                content=request.content,
                owner=request.owner,
                thread=thread_id,
            )
            added = await self.comment_repository.add_comment(new_comment)

            logfire.info("Comment added", comment_id=added.id, thread_id=thread_id)
            return added
