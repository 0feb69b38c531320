"""Add reply use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddedReply, NewReply
from forum.domain.repository import CommentRepository, ReplyRepository, ThreadRepository
from forum.domain.value import CommentId, ThreadId


class AddReplyRequest(BaseModel):
    """Add reply request."""

    thread_id: str
    comment_id: str
    owner: str  # User ID from authenticated user
    content: Any = None  # Validated by NewReply


class AddReplyUseCase(BaseUseCase):
    """Use case for replying to a comment."""

    def __init__(
        self,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize add reply use case.

        Args:
            reply_repository: Reply repository
            comment_repository: Comment repository
            thread_repository: Thread repository
        """
        self.reply_repository = reply_repository
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository

    async def execute(self, request: AddReplyRequest) -> AddedReply:
        """Execute add reply flow.

        Steps:
        1. Verify the thread exists
        2. Verify the comment exists within the thread
        3. Build the validated reply payload
        4. Insert it

        Args:
            request: Add reply request

        Returns:
            The persisted reply, unchanged

        Raises:
            NotFoundError: If the thread or comment does not exist
            ValidationError: If the content is missing or malformed
        """
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)

        with logfire.span(
            "add_reply", thread_id=thread_id, comment_id=comment_id, owner=request.owner
        ):
            await self.thread_repository.verify_available_thread(thread_id)
            await self.comment_repository.verify_available_comment(thread_id, comment_id)

            new_reply = NewReply(
                content=request.content,
                owner=request.owner,
                comment=comment_id,
            )
            added = await self.reply_repository.add_reply(new_reply)

            logfire.info("Reply added", reply_id=added.id, comment_id=comment_id)
            return added
