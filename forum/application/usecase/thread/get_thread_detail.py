"""Get thread detail use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import ValidationError
from forum.domain.model import CommentDetail, CommentRecord, ReplyDetail, ThreadDetail
from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import ThreadId


class GetThreadDetailRequest(BaseModel):
    """Get thread detail request."""

    thread_id: str | None = None


class GetThreadDetailUseCase(BaseUseCase):
    """Use case for reading a thread with its comments and replies.

    Flat comment and reply records are joined into a tree:
    thread -> comments (repository order) -> replies (repository order).
    Deleted comments and replies keep their place in the tree but show
    placeholder content.
    """

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
    ) -> None:
        """Initialize get thread detail use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
            like_repository: Like repository (per-comment like counts)
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository
        self.like_repository = like_repository

    async def execute(self, request: GetThreadDetailRequest) -> ThreadDetail:
        """Execute get thread detail flow.

        Steps:
        1. Fetch the thread
        2. Fetch its comments
        3. For each comment, fetch its replies and like count
        4. Assemble the nested view, masking deleted content

        Fetches are issued one after another: every repository of a request
        shares a single database session.

        Args:
            request: Get thread detail request

        Returns:
            Thread detail with nested comments and replies

        Raises:
            ValidationError: If thread_id is missing
            NotFoundError: If the thread does not exist
        """
        if not request.thread_id:
            raise ValidationError(
                "GetThreadDetailRequest is missing required property: thread_id"
            )

        thread_id = ThreadId(request.thread_id)

        with logfire.span("get_thread_detail", thread_id=thread_id):
            thread = await self.thread_repository.get_thread_by_id(thread_id)
            comments = await self.comment_repository.get_comments_by_thread_id(
                thread_id
            )

            comment_details = []
            for comment in comments:
                comment_details.append(await self._build_comment_detail(comment))

            logfire.info(
                "Thread detail assembled",
                thread_id=thread_id,
                comment_count=len(comment_details),
            )
            return ThreadDetail.from_record(thread, comment_details)

    async def _build_comment_detail(self, comment: CommentRecord) -> CommentDetail:
        replies = await self.reply_repository.get_replies_by_comment_id(comment.id)
        like_count = await self.like_repository.count_comment_likes(comment.id)

        return CommentDetail.from_record(
            comment,
            replies=[ReplyDetail.from_record(reply) for reply in replies],
            like_count=like_count,
        )
