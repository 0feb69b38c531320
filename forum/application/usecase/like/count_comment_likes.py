"""Count comment likes use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.repository import CommentRepository, LikeRepository, ThreadRepository
from forum.domain.value import CommentId, ThreadId


class CountCommentLikesRequest(BaseModel):
    """Count comment likes request."""

    thread_id: str
    comment_id: str


class CountCommentLikesResponse(BaseModel):
    """Count comment likes response."""

    comment_id: str
    like_count: int


class CountCommentLikesUseCase(BaseUseCase):
    """Use case for counting the likes of a comment."""

    def __init__(
        self,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize count comment likes use case.

        Args:
            like_repository: Like repository
            comment_repository: Comment repository
            thread_repository: Thread repository
        """
        self.like_repository = like_repository
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository

    async def execute(self, request: CountCommentLikesRequest) -> CountCommentLikesResponse:
        """Count liked records of a comment (0 when nobody liked it).

        Raises:
            NotFoundError: If the thread or comment does not exist
        """
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)

        with logfire.span("count_comment_likes", comment_id=comment_id):
            await self.thread_repository.verify_available_thread(thread_id)
            await self.comment_repository.verify_available_comment(thread_id, comment_id)

            like_count = await self.like_repository.count_comment_likes(comment_id)
            return CountCommentLikesResponse(comment_id=comment_id, like_count=like_count)
