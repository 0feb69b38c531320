"""Toggle comment like use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.repository import CommentRepository, LikeRepository, ThreadRepository
from forum.domain.value import CommentId, ThreadId, UserId


class ToggleCommentLikeRequest(BaseModel):
    """Toggle comment like request."""

    thread_id: str
    comment_id: str
    owner: str  # User ID from authenticated user


class ToggleCommentLikeResponse(BaseModel):
    """Toggle comment like response."""

    comment_id: str
    is_liked: bool


class ToggleCommentLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a comment."""

    def __init__(
        self,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize toggle comment like use case.

        Args:
            like_repository: Like repository
            comment_repository: Comment repository
            thread_repository: Thread repository
        """
        self.like_repository = like_repository
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository

    async def execute(self, request: ToggleCommentLikeRequest) -> ToggleCommentLikeResponse:
        """Execute toggle like flow.

        Every call performs exactly one write; the outcome alternates
        between liked and unliked.

        Args:
            request: Toggle comment like request

        Returns:
            The like state after the toggle

        Raises:
            NotFoundError: If the thread or comment does not exist
        """
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)
        owner = UserId(request.owner)

        with logfire.span("toggle_comment_like", comment_id=comment_id, owner=owner):
            await self.thread_repository.verify_available_thread(thread_id)
            await self.comment_repository.verify_available_comment(thread_id, comment_id)

            is_liked = await self.like_repository.toggle_comment_like(owner, comment_id)

            logfire.info(
                "Comment like toggled",
                comment_id=comment_id,
                owner=owner,
                is_liked=is_liked,
            )
            return ToggleCommentLikeResponse(comment_id=comment_id, is_liked=is_liked)
