"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.comment import AddCommentUseCase, DeleteCommentUseCase
from forum.application.usecase.like import (
    CountCommentLikesUseCase,
    ToggleCommentLikeUseCase,
)
from forum.application.usecase.reply import AddReplyUseCase, DeleteReplyUseCase
from forum.application.usecase.thread import AddThreadUseCase, GetThreadDetailUseCase
from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Thread use cases
    @provide
    def get_add_thread_use_case(
        self, thread_repository: ThreadRepository
    ) -> AddThreadUseCase:
        """Provide add thread use case."""
        return AddThreadUseCase(thread_repository=thread_repository)

    @provide
    def get_thread_detail_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
    ) -> GetThreadDetailUseCase:
        """Provide get thread detail use case."""
        return GetThreadDetailUseCase(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
            reply_repository=reply_repository,
            like_repository=like_repository,
        )

    # Comment use cases
    @provide
    def get_add_comment_use_case(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_repository=comment_repository,
            thread_repository=thread_repository,
        )

    @provide
    def get_delete_comment_use_case(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_repository=comment_repository,
            thread_repository=thread_repository,
        )

    # Reply use cases
    @provide
    def get_add_reply_use_case(
        self,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(
            reply_repository=reply_repository,
            comment_repository=comment_repository,
            thread_repository=thread_repository,
        )

    @provide
    def get_delete_reply_use_case(
        self,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(
            reply_repository=reply_repository,
            comment_repository=comment_repository,
            thread_repository=thread_repository,
        )

    # Like use cases
    @provide
    def get_toggle_comment_like_use_case(
        self,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> ToggleCommentLikeUseCase:
        """Provide toggle comment like use case."""
        return ToggleCommentLikeUseCase(
            like_repository=like_repository,
            comment_repository=comment_repository,
            thread_repository=thread_repository,
        )

    @provide
    def get_count_comment_likes_use_case(
        self,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> CountCommentLikesUseCase:
        """Provide count comment likes use case."""
        return CountCommentLikesUseCase(
            like_repository=like_repository,
            comment_repository=comment_repository,
            thread_repository=thread_repository,
        )
