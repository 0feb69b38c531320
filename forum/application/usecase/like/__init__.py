"""Like use cases."""

from .count_comment_likes import (
    CountCommentLikesRequest,
    CountCommentLikesResponse,
    CountCommentLikesUseCase,
)
from .toggle_comment_like import (
    ToggleCommentLikeRequest,
    ToggleCommentLikeResponse,
    ToggleCommentLikeUseCase,
)

__all__ = [
    "CountCommentLikesRequest",
    "CountCommentLikesResponse",
    "CountCommentLikesUseCase",
    "ToggleCommentLikeRequest",
    "ToggleCommentLikeResponse",
    "ToggleCommentLikeUseCase",
]
