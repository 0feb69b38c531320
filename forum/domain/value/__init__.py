"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    CommentId,
    IdGenerator,
    LikeId,
    ReplyId,
    ThreadId,
    UserId,
    default_id_generator,
)
from forum.domain.value.types import (
    DELETED_COMMENT_CONTENT,
    DELETED_REPLY_CONTENT,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommentId",
    "ReplyId",
    "LikeId",
    "IdGenerator",
    "default_id_generator",
    # Types
    "Username",
    "DELETED_COMMENT_CONTENT",
    "DELETED_REPLY_CONTENT",
]
