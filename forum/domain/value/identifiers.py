"""Strongly typed identifiers for forum entities.

Identifiers are prefixed strings (``thread-…``, ``comment-…``) generated by the
persistence layer. NewType keeps the different entity IDs from being mixed up.
"""

from typing import Callable, NewType
from uuid import uuid4

UserId = NewType("UserId", str)
ThreadId = NewType("ThreadId", str)
CommentId = NewType("CommentId", str)
ReplyId = NewType("ReplyId", str)
LikeId = NewType("LikeId", str)

# Produces the random part of an identifier; repositories add the prefix
IdGenerator = Callable[[], str]


def default_id_generator() -> str:
    """Generate the random suffix for a new identifier."""
    return uuid4().hex
