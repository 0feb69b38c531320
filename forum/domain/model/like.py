"""Like entity.

A like is a toggle record: one per (owner, comment) pair, flipped on every
toggle instead of being deleted.
"""

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, LikeId, UserId


class Like(DomainModel):
    """Like state of a user on a comment."""

    id: LikeId
    owner: UserId
    comment: CommentId
    is_liked: bool = True
