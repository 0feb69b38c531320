"""Reply use cases."""

from .add_reply import AddReplyRequest, AddReplyUseCase
from .delete_reply import DeleteReplyRequest, DeleteReplyUseCase

__all__ = [
    "AddReplyRequest",
    "AddReplyUseCase",
    "DeleteReplyRequest",
    "DeleteReplyUseCase",
]
