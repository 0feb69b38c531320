"""Domain model entities for the forum."""

from forum.domain.model.comment import (
    AddedComment,
    CommentDetail,
    CommentRecord,
    NewComment,
)
from forum.domain.model.like import Like
from forum.domain.model.reply import AddedReply, NewReply, ReplyDetail, ReplyRecord
from forum.domain.model.thread import AddedThread, NewThread, ThreadDetail, ThreadRecord
from forum.domain.model.user import User

__all__ = [
    "User",
    "NewThread",
    "AddedThread",
    "ThreadRecord",
    "ThreadDetail",
    "NewComment",
    "AddedComment",
    "CommentRecord",
    "CommentDetail",
    "NewReply",
    "AddedReply",
    "ReplyRecord",
    "ReplyDetail",
    "Like",
]
