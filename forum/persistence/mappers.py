"""Mappers from database rows to domain models.

Domain models are frozen pydantic models, so rows are mapped by hand
instead of through an ORM.
"""

from typing import Any, Dict

from forum.domain.model import CommentRecord, ReplyRecord, ThreadRecord
from forum.domain.value import CommentId, ReplyId, ThreadId


def row_to_thread_record(row: Dict[str, Any]) -> ThreadRecord:
    """Convert a thread row joined with its owner's username."""
    return ThreadRecord(
        id=ThreadId(row["id"]),
        title=row["title"],
        body=row["body"],
        date=row["date"],
        username=row["username"],
    )


def row_to_comment_record(row: Dict[str, Any]) -> CommentRecord:
    """Convert a comment row joined with its owner's username."""
    return CommentRecord(
        id=CommentId(row["id"]),
        username=row["username"],
        date=row["date"],
        content=row["content"],
        is_deleted=row["is_deleted"],
    )


def row_to_reply_record(row: Dict[str, Any]) -> ReplyRecord:
    """Convert a reply row joined with its owner's username."""
    return ReplyRecord(
        id=ReplyId(row["id"]),
        comment=CommentId(row["comment"]),
        username=row["username"],
        date=row["date"],
        content=row["content"],
        is_deleted=row["is_deleted"],
    )
