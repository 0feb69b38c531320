"""Unit tests for thread detail views."""

from forum.domain.model import (
    CommentDetail,
    CommentRecord,
    ReplyDetail,
    ReplyRecord,
    ThreadDetail,
    ThreadRecord,
)
from forum.domain.value import DELETED_COMMENT_CONTENT, DELETED_REPLY_CONTENT
from tests.conftest import FIXED_DATE


def _comment_record(is_deleted: bool) -> CommentRecord:
    return CommentRecord(
        id="comment-123",
        username="dicoding",
        date=FIXED_DATE,
        content="sebuah comment",
        is_deleted=is_deleted,
    )


def _reply_record(is_deleted: bool) -> ReplyRecord:
    return ReplyRecord(
        id="reply-123",
        comment="comment-123",
        username="johndoe",
        date=FIXED_DATE,
        content="sebuah balasan",
        is_deleted=is_deleted,
    )


class TestCommentDetail:
    """Tests for CommentDetail.from_record."""

    def test_live_comment_keeps_content(self):
        detail = CommentDetail.from_record(_comment_record(False), replies=[])

        assert detail.content == "sebuah comment"
        assert detail.replies == []
        assert detail.like_count == 0

    def test_deleted_comment_is_masked(self):
        """Only the content changes; identity fields stay."""
        detail = CommentDetail.from_record(_comment_record(True), replies=[], like_count=2)

        assert detail.content == DELETED_COMMENT_CONTENT
        assert detail.id == "comment-123"
        assert detail.username == "dicoding"
        assert detail.date == FIXED_DATE
        assert detail.like_count == 2

    def test_placeholder_text(self):
        assert DELETED_COMMENT_CONTENT == "**komentar telah dihapus**"


class TestReplyDetail:
    """Tests for ReplyDetail.from_record."""

    def test_live_reply_keeps_content(self):
        assert ReplyDetail.from_record(_reply_record(False)).content == "sebuah balasan"

    def test_deleted_reply_is_masked(self):
        detail = ReplyDetail.from_record(_reply_record(True))

        assert detail.content == DELETED_REPLY_CONTENT
        assert detail.id == "reply-123"
        assert detail.username == "johndoe"

    def test_placeholder_text(self):
        assert DELETED_REPLY_CONTENT == "**balasan telah dihapus**"


class TestThreadDetail:
    """Tests for ThreadDetail.from_record."""

    def test_attaches_comments_in_order(self):
        record = ThreadRecord(
            id="thread-123",
            title="sebuah thread",
            body="sebuah body thread",
            date=FIXED_DATE,
            username="dicoding",
        )
        first = CommentDetail.from_record(_comment_record(False), replies=[])
        second = CommentDetail.from_record(_comment_record(True), replies=[])

        detail = ThreadDetail.from_record(record, [first, second])

        assert detail.id == "thread-123"
        assert detail.username == "dicoding"
        assert detail.comments == [first, second]
