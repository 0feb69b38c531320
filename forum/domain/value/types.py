"""Domain value objects for the forum."""

import re

from pydantic import field_validator

from forum.domain.value.common import RootValueObject

# Content shown in place of soft-deleted comments and replies
DELETED_COMMENT_CONTENT = "**komentar telah dihapus**"
DELETED_REPLY_CONTENT = "**balasan telah dihapus**"


class Username(RootValueObject[str]):
    """Public username shown next to threads, comments and replies.

    Must be 1-50 characters of letters, digits and underscores.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.fullmatch(r"\w{1,50}", v):
            raise ValueError(
                "Username must be 1-50 characters of letters, digits or underscores"
            )
        return v
