"""SQLAlchemy table definitions for the forum.

They match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

metadata = MetaData()

# Prefixed identifiers such as "thread-<32 hex chars>"
ID_LENGTH = 50

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("fullname", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True),
    Column("title", String(255), nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "owner",
        String(ID_LENGTH),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
)

Index("idx_threads_owner", threads_table.c.owner)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True),
    Column(
        "thread",
        String(ID_LENGTH),
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "owner",
        String(ID_LENGTH),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column("date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
)

Index("idx_comments_thread", comments_table.c.thread)
Index("idx_comments_date", comments_table.c.date)

# ============================================================================
# REPLIES TABLE
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True),
    Column(
        "comment",
        String(ID_LENGTH),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "owner",
        String(ID_LENGTH),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column("date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
)

Index("idx_replies_comment", replies_table.c.comment)

# ============================================================================
# COMMENT_LIKES TABLE (one toggle record per user and comment)
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True),
    Column(
        "owner",
        String(ID_LENGTH),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "comment",
        String(ID_LENGTH),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("is_liked", Boolean, nullable=False, server_default="true"),
    Column("date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    UniqueConstraint("owner", "comment", name="uq_comment_like_owner"),
)

Index("idx_comment_likes_comment", comment_likes_table.c.comment)
