"""SQLAlchemy table definitions for the blog engine.

Column types are kept portable so the same metadata serves PostgreSQL in
production and SQLite in tests. Timestamps are written in UTC; SQLite keeps
no offset, so the domain models put UTC back on read.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("registered_at", DateTime(timezone=True), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("bio", Text, nullable=True),
    Column("role", String(20), nullable=False),  # 'author', 'admin', 'reader'
    Column("is_active", Boolean, nullable=False, server_default="1"),
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(50), nullable=False, unique=True),
    Column("usage_count", Integer, nullable=False, server_default="0"),
    CheckConstraint("usage_count >= 0", name="tag_usage_count_non_negative"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column("status", String(20), nullable=False),  # 'draft', 'live', 'archived'
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("published_at", DateTime(timezone=True), nullable=True),
    Column("photo_url", Text, nullable=True),
    Column(
        "author_id",
        Integer,
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
)

Index("idx_posts_status_published_at", posts_table.c.status, posts_table.c.published_at)
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# POST_TAGS TABLE (association rows; id order is association order)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "tag_id", Integer, ForeignKey("tags.id", ondelete="RESTRICT"), nullable=False
    ),
    UniqueConstraint("post_id", "tag_id", name="uq_post_tag"),
)

Index("idx_post_tags_post_id", post_tags_table.c.post_id)
Index("idx_post_tags_tag_id", post_tags_table.c.tag_id)

# ============================================================================
# POST_DETAILS TABLE (one-to-one with posts)
# ============================================================================
post_details_table = Table(
    "post_details",
    metadata,
    Column(
        "post_id",
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
        autoincrement=False,
    ),
    Column("content", Text, nullable=False),
)
