"""Enumerated domain values."""

from enum import Enum


class PostStatus(str, Enum):
    """Publication state of a post."""

    DRAFT = "draft"
    LIVE = "live"
    ARCHIVED = "archived"


class UserRole(str, Enum):
    """Role a user plays on the blog."""

    AUTHOR = "author"
    ADMIN = "admin"
    READER = "reader"
