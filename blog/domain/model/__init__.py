"""Domain model entities for the blog engine."""

from blog.domain.model.post import Post
from blog.domain.model.post_details import PostDetails
from blog.domain.model.tag import Tag, TagChanges, diff_tags
from blog.domain.model.user import User

__all__ = [
    "User",
    "Tag",
    "TagChanges",
    "PostDetails",
    "Post",
    "diff_tags",
]
