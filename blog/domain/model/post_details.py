"""Rendered post content."""

from typing import Optional

from blog.domain.model.common import DomainModel
from blog.domain.value import PostId


class PostDetails(DomainModel):
    """Rendered content body, one-to-one with a Post."""

    post_id: Optional[PostId] = None
    content: str
