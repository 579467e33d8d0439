"""Strongly typed identifiers for blog domain entities.

Identifiers are generated by the store on insertion, so they are plain
integers wrapped in NewType to keep post, tag and user IDs apart.
"""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
TagId = NewType("TagId", int)
