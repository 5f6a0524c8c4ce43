"""Comment entity.

Comments belong to a topic and form a forest through ``parent_id``.
They are stored as a flat list per topic; trees are derived on read.
"""

from typing import Optional

from pydantic import ConfigDict, Field

from banter.domain.model.common import DomainModel
from banter.domain.value import CommentId


class Comment(DomainModel):
    """Comment entity.

    Represents a root comment on a topic or a reply to another comment.

    Persisted with camelCase keys (``parentId``) so stored records keep the
    layout the chat frontend writes.

    Business rules:
    - ``timestamp`` (ms since epoch) never changes after creation
    - Edits only touch ``content`` and ``author``
    - Deletion overwrites ``content`` with a marker and keeps the row,
      so replies stay attached
    - Vote counters never go below zero
    """

    model_config = ConfigDict(populate_by_name=True)

    id: CommentId
    content: str = Field(min_length=1)
    author: str
    timestamp: int = Field(ge=0)
    parent_id: Optional[CommentId] = Field(default=None, alias="parentId")
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)

    @property
    def score(self) -> int:
        """Net score used by the ``top`` ordering."""
        return self.upvotes - self.downvotes

    @property
    def is_root(self) -> bool:
        """Whether this comment starts a thread."""
        return self.parent_id is None
