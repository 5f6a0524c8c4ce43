"""Strongly typed identifiers for Banter domain entities.

Using NewType for strong typing prevents mixing up identifiers with
arbitrary strings and makes the code more self-documenting.
"""

from typing import NewType

# Comment ids are client-generated uuid4 strings, persisted as plain strings
CommentId = NewType("CommentId", str)
