"""Comment domain service."""

from datetime import datetime
from typing import Callable
from uuid import uuid4

import logfire

from banter.config import CommentSettings
from banter.domain.error import ContentDeletedException, NotFoundError, ValidationError
from banter.domain.model.comment import Comment
from banter.domain.value import CommentId

from .base import Service


def now_ms() -> int:
    """Current time in milliseconds since epoch."""
    return int(datetime.now().timestamp() * 1000)


class CommentService(Service):
    """Domain service for edits over a topic's flat comment list.

    Every operation takes the current list and returns a new one; nothing
    here touches storage. The mutation coordinator decides when to persist.
    """

    def __init__(
        self,
        settings: CommentSettings,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        """Initialize comment service.

        Args:
            settings: Comment settings (length cap, default author, markers)
            clock: Source of creation timestamps in ms
        """
        self.settings = settings
        self.clock = clock

    def is_deleted(self, comment: Comment) -> bool:
        """Whether a comment has been tombstoned."""
        return comment.content == self.settings.deleted_marker

    def find(self, comments: list[Comment], comment_id: CommentId) -> Comment:
        """Find a comment by id within a topic's list.

        Raises:
            NotFoundError: If no comment has the id
        """
        for comment in comments:
            if comment.id == comment_id:
                return comment
        raise NotFoundError("Comment", comment_id)

    def depth_of(self, comments: list[Comment], comment_id: CommentId) -> int:
        """Number of ancestors above a comment (0 for roots).

        Stops at a missing ancestor or a cycle in stored data.
        """
        by_id = {comment.id: comment for comment in comments}
        depth = 0
        seen = {comment_id}
        current = by_id.get(comment_id)
        while current is not None and current.parent_id is not None:
            if current.parent_id in seen:
                break
            seen.add(current.parent_id)
            depth += 1
            current = by_id.get(current.parent_id)
        return depth

    def validate_content(self, content: str) -> str:
        """Trim and validate comment content.

        Raises:
            ValidationError: If empty, over the length cap, or equal to
                the deleted marker
        """
        trimmed = content.strip()
        if not trimmed:
            raise ValidationError("Comment cannot be empty")
        if len(trimmed) > self.settings.max_length:
            raise ValidationError(
                f"Comment must be at most {self.settings.max_length} characters"
            )
        if trimmed == self.settings.deleted_marker:
            raise ValidationError("Comment content is reserved")
        return trimmed

    def normalize_author(self, author: str | None) -> str:
        """Trim the author, falling back to the default placeholder."""
        trimmed = (author or "").strip()
        return trimmed or self.settings.default_author

    def create_comment(
        self,
        comments: list[Comment],
        content: str,
        author: str | None = None,
        parent_id: CommentId | None = None,
    ) -> tuple[Comment, list[Comment]]:
        """Create a root comment or a reply.

        Args:
            comments: Current list for the topic
            content: Comment text
            author: Display name (default placeholder when blank)
            parent_id: Comment being replied to (None for a root comment)

        Returns:
            The new comment and the list with it appended

        Raises:
            ValidationError: If content is invalid or the parent is too deep
            NotFoundError: If the parent is not in the topic
            ContentDeletedException: If the parent has been deleted
        """
        with logfire.span(
            "comment_service.create_comment",
            parent_id=parent_id,
            existing=len(comments),
        ):
            text = self.validate_content(content)

            if parent_id is not None:
                parent = self.find(comments, parent_id)
                if self.is_deleted(parent):
                    logfire.warn("Reply to deleted comment", parent_id=parent_id)
                    raise ContentDeletedException("comment", parent_id)
                if self.depth_of(comments, parent_id) >= self.settings.max_reply_depth:
                    logfire.warn(
                        "Reply exceeds maximum depth",
                        parent_id=parent_id,
                        max_reply_depth=self.settings.max_reply_depth,
                    )
                    raise ValidationError(
                        f"Replies are limited to {self.settings.max_reply_depth} levels"
                    )

            comment = Comment(
                id=CommentId(str(uuid4())),
                content=text,
                author=self.normalize_author(author),
                timestamp=self.clock(),
                parent_id=parent_id,
                upvotes=0,
                downvotes=0,
            )
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                parent_id=parent_id,
                content_length=len(text),
            )
            return comment, [*comments, comment]

    def edit_comment(
        self,
        comments: list[Comment],
        comment_id: CommentId,
        content: str,
        author: str | None = None,
    ) -> tuple[Comment, list[Comment]]:
        """Change a comment's content and author.

        Id, timestamp, parent and vote counters are left as they are.
        A ``None`` author keeps the current one.

        Returns:
            The edited comment and the updated list

        Raises:
            ValidationError: If content is invalid
            NotFoundError: If the comment is not in the topic
            ContentDeletedException: If the comment has been deleted
        """
        with logfire.span("comment_service.edit_comment", comment_id=comment_id):
            existing = self.find(comments, comment_id)
            if self.is_deleted(existing):
                logfire.warn("Edit of deleted comment", comment_id=comment_id)
                raise ContentDeletedException("comment", comment_id)

            edited = existing.model_copy(
                update={
                    "content": self.validate_content(content),
                    "author": existing.author
                    if author is None
                    else self.normalize_author(author),
                }
            )
            logfire.info(
                "Comment edited",
                comment_id=comment_id,
                content_length=len(edited.content),
            )
            return edited, [edited if c.id == comment_id else c for c in comments]

    def tombstone_comment(
        self, comments: list[Comment], comment_id: CommentId
    ) -> tuple[Comment, list[Comment]]:
        """Soft-delete a comment by overwriting its content with the marker.

        The row and its ``parent_id`` stay, so replies remain attached.
        Deleting an already deleted comment changes nothing.

        Raises:
            NotFoundError: If the comment is not in the topic
        """
        with logfire.span("comment_service.tombstone_comment", comment_id=comment_id):
            existing = self.find(comments, comment_id)
            if self.is_deleted(existing):
                logfire.info("Comment already deleted", comment_id=comment_id)
                return existing, list(comments)

            tombstone = existing.model_copy(
                update={"content": self.settings.deleted_marker}
            )
            logfire.info("Comment deleted", comment_id=comment_id)
            return tombstone, [tombstone if c.id == comment_id else c for c in comments]
