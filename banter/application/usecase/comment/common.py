"""Response models shared by comment use cases."""

from pydantic import BaseModel

from banter.domain.model import Comment


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    topic_key: str
    content: str
    author: str
    timestamp: int
    parent_id: str | None
    upvotes: int
    downvotes: int
    score: int
    is_deleted: bool

    @classmethod
    def from_comment(
        cls, topic_key: str, comment: Comment, is_deleted: bool
    ) -> "CommentItem":
        return cls(
            comment_id=comment.id,
            topic_key=topic_key,
            content=comment.content,
            author=comment.author,
            timestamp=comment.timestamp,
            parent_id=comment.parent_id,
            upvotes=comment.upvotes,
            downvotes=comment.downvotes,
            score=comment.score,
            is_deleted=is_deleted,
        )
