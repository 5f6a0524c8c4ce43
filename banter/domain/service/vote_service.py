"""Vote domain service."""

from dataclasses import dataclass
from typing import Optional

import logfire

from banter.domain.error import ContentDeletedException
from banter.domain.model.comment import Comment
from banter.domain.value import CommentId, UserVote

from .base import Service
from .comment_service import CommentService
from .voting import apply_vote, next_vote, record_vote


@dataclass(frozen=True)
class VoteOutcome:
    """Result of casting a vote: both collections after the transition."""

    comment: Comment
    comments: list[Comment]
    votes: dict[CommentId, UserVote]
    previous: Optional[UserVote]
    current: Optional[UserVote]


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize vote service.

        Args:
            comment_service: Comment domain service (lookup and deletion checks)
        """
        self.comment_service = comment_service

    def cast_vote(
        self,
        comments: list[Comment],
        votes: dict[CommentId, UserVote],
        comment_id: CommentId,
        target: UserVote,
    ) -> VoteOutcome:
        """Cast, switch or toggle off the user's vote on a comment.

        The transition starts from the vote held in ``votes``, so counters
        move exactly once per real change.

        Args:
            comments: Current comment list for the topic
            votes: Current vote map for the topic
            comment_id: Comment being voted on
            target: Direction clicked

        Returns:
            Updated comment, comment list, vote map and the vote transition

        Raises:
            NotFoundError: If the comment is not in the topic
            ContentDeletedException: If the comment has been deleted
        """
        with logfire.span(
            "vote_service.cast_vote", comment_id=comment_id, target=target.value
        ):
            comment = self.comment_service.find(comments, comment_id)
            if self.comment_service.is_deleted(comment):
                logfire.warn("Vote on deleted comment", comment_id=comment_id)
                raise ContentDeletedException("comment", comment_id)

            previous = votes.get(comment_id)
            current = next_vote(previous, target)

            updated_comments = apply_vote(comments, comment_id, previous, current)
            updated_votes = record_vote(votes, comment_id, current)
            updated = self.comment_service.find(updated_comments, comment_id)

            logfire.info(
                "Vote cast",
                comment_id=comment_id,
                previous=previous.value if previous else None,
                current=current.value if current else None,
                upvotes=updated.upvotes,
                downvotes=updated.downvotes,
            )
            return VoteOutcome(
                comment=updated,
                comments=updated_comments,
                votes=updated_votes,
                previous=previous,
                current=current,
            )
