"""Vote transitions and tally bookkeeping.

Pure functions: no storage, no shared state. Callers derive ``from_`` and
``to`` from the true prior vote, so each real transition is applied once.
"""

from typing import Optional

import logfire

from banter.domain.model.comment import Comment
from banter.domain.value import CommentId, UserVote


def next_vote(current: Optional[UserVote], target: UserVote) -> Optional[UserVote]:
    """Resolve the vote a click on ``target`` leads to.

    Clicking the direction already held toggles it off; anything else
    switches to (or freshly casts) ``target``.

    Args:
        current: Vote currently held, None for no vote
        target: Direction the user clicked

    Returns:
        The new vote, or None when toggled off
    """
    if current == target:
        return None
    return target


def apply_vote(
    comments: list[Comment],
    comment_id: CommentId,
    from_: Optional[UserVote],
    to: Optional[UserVote],
) -> list[Comment]:
    """Move one vote on a comment from ``from_`` to ``to``.

    The counter matching ``from_`` loses one, the counter matching ``to``
    gains one. Both are floored at zero.

    Args:
        comments: Flat comment list for a topic
        comment_id: Comment receiving the transition
        from_: Vote held before, None for none
        to: Vote held after, None for none

    Returns:
        New list; comments other than ``comment_id`` are the same objects
    """
    result = []
    for comment in comments:
        if comment.id != comment_id:
            result.append(comment)
            continue

        upvotes = comment.upvotes
        downvotes = comment.downvotes
        if from_ == UserVote.UP:
            upvotes -= 1
        elif from_ == UserVote.DOWN:
            downvotes -= 1
        if to == UserVote.UP:
            upvotes += 1
        elif to == UserVote.DOWN:
            downvotes += 1

        if upvotes < 0 or downvotes < 0:
            # Only reachable when from_ does not match the stored tally
            logfire.warn(
                "Vote tally clamped at zero",
                comment_id=comment_id,
                upvotes=upvotes,
                downvotes=downvotes,
                from_vote=from_.value if from_ else None,
                to_vote=to.value if to else None,
            )

        result.append(
            comment.model_copy(
                update={"upvotes": max(0, upvotes), "downvotes": max(0, downvotes)}
            )
        )
    return result


def record_vote(
    votes: dict[CommentId, UserVote],
    comment_id: CommentId,
    vote: Optional[UserVote],
) -> dict[CommentId, UserVote]:
    """Return a vote map with ``comment_id`` set to ``vote``.

    A ``None`` vote removes the entry.
    """
    updated = dict(votes)
    if vote is None:
        updated.pop(comment_id, None)
    else:
        updated[comment_id] = vote
    return updated
