"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .sorting import score, sort_comments
from .thread import CommentNode, build_comment_tree, count_nodes, walk
from .topic_service import TopicService
from .vote_service import VoteOutcome, VoteService
from .voting import apply_vote, next_vote, record_vote

__all__ = [
    "CommentNode",
    "CommentService",
    "Service",
    "TopicService",
    "VoteOutcome",
    "VoteService",
    "apply_vote",
    "build_comment_tree",
    "count_nodes",
    "next_vote",
    "record_vote",
    "score",
    "sort_comments",
    "walk",
]
