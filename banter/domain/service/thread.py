"""Comment tree building."""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterator, Optional

from banter.domain.model.comment import Comment
from banter.domain.service.sorting import sort_comments
from banter.domain.value import CommentId, SortKind


@dataclass
class CommentNode:
    """Node in a topic's comment forest.

    Derived from the flat list on every read and never persisted.
    """

    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)
    depth: int = 0


def build_comment_tree(
    comments: list[Comment], kind: SortKind | str = SortKind.NEW
) -> list[CommentNode]:
    """Build the comment forest for a topic.

    Algorithm:
    1. Group comments by ``parent_id`` (None groups the roots)
    2. Sort the roots with ``kind``
    3. Walk the forest with an explicit stack, attaching each comment's
       replies and sorting every sibling list on its own with ``kind``

    Siblings are ranked only against siblings. Comments whose parent is
    missing from the list (and parent cycles) are never reached from a
    root, so they do not appear in the forest.

    Args:
        comments: Flat comment list for one topic
        kind: Ordering applied at every level

    Returns:
        Root nodes with children populated at every depth
    """
    by_parent: dict[Optional[CommentId], list[Comment]] = defaultdict(list)
    for comment in comments:
        by_parent[comment.parent_id].append(comment)

    # Guards against duplicate ids in hand-edited storage
    visited: set[CommentId] = set()

    roots = [
        CommentNode(comment=root) for root in sort_comments(by_parent.get(None, []), kind)
    ]
    visited.update(node.comment.id for node in roots)

    # Stored reply chains can be far deeper than the interpreter stack
    stack = list(roots)
    while stack:
        node = stack.pop()
        for reply in sort_comments(by_parent.get(node.comment.id, []), kind):
            if reply.id in visited:
                continue
            visited.add(reply.id)
            child = CommentNode(comment=reply, depth=node.depth + 1)
            node.children.append(child)
            stack.append(child)

    return roots


def walk(nodes: list[CommentNode]) -> Iterator[CommentNode]:
    """Yield every node in a forest, parents before their children."""
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def count_nodes(nodes: list[CommentNode]) -> int:
    """Count every node in a forest."""
    return sum(1 for _ in walk(nodes))
