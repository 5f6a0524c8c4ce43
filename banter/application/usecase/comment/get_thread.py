"""Get thread use case."""

from pydantic import BaseModel

from banter.application.coordinator import MutationCoordinator
from banter.config import CommentSettings
from banter.domain.repository import PreferenceRepository
from banter.domain.service import (
    CommentNode,
    CommentService,
    build_comment_tree,
    count_nodes,
    walk,
)
from banter.domain.value import CommentId, SortKind, TopicKey, UserVote

from .common import CommentItem


class CommentNodeItem(CommentItem):
    """Comment in a thread, with its replies."""

    depth: int
    can_reply: bool
    user_vote: UserVote | None
    children: list["CommentNodeItem"]


class GetThreadRequest(BaseModel):
    """Get thread request."""

    topic_key: str
    sort: SortKind | None = None  # None uses the topic's saved preference


class GetThreadResponse(BaseModel):
    """Get thread response."""

    topic_key: str
    sort: SortKind
    comments: list[CommentNodeItem]
    total: int


class GetThreadUseCase:
    """Use case for reading a topic's comments as a sorted reply tree."""

    def __init__(
        self,
        coordinator: MutationCoordinator,
        preference_repository: PreferenceRepository,
        comment_service: CommentService,
        settings: CommentSettings,
    ) -> None:
        """Initialize get thread use case.

        Args:
            coordinator: Mutation coordinator (cached topic state)
            preference_repository: Saved sort preferences
            comment_service: Comment domain service (deletion checks)
            settings: Comment settings (reply depth, default sort)
        """
        self.coordinator = coordinator
        self.preference_repository = preference_repository
        self.comment_service = comment_service
        self.settings = settings

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        The sort is resolved in order: the request, the topic's saved
        preference, then the configured default. Every level of the tree
        is ordered independently.

        Args:
            request: Get thread request

        Returns:
            Root comments with nested replies and the user's votes
        """
        topic_key = TopicKey(request.topic_key)

        sort = request.sort
        if sort is None:
            sort = await self.preference_repository.get_sort(topic_key)
        if sort is None:
            sort = SortKind.parse(self.settings.default_sort)

        state = await self.coordinator.load(topic_key)
        tree = build_comment_tree(state.comments, sort)

        return GetThreadResponse(
            topic_key=topic_key.root,
            sort=sort,
            comments=self._to_items(topic_key, tree, state.votes),
            total=count_nodes(tree),
        )

    def _to_items(
        self,
        topic_key: TopicKey,
        tree: list[CommentNode],
        votes: dict[CommentId, UserVote],
    ) -> list[CommentNodeItem]:
        # Children are converted before their parents, deepest first
        items: dict[int, CommentNodeItem] = {}
        for node in reversed(list(walk(tree))):
            comment = node.comment
            is_deleted = self.comment_service.is_deleted(comment)
            items[id(node)] = CommentNodeItem(
                **CommentItem.from_comment(
                    topic_key.root, comment, is_deleted
                ).model_dump(),
                depth=node.depth,
                can_reply=not is_deleted and node.depth < self.settings.max_reply_depth,
                user_vote=votes.get(comment.id),
                children=[items.pop(id(child)) for child in node.children],
            )
        return [items.pop(id(node)) for node in tree]
