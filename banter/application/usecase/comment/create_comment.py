"""Create comment use case."""

from pydantic import BaseModel

from banter.application.cache import TopicState
from banter.application.coordinator import MutationCoordinator
from banter.application.usecase.base import BaseUseCase
from banter.domain.model import Comment
from banter.domain.service import CommentService
from banter.domain.value import CommentId, TopicKey

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    topic_key: str
    content: str
    author: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a topic or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        coordinator: MutationCoordinator,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            coordinator: Mutation coordinator for optimistic writes
        """
        self.comment_service = comment_service
        self.coordinator = coordinator

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Load the topic's current comments via the coordinator
        2. Create comment via comment service (validates parent if replying)
        3. Persist the new list; rolled back if the write fails

        Args:
            request: Create comment request

        Returns:
            Create comment response with the stored comment

        Raises:
            ValidationError: If content or reply depth is invalid
            NotFoundError: If the parent comment is not in the topic
            ContentDeletedException: If the parent comment is deleted
            StorageWriteError: If the comment could not be saved
        """
        topic_key = TopicKey(request.topic_key)
        parent_id = CommentId(request.parent_id) if request.parent_id else None

        def change(state: TopicState) -> tuple[TopicState, Comment]:
            comment, comments = self.comment_service.create_comment(
                state.comments,
                content=request.content,
                author=request.author,
                parent_id=parent_id,
            )
            return state.with_comments(comments), comment

        comment = await self.coordinator.mutate(topic_key, change)

        return CreateCommentResponse(
            comment=CommentItem.from_comment(topic_key.root, comment, is_deleted=False)
        )
