"""Update comment use case."""

from pydantic import BaseModel

from banter.application.cache import TopicState
from banter.application.coordinator import MutationCoordinator
from banter.application.usecase.base import BaseUseCase
from banter.domain.model import Comment
from banter.domain.service import CommentService
from banter.domain.value import CommentId, TopicKey

from .common import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    topic_key: str
    comment_id: str
    content: str
    author: str | None = None  # None keeps the current author


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content and author."""

    def __init__(
        self,
        comment_service: CommentService,
        coordinator: MutationCoordinator,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            coordinator: Mutation coordinator for optimistic writes
        """
        self.comment_service = comment_service
        self.coordinator = coordinator

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            Update comment response with the edited comment

        Raises:
            ValidationError: If content is invalid
            NotFoundError: If the comment is not in the topic
            ContentDeletedException: If the comment is deleted
            StorageWriteError: If the edit could not be saved
        """
        topic_key = TopicKey(request.topic_key)
        comment_id = CommentId(request.comment_id)

        def change(state: TopicState) -> tuple[TopicState, Comment]:
            comment, comments = self.comment_service.edit_comment(
                state.comments,
                comment_id,
                content=request.content,
                author=request.author,
            )
            return state.with_comments(comments), comment

        comment = await self.coordinator.mutate(topic_key, change)

        return UpdateCommentResponse(
            comment=CommentItem.from_comment(topic_key.root, comment, is_deleted=False)
        )
