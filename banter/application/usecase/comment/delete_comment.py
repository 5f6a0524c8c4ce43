"""Delete comment use case."""

from pydantic import BaseModel

from banter.application.cache import TopicState
from banter.application.coordinator import MutationCoordinator
from banter.application.usecase.base import BaseUseCase
from banter.domain.model import Comment
from banter.domain.service import CommentService
from banter.domain.value import CommentId, TopicKey

from .common import CommentItem


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    topic_key: str
    comment_id: str


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment: CommentItem


class DeleteCommentUseCase(BaseUseCase):
    """Use case for tombstoning a comment.

    The comment stays in the thread with its content replaced, so its
    replies keep their place.
    """

    def __init__(
        self,
        comment_service: CommentService,
        coordinator: MutationCoordinator,
    ) -> None:
        self.comment_service = comment_service
        self.coordinator = coordinator

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment is not in the topic
            StorageWriteError: If the tombstone could not be saved
        """
        topic_key = TopicKey(request.topic_key)
        comment_id = CommentId(request.comment_id)

        def change(state: TopicState) -> tuple[TopicState, Comment]:
            comment, comments = self.comment_service.tombstone_comment(
                state.comments, comment_id
            )
            return state.with_comments(comments), comment

        comment = await self.coordinator.mutate(topic_key, change)

        return DeleteCommentResponse(
            comment=CommentItem.from_comment(topic_key.root, comment, is_deleted=True)
        )
