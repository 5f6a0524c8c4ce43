"""Cast vote use case."""

from pydantic import BaseModel

from banter.application.cache import TopicState
from banter.application.coordinator import MutationCoordinator
from banter.application.usecase.base import BaseUseCase
from banter.domain.service import VoteOutcome, VoteService
from banter.domain.value import CommentId, TopicKey, UserVote


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    topic_key: str
    comment_id: str
    direction: UserVote


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    comment_id: str
    user_vote: UserVote | None  # None when the click toggled the vote off
    upvotes: int
    downvotes: int
    score: int


class CastVoteUseCase(BaseUseCase):
    """Use case for up/down voting a comment.

    Clicking the direction already held removes the vote; clicking the
    other direction switches it.
    """

    def __init__(
        self,
        vote_service: VoteService,
        coordinator: MutationCoordinator,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            coordinator: Mutation coordinator for optimistic writes
        """
        self.vote_service = vote_service
        self.coordinator = coordinator

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Comment counters and the user's vote map are written together;
        if either write fails both are rolled back.

        Args:
            request: Cast vote request

        Returns:
            The user's resulting vote and the comment's counters

        Raises:
            NotFoundError: If the comment is not in the topic
            ContentDeletedException: If the comment is deleted
            StorageWriteError: If the vote could not be saved
        """
        topic_key = TopicKey(request.topic_key)
        comment_id = CommentId(request.comment_id)

        def change(state: TopicState) -> tuple[TopicState, VoteOutcome]:
            outcome = self.vote_service.cast_vote(
                state.comments, state.votes, comment_id, request.direction
            )
            return TopicState(comments=outcome.comments, votes=outcome.votes), outcome

        outcome = await self.coordinator.mutate(topic_key, change)

        return CastVoteResponse(
            comment_id=outcome.comment.id,
            user_vote=outcome.current,
            upvotes=outcome.comment.upvotes,
            downvotes=outcome.comment.downvotes,
            score=outcome.comment.score,
        )
