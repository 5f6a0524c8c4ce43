"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from banter.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from banter.domain.error import DomainError
from banter.domain.value import UserVote
from banter.interface.error import to_http_exception

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting."""

    direction: UserVote


@router.post(
    "/topics/{topic_key}/comments/{comment_id}/vote",
    response_model=CastVoteResponse,
)
async def cast_vote(
    topic_key: str,
    comment_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Vote a comment up or down.

    Voting the same direction twice removes the vote.

    Args:
        topic_key: Topic key
        comment_id: Comment ID
        request: Vote direction
        cast_vote_use_case: Cast vote use case from DI

    Returns:
        The resulting vote and updated counters

    Raises:
        HTTPException: 404 unknown comment, 409 deleted comment,
            507 storage full
    """
    try:
        use_case_request = CastVoteRequest(
            topic_key=topic_key,
            comment_id=comment_id,
            direction=request.direction,
        )
        return await cast_vote_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e) from e
