"""Topic routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from banter.application.usecase.topic import (
    GetSortPreferenceRequest,
    GetSortPreferenceUseCase,
    ResolveTopicRequest,
    ResolveTopicResponse,
    ResolveTopicUseCase,
    SetSortPreferenceRequest,
    SetSortPreferenceUseCase,
    SortPreferenceResponse,
)
from banter.domain.error import DomainError
from banter.domain.value import SortKind
from banter.interface.error import to_http_exception

router = APIRouter(prefix="/topics", tags=["topics"], route_class=DishkaRoute)


class SetSortAPIRequest(BaseModel):
    """API request for saving a topic's ordering."""

    sort: SortKind


@router.get("/resolve", response_model=ResolveTopicResponse)
async def resolve_topic(
    resolve_topic_use_case: FromDishka[ResolveTopicUseCase],
    question: str | None = None,
) -> ResolveTopicResponse:
    """Find the topic a question's comments are stored under.

    "Who is Pikachu?" resolves to "Pikachu"; other questions to a slug.
    """
    return await resolve_topic_use_case.execute(ResolveTopicRequest(question=question))


@router.get("/{topic_key}/sort", response_model=SortPreferenceResponse)
async def get_sort(
    topic_key: str,
    get_sort_use_case: FromDishka[GetSortPreferenceUseCase],
) -> SortPreferenceResponse:
    """Get a topic's saved thread ordering."""
    try:
        return await get_sort_use_case.execute(
            GetSortPreferenceRequest(topic_key=topic_key)
        )
    except ValueError as e:
        raise to_http_exception(e) from e


@router.put("/{topic_key}/sort", response_model=SortPreferenceResponse)
async def set_sort(
    topic_key: str,
    request: SetSortAPIRequest,
    set_sort_use_case: FromDishka[SetSortPreferenceUseCase],
) -> SortPreferenceResponse:
    """Save a topic's thread ordering.

    Raises:
        HTTPException: 507 if storage is full
    """
    try:
        return await set_sort_use_case.execute(
            SetSortPreferenceRequest(topic_key=topic_key, sort=request.sort)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e) from e
