"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from banter.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from banter.domain.error import DomainError
from banter.domain.value import SortKind
from banter.interface.error import to_http_exception

router = APIRouter(prefix="/topics", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    author: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str
    author: str | None = None


@router.get("/{topic_key}/comments", response_model=GetThreadResponse)
async def get_comments(
    topic_key: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    sort: str | None = None,
) -> GetThreadResponse:
    """Get a topic's comments as a reply tree.

    Args:
        topic_key: Topic key
        get_thread_use_case: Get thread use case from DI
        sort: new, old or top (unknown values mean new); defaults to
            the topic's saved preference

    Returns:
        Root comments with nested replies
    """
    try:
        request = GetThreadRequest(
            topic_key=topic_key,
            sort=SortKind.parse(sort) if sort is not None else None,
        )
        return await get_thread_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e) from e


@router.post(
    "/{topic_key}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    topic_key: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Comment on a topic or reply to another comment.

    Args:
        topic_key: Topic key
        request: Comment content, author and optional parent
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment

    Raises:
        HTTPException: 400 invalid content, 404 unknown parent,
            409 deleted parent, 507 storage full
    """
    try:
        use_case_request = CreateCommentRequest(
            topic_key=topic_key,
            content=request.content,
            author=request.author,
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        logfire.warn("Comment creation failed", topic_key=topic_key, error=str(e))
        raise to_http_exception(e) from e


@router.patch(
    "/{topic_key}/comments/{comment_id}", response_model=UpdateCommentResponse
)
async def update_comment(
    topic_key: str,
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> UpdateCommentResponse:
    """Edit a comment's content and author.

    Raises:
        HTTPException: 400 invalid content, 404 unknown comment,
            409 deleted comment, 507 storage full
    """
    try:
        use_case_request = UpdateCommentRequest(
            topic_key=topic_key,
            comment_id=comment_id,
            content=request.content,
            author=request.author,
        )
        return await update_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        logfire.warn("Comment update failed", comment_id=comment_id, error=str(e))
        raise to_http_exception(e) from e


@router.delete(
    "/{topic_key}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    topic_key: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Delete a comment, leaving a placeholder so replies stay in place."""
    try:
        request = DeleteCommentRequest(topic_key=topic_key, comment_id=comment_id)
        return await delete_comment_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e) from e
