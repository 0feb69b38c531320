"""Comment routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from forum.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from forum.domain.service import JWTService
from forum.interface.api.auth import require_user_id

router = APIRouter(prefix="/threads", tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for commenting on a thread."""

    content: Any = None


@router.post("/{thread_id}/comments", status_code=status.HTTP_201_CREATED)
async def add_comment(
    thread_id: str,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> dict[str, Any]:
    """Comment on a thread.

    Requires authentication.

    Args:
        thread_id: Thread ID
        request: Comment content
        add_comment_use_case: Add comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The added comment
    """
    user_id = require_user_id(jwt_service, auth_token)

    added_comment = await add_comment_use_case.execute(
        AddCommentRequest(thread_id=thread_id, owner=user_id, content=request.content)
    )
    return {"status": "success", "data": {"added_comment": added_comment}}


@router.delete("/{thread_id}/comments/{comment_id}")
async def delete_comment(
    thread_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> dict[str, Any]:
    """Soft delete a comment. Only its author may do so."""
    user_id = require_user_id(jwt_service, auth_token)

    await delete_comment_use_case.execute(
        DeleteCommentRequest(thread_id=thread_id, comment_id=comment_id, owner=user_id)
    )
    return {"status": "success"}
