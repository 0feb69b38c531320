"""Reply routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from forum.application.usecase.reply import (
    AddReplyRequest,
    AddReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
)
from forum.domain.service import JWTService
from forum.interface.api.auth import require_user_id

router = APIRouter(prefix="/threads", tags=["replies"], route_class=DishkaRoute)


class AddReplyAPIRequest(BaseModel):
    """API request for replying to a comment."""

    content: Any = None


@router.post(
    "/{thread_id}/comments/{comment_id}/replies", status_code=status.HTTP_201_CREATED
)
async def add_reply(
    thread_id: str,
    comment_id: str,
    request: AddReplyAPIRequest,
    add_reply_use_case: FromDishka[AddReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> dict[str, Any]:
    """Reply to a comment. Requires authentication."""
    user_id = require_user_id(jwt_service, auth_token)

    added_reply = await add_reply_use_case.execute(
        AddReplyRequest(
            thread_id=thread_id,
            comment_id=comment_id,
            owner=user_id,
            content=request.content,
        )
    )
    return {"status": "success", "data": {"added_reply": added_reply}}


@router.delete("/{thread_id}/comments/{comment_id}/replies/{reply_id}")
async def delete_reply(
    thread_id: str,
    comment_id: str,
    reply_id: str,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> dict[str, Any]:
    """Soft delete a reply. Only its author may do so."""
    user_id = require_user_id(jwt_service, auth_token)

    await delete_reply_use_case.execute(
        DeleteReplyRequest(
            thread_id=thread_id,
            comment_id=comment_id,
            reply_id=reply_id,
            owner=user_id,
        )
    )
    return {"status": "success"}
