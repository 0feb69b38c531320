"""Comment like routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from forum.application.usecase.like import (
    CountCommentLikesRequest,
    CountCommentLikesUseCase,
    ToggleCommentLikeRequest,
    ToggleCommentLikeUseCase,
)
from forum.domain.service import JWTService
from forum.interface.api.auth import require_user_id

router = APIRouter(prefix="/threads", tags=["likes"], route_class=DishkaRoute)


@router.put("/{thread_id}/comments/{comment_id}/likes")
async def toggle_comment_like(
    thread_id: str,
    comment_id: str,
    toggle_comment_like_use_case: FromDishka[ToggleCommentLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> dict[str, Any]:
    """Like a comment, or unlike it if already liked."""
    user_id = require_user_id(jwt_service, auth_token)

    result = await toggle_comment_like_use_case.execute(
        ToggleCommentLikeRequest(
            thread_id=thread_id, comment_id=comment_id, owner=user_id
        )
    )
    return {"status": "success", "data": {"is_liked": result.is_liked}}


@router.get("/{thread_id}/comments/{comment_id}/likes")
async def count_comment_likes(
    thread_id: str,
    comment_id: str,
    count_comment_likes_use_case: FromDishka[CountCommentLikesUseCase],
) -> dict[str, Any]:
    """Number of users currently liking a comment."""
    result = await count_comment_likes_use_case.execute(
        CountCommentLikesRequest(thread_id=thread_id, comment_id=comment_id)
    )
    return {"status": "success", "data": {"like_count": result.like_count}}
