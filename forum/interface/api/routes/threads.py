"""Thread routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from forum.application.usecase.thread import (
    AddThreadRequest,
    AddThreadUseCase,
    GetThreadDetailRequest,
    GetThreadDetailUseCase,
)
from forum.domain.service import JWTService
from forum.interface.api.auth import require_user_id

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class AddThreadAPIRequest(BaseModel):
    """API request for creating a thread.

    Fields are left untyped here; the domain payload validates them.
    """

    title: Any = None
    body: Any = None


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_thread(
    request: AddThreadAPIRequest,
    add_thread_use_case: FromDishka[AddThreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> dict[str, Any]:
    """Create a thread. Requires authentication."""
    user_id = require_user_id(jwt_service, auth_token)

    added_thread = await add_thread_use_case.execute(
        AddThreadRequest(owner=user_id, title=request.title, body=request.body)
    )
    return {"status": "success", "data": {"added_thread": added_thread}}


@router.get("/{thread_id}")
async def get_thread_detail(
    thread_id: str,
    get_thread_detail_use_case: FromDishka[GetThreadDetailUseCase],
) -> dict[str, Any]:
    """Get a thread with its comments, replies and like counts."""
    thread = await get_thread_detail_use_case.execute(
        GetThreadDetailRequest(thread_id=thread_id)
    )
    return {"status": "success", "data": {"thread": thread}}
