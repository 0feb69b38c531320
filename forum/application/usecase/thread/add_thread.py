"""Add thread use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddedThread, NewThread
from forum.domain.repository import ThreadRepository


class AddThreadRequest(BaseModel):
    """Add thread request.

    Title and body are passed through untouched; NewThread validates them.
    """

    owner: str  # User ID from authenticated user
    title: Any = None
    body: Any = None


class AddThreadUseCase(BaseUseCase):
    """Use case for starting a new thread."""

    def __init__(self, thread_repository: ThreadRepository) -> None:
        """Initialize add thread use case.

        Args:
            thread_repository: Thread repository
        """
        self.thread_repository = thread_repository

    async def execute(self, request: AddThreadRequest) -> AddedThread:
        """Execute add thread flow.

        Args:
            request: Add thread request

        Returns:
            The persisted thread

        Raises:
            ValidationError: If title, body or owner is missing or malformed
        """
        with logfire.span("add_thread", owner=request.owner):
            new_thread = NewThread(
                title=request.title,
                body=request.body,
                owner=request.owner,
            )
            added = await self.thread_repository.add_thread(new_thread)
            logfire.info("Thread added", thread_id=added.id, owner=added.owner)
            return added
