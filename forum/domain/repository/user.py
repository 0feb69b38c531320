"""User repository interface."""

from abc import ABC, abstractmethod

from forum.domain.model.user import User


class UserRepository(ABC):
    """Repository for User entity.

    Users are registered by the external auth service. The forum only reads
    them through joins, so this repository exists to seed the in-memory
    store that stands in for that service's table.
    """

    @abstractmethod
    async def add_user(self, user: User) -> User:
        """Persist a user.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
