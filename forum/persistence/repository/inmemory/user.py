"""In-memory user repository for testing."""

from forum.domain.model import User
from forum.domain.repository import UserRepository

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def add_user(self, user: User) -> User:
        """Save a user."""
        self.database.users[user.id] = user
        return user
