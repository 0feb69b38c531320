"""Like repository interface."""

from abc import ABC, abstractmethod

from forum.domain.value import CommentId, UserId


class LikeRepository(ABC):
    """Repository for comment likes."""

    @abstractmethod
    async def toggle_comment_like(self, owner_id: UserId, comment_id: CommentId) -> bool:
        """Flip a user's like on a comment.

        Creates a liked record on first use, otherwise inverts the stored
        state. Must be a single atomic write so concurrent toggles on the
        same pair cannot lose updates.

        Args:
            owner_id: The acting user
            comment_id: The comment ID

        Returns:
            The like state after the toggle
        """
        pass

    @abstractmethod
    async def count_comment_likes(self, comment_id: CommentId) -> int:
        """Count users currently liking a comment.

        Args:
            comment_id: The comment ID

        Returns:
            Number of liked records (0 when none exist)
        """
        pass
