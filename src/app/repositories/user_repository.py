from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from src.domain.entities import UserProfile


class IUserRepository(ABC):
    """User profile repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[UserProfile]:
        """Get profile by user ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[UserProfile]:
        """Get profile by (lower-cased) email address"""
        pass

    @abstractmethod
    async def get_by_ids(self, user_ids: Sequence[UUID]) -> List[UserProfile]:
        """Get all profiles for the given user IDs"""
        pass

    @abstractmethod
    async def create(self, profile: UserProfile) -> UserProfile:
        """Create a new profile"""
        pass
