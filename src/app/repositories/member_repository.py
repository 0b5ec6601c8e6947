from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import BusinessMember


class IMemberRepository(ABC):
    """Business member repository interface - application layer"""

    @abstractmethod
    async def get_by_business_and_user(
        self, business_id: UUID, user_id: UUID
    ) -> Optional[BusinessMember]:
        """Get membership by business and user"""
        pass

    @abstractmethod
    async def get_by_business_id(self, business_id: UUID) -> List[BusinessMember]:
        """Get all members of a business, most recently joined first"""
        pass

    @abstractmethod
    async def create_if_absent(self, member: BusinessMember) -> Optional[BusinessMember]:
        """Insert a membership, or return None when (business_id, user_id) already exists"""
        pass

    @abstractmethod
    async def update(self, member: BusinessMember) -> BusinessMember:
        """Update existing membership"""
        pass

    @abstractmethod
    async def delete(self, member: BusinessMember) -> None:
        """Delete a membership"""
        pass

    @abstractmethod
    async def delete_by_business_id(self, business_id: UUID) -> int:
        """Delete every membership of a business, returns the row count"""
        pass
