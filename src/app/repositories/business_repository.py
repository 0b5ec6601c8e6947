from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Business


class IBusinessRepository(ABC):
    """Business repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, business_id: UUID) -> Optional[Business]:
        """Get business by ID"""
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Business]:
        """Get business by slug"""
        pass

    @abstractmethod
    async def list_for_user(self, user_id: UUID) -> List[Business]:
        """Businesses the user owns or is a member of, newest first"""
        pass

    @abstractmethod
    async def create(self, business: Business) -> Business:
        """Create a new business"""
        pass

    @abstractmethod
    async def update(self, business: Business) -> Business:
        """Update existing business"""
        pass

    @abstractmethod
    async def delete(self, business: Business) -> None:
        """Delete a business row"""
        pass
