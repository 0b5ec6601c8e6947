from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import AccessRequestStatus, BusinessAccessRequest


class IAccessRequestRepository(ABC):
    """Access request repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, request_id: UUID) -> Optional[BusinessAccessRequest]:
        """Get access request by ID"""
        pass

    @abstractmethod
    async def get_pending_by_business_and_user(
        self, business_id: UUID, user_id: UUID
    ) -> Optional[BusinessAccessRequest]:
        """Get the pending request of a user for a business"""
        pass

    @abstractmethod
    async def get_pending_by_business_id(
        self, business_id: UUID
    ) -> List[BusinessAccessRequest]:
        """Get pending requests for a business, newest first"""
        pass

    @abstractmethod
    async def create(self, request: BusinessAccessRequest) -> BusinessAccessRequest:
        """Create a new access request"""
        pass

    @abstractmethod
    async def resolve(
        self,
        request_id: UUID,
        status: AccessRequestStatus,
        reviewed_by: UUID,
        reviewed_at: datetime,
    ) -> bool:
        """
        Move a pending request to ``status`` with reviewer metadata.

        Returns False when the request was no longer pending.
        """
        pass

    @abstractmethod
    async def delete(self, request: BusinessAccessRequest) -> None:
        """Delete an access request"""
        pass

    @abstractmethod
    async def delete_by_business_id(self, business_id: UUID) -> int:
        """Delete every access request of a business, returns the row count"""
        pass
