from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import BusinessInvitation, InvitationStatus


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[BusinessInvitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[BusinessInvitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def get_pending_by_business_and_email(
        self, business_id: UUID, email: str
    ) -> Optional[BusinessInvitation]:
        """Get pending invitation by business and email"""
        pass

    @abstractmethod
    async def get_by_business_id(self, business_id: UUID) -> List[BusinessInvitation]:
        """Get all invitations for a business, newest first"""
        pass

    @abstractmethod
    async def create(self, invitation: BusinessInvitation) -> BusinessInvitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def transition_status(
        self,
        invitation_id: UUID,
        from_status: InvitationStatus,
        to_status: InvitationStatus,
    ) -> bool:
        """
        Compare-and-set the invitation status.

        Returns False when the stored status was no longer ``from_status``,
        i.e. another caller resolved the invitation first.
        """
        pass

    @abstractmethod
    async def delete(self, invitation: BusinessInvitation) -> None:
        """Delete an invitation"""
        pass

    @abstractmethod
    async def delete_by_business_id(self, business_id: UUID) -> int:
        """Delete every invitation of a business, returns the row count"""
        pass
