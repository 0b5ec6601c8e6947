from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.store_errors import translate_store_errors
from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.base import utcnow
from src.domain.entities import BusinessInvitation, InvitationStatus


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[BusinessInvitation]:
        """Get invitation by ID"""
        stmt = select(BusinessInvitation).where(BusinessInvitation.id == invitation_id)
        async with translate_store_errors():
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def get_by_token(self, token: str) -> Optional[BusinessInvitation]:
        """Get invitation by token"""
        stmt = select(BusinessInvitation).where(BusinessInvitation.token == token)
        async with translate_store_errors():
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def get_pending_by_business_and_email(
        self, business_id: UUID, email: str
    ) -> Optional[BusinessInvitation]:
        """Get pending invitation by business and email"""
        stmt = select(BusinessInvitation).where(
            BusinessInvitation.business_id == business_id,
            BusinessInvitation.email == email.lower(),
            BusinessInvitation.status == InvitationStatus.pending,
        )
        async with translate_store_errors():
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def get_by_business_id(self, business_id: UUID) -> List[BusinessInvitation]:
        """Get all invitations for a business"""
        stmt = (
            select(BusinessInvitation)
            .where(BusinessInvitation.business_id == business_id)
            .order_by(BusinessInvitation.created_at.desc())
        )
        async with translate_store_errors():
            result = await self.session.execute(stmt)
            return list(result.scalars().all())

    async def create(self, invitation: BusinessInvitation) -> BusinessInvitation:
        """Create a new invitation"""
        async with translate_store_errors():
            self.session.add(invitation)
            await self.session.flush()
            await self.session.refresh(invitation)
        return invitation

    async def transition_status(
        self,
        invitation_id: UUID,
        from_status: InvitationStatus,
        to_status: InvitationStatus,
    ) -> bool:
        # Conditional UPDATE so only one of several concurrent resolvers wins
        stmt = (
            update(BusinessInvitation)
            .where(
                BusinessInvitation.id == invitation_id,
                BusinessInvitation.status == from_status,
            )
            .values(status=to_status, updated_at=utcnow())
        )
        async with translate_store_errors():
            result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def delete(self, invitation: BusinessInvitation) -> None:
        """Delete an invitation"""
        async with translate_store_errors():
            await self.session.delete(invitation)
            await self.session.flush()

    async def delete_by_business_id(self, business_id: UUID) -> int:
        stmt = delete(BusinessInvitation).where(
            BusinessInvitation.business_id == business_id
        )
        async with translate_store_errors():
            result = await self.session.execute(stmt)
        return result.rowcount
