from typing import List, Optional
from uuid import UUID

from sqlmodel import or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.store_errors import translate_store_errors
from src.app.repositories.business_repository import IBusinessRepository
from src.domain.entities import Business, BusinessMember


class BusinessRepository(IBusinessRepository):
    """Business repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, business_id: UUID) -> Optional[Business]:
        """Get business by ID"""
        stmt = select(Business).where(Business.id == business_id)
        async with translate_store_errors():
            result = await self.session.exec(stmt)
            return result.one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[Business]:
        """Get business by slug"""
        stmt = select(Business).where(Business.slug == slug)
        async with translate_store_errors():
            result = await self.session.exec(stmt)
            return result.one_or_none()

    async def list_for_user(self, user_id: UUID) -> List[Business]:
        """Owned businesses plus those the user holds a membership in"""
        member_of = select(BusinessMember.business_id).where(
            BusinessMember.user_id == user_id
        )
        stmt = (
            select(Business)
            .where(or_(Business.owner_id == user_id, Business.id.in_(member_of)))
            .order_by(Business.created_at.desc())
        )
        async with translate_store_errors():
            result = await self.session.exec(stmt)
            return list(result.all())

    async def create(self, business: Business) -> Business:
        """Create a new business"""
        async with translate_store_errors():
            self.session.add(business)
            await self.session.flush()
            await self.session.refresh(business)
        return business

    async def update(self, business: Business) -> Business:
        """Update existing business"""
        async with translate_store_errors():
            self.session.add(business)
            await self.session.flush()
            await self.session.refresh(business)
        return business

    async def delete(self, business: Business) -> None:
        async with translate_store_errors():
            await self.session.delete(business)
            await self.session.flush()
