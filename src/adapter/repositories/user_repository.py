from typing import List, Optional, Sequence
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.store_errors import translate_store_errors
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import UserProfile


class UserRepository(IUserRepository):
    """User profile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[UserProfile]:
        """Get profile by email address"""
        stmt = select(UserProfile).where(UserProfile.email == email.lower())
        async with translate_store_errors():
            result = await self.session.exec(stmt)
            return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[UserProfile]:
        """Get profile by user ID"""
        stmt = select(UserProfile).where(UserProfile.id == user_id)
        async with translate_store_errors():
            result = await self.session.exec(stmt)
            return result.one_or_none()

    async def get_by_ids(self, user_ids: Sequence[UUID]) -> List[UserProfile]:
        if not user_ids:
            return []
        stmt = select(UserProfile).where(UserProfile.id.in_(list(user_ids)))
        async with translate_store_errors():
            result = await self.session.exec(stmt)
            return list(result.all())

    async def create(self, profile: UserProfile) -> UserProfile:
        """Create a new profile"""
        async with translate_store_errors():
            self.session.add(profile)
            await self.session.flush()
            await self.session.refresh(profile)
        return profile
