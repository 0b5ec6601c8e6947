from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.store_errors import translate_store_errors
from src.app.repositories.member_repository import IMemberRepository
from src.domain.entities import BusinessMember

_DIALECT_INSERTS = {"postgresql": postgresql.insert, "sqlite": sqlite.insert}


class MemberRepository(IMemberRepository):
    """Business member repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_business_and_user(
        self, business_id: UUID, user_id: UUID
    ) -> Optional[BusinessMember]:
        """Get membership by business and user"""
        stmt = select(BusinessMember).where(
            BusinessMember.business_id == business_id,
            BusinessMember.user_id == user_id,
        )
        async with translate_store_errors():
            result = await self.session.exec(stmt)
            return result.one_or_none()

    async def get_by_business_id(self, business_id: UUID) -> List[BusinessMember]:
        """Get all members of a business"""
        stmt = (
            select(BusinessMember)
            .where(BusinessMember.business_id == business_id)
            .order_by(BusinessMember.joined_at.desc())
        )
        async with translate_store_errors():
            result = await self.session.exec(stmt)
            return list(result.all())

    async def create_if_absent(self, member: BusinessMember) -> Optional[BusinessMember]:
        """Insert a membership unless one exists for (business_id, user_id)"""
        async with translate_store_errors():
            connection = await self.session.connection()
            insert = _DIALECT_INSERTS[connection.dialect.name]
            stmt = (
                insert(BusinessMember)
                .values(**member.model_dump())
                .on_conflict_do_nothing(index_elements=["business_id", "user_id"])
            )
            result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self.get_by_business_and_user(member.business_id, member.user_id)

    async def update(self, member: BusinessMember) -> BusinessMember:
        """Update existing membership"""
        async with translate_store_errors():
            self.session.add(member)
            await self.session.flush()
            await self.session.refresh(member)
        return member

    async def delete(self, member: BusinessMember) -> None:
        """Delete a membership"""
        async with translate_store_errors():
            await self.session.delete(member)
            await self.session.flush()

    async def delete_by_business_id(self, business_id: UUID) -> int:
        stmt = delete(BusinessMember).where(BusinessMember.business_id == business_id)
        async with translate_store_errors():
            result = await self.session.execute(stmt)
        return result.rowcount
