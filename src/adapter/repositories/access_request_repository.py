from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.store_errors import translate_store_errors
from src.app.repositories.access_request_repository import IAccessRequestRepository
from src.domain.entities import AccessRequestStatus, BusinessAccessRequest


class AccessRequestRepository(IAccessRequestRepository):
    """Access request repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, request_id: UUID) -> Optional[BusinessAccessRequest]:
        """Get access request by ID"""
        stmt = select(BusinessAccessRequest).where(BusinessAccessRequest.id == request_id)
        async with translate_store_errors():
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def get_pending_by_business_and_user(
        self, business_id: UUID, user_id: UUID
    ) -> Optional[BusinessAccessRequest]:
        stmt = select(BusinessAccessRequest).where(
            BusinessAccessRequest.business_id == business_id,
            BusinessAccessRequest.user_id == user_id,
            BusinessAccessRequest.status == AccessRequestStatus.pending,
        )
        async with translate_store_errors():
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def get_pending_by_business_id(
        self, business_id: UUID
    ) -> List[BusinessAccessRequest]:
        stmt = (
            select(BusinessAccessRequest)
            .where(
                BusinessAccessRequest.business_id == business_id,
                BusinessAccessRequest.status == AccessRequestStatus.pending,
            )
            .order_by(BusinessAccessRequest.created_at.desc())
        )
        async with translate_store_errors():
            result = await self.session.execute(stmt)
            return list(result.scalars().all())

    async def create(self, request: BusinessAccessRequest) -> BusinessAccessRequest:
        """Create a new access request"""
        async with translate_store_errors():
            self.session.add(request)
            await self.session.flush()
            await self.session.refresh(request)
        return request

    async def resolve(
        self,
        request_id: UUID,
        status: AccessRequestStatus,
        reviewed_by: UUID,
        reviewed_at: datetime,
    ) -> bool:
        stmt = (
            update(BusinessAccessRequest)
            .where(
                BusinessAccessRequest.id == request_id,
                BusinessAccessRequest.status == AccessRequestStatus.pending,
            )
            .values(
                status=status,
                reviewed_by=reviewed_by,
                reviewed_at=reviewed_at,
                updated_at=reviewed_at,
            )
        )
        async with translate_store_errors():
            result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def delete(self, request: BusinessAccessRequest) -> None:
        """Delete an access request"""
        async with translate_store_errors():
            await self.session.delete(request)
            await self.session.flush()

    async def delete_by_business_id(self, business_id: UUID) -> int:
        stmt = delete(BusinessAccessRequest).where(
            BusinessAccessRequest.business_id == business_id
        )
        async with translate_store_errors():
            result = await self.session.execute(stmt)
        return result.rowcount
