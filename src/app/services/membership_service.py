"""
Membership creation shared by invitation acceptance and access request approval.
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Business, BusinessMember, MemberRole, UserProfile

logger = logging.getLogger(__name__)


class MembershipService:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def ensure_member(
        self,
        business: Business,
        user_id: UUID,
        role: MemberRole,
        invited_by: Optional[UUID],
    ) -> Optional[BusinessMember]:
        """
        Insert-or-keep the membership of a user.

        An existing membership is returned unchanged, including one inserted
        by a concurrent request between the lookup and the insert. The owner
        never gets a membership row, so None is returned for them.
        """
        if business.is_owner(user_id):
            return None

        existing = await self.uow.members.get_by_business_and_user(business.id, user_id)
        if existing is not None:
            logger.info(
                "User %s already member of business %s as %s",
                user_id,
                business.id,
                existing.role.value,
            )
            return existing

        member = BusinessMember(
            business_id=business.id,
            user_id=user_id,
            role=role,
            invited_by=invited_by,
        )
        created = await self.uow.members.create_if_absent(member)
        if created is not None:
            return created

        # A concurrent request inserted the same membership first
        existing = await self.uow.members.get_by_business_and_user(business.id, user_id)
        logger.info(
            "User %s joined business %s concurrently as %s",
            user_id,
            business.id,
            existing.role.value,
        )
        return existing

    async def ensure_profile(self, user_id: UUID, email: str) -> UserProfile:
        """Record display data for a verified caller identity"""
        profile = await self.uow.users.get_by_id(user_id)
        if profile is not None:
            return profile
        return await self.uow.users.create(UserProfile(id=user_id, email=email.lower()))
