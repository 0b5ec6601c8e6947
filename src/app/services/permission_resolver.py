"""
Permission Resolver

Single source of truth for what a user may do on a business. Every use case
and the permissions endpoint go through here; nothing is cached, so role
changes and removals apply on the very next call.
"""

from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Business, BusinessRole
from src.domain.roles import UserBusinessPermission


class PermissionResolver:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def role_in(self, business: Business, user_id: UUID) -> Optional[BusinessRole]:
        """Effective role of the user, or None for non-members"""
        if business.is_owner(user_id):
            return BusinessRole.owner

        member = await self.uow.members.get_by_business_and_user(business.id, user_id)
        if member is None:
            return None
        return BusinessRole(member.role.value)

    async def resolve_for(
        self, business: Business, user_id: UUID
    ) -> UserBusinessPermission:
        role = await self.role_in(business, user_id)
        return UserBusinessPermission.from_role(business.id, user_id, role)

    async def resolve(self, user_id: UUID, business_id: UUID) -> UserBusinessPermission:
        """
        Resolve the capability set of a user on a business.

        Unknown businesses and strangers both resolve to the all-false row.
        """
        business = await self.uow.businesses.get_by_id(business_id)
        if business is None:
            return UserBusinessPermission.from_role(business_id, user_id, None)
        return await self.resolve_for(business, user_id)
