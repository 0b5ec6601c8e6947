"""
List Members Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import StoreError
from src.app.services.permission_resolver import PermissionResolver
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ListMembersResponse, MemberResponse, UserSummary

logger = logging.getLogger(__name__)


class ListMembersUseCase:
    """
    Use case for listing the team of a business.

    Business Rules:
    - Any role with view access may list members
    - The owner is not a member row and is returned as a separate field
    - A failed owner profile lookup yields owner=None, members are still
      returned
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, business_id: UUID) -> Result[ListMembersResponse]:
        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            permission = await PermissionResolver(self.uow).resolve_for(business, user_id)
            if not permission.can_view:
                return Return.err(
                    Error(
                        "PERMISSION_DENIED",
                        "You do not have permission to view team members",
                    )
                )

            members = await self.uow.members.get_by_business_id(business_id)
            profiles = {
                profile.id: profile
                for profile in await self.uow.users.get_by_ids(
                    [member.user_id for member in members]
                )
            }

            try:
                owner = await self.uow.users.get_by_id(business.owner_id)
            except StoreError:
                logger.warning(
                    "Owner profile lookup failed for business %s", business_id,
                    exc_info=True,
                )
                owner = None

            return Return.ok(
                ListMembersResponse(
                    members=[
                        MemberResponse.from_entity(member, profiles.get(member.user_id))
                        for member in members
                    ],
                    owner=UserSummary.from_profile(owner),
                )
            )
