"""
List Invitations Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.permission_resolver import PermissionResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow

from .dtos import InvitationResponse, ListInvitationsResponse


class ListInvitationsUseCase:
    """
    Lists every invitation of a business, any status, newest first.

    Only owner/admin may list; rows are joined with the inviter's profile and
    the business summary.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, business_id: UUID
    ) -> Result[ListInvitationsResponse]:
        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            permission = await PermissionResolver(self.uow).resolve_for(business, user_id)
            if not permission.can_manage_team:
                return Return.err(
                    Error(
                        "PERMISSION_DENIED",
                        "You do not have permission to view invitations",
                    )
                )

            invitations = await self.uow.invitations.get_by_business_id(business_id)
            inviter_ids = list({invitation.invited_by for invitation in invitations})
            inviters = {
                profile.id: profile
                for profile in await self.uow.users.get_by_ids(inviter_ids)
            }

            now = utcnow()
            return Return.ok(
                ListInvitationsResponse(
                    invitations=[
                        InvitationResponse.from_entity(
                            invitation,
                            now,
                            include_token=True,
                            inviter=inviters.get(invitation.invited_by),
                            business=business,
                        )
                        for invitation in invitations
                    ]
                )
            )
