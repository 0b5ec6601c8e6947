"""
Get Invitation Use Case

Public lookup of an invitation by its token.
"""

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow

from .dtos import InvitationResponse


class GetInvitationUseCase:
    """
    Use case for reading an invitation through its link.

    Business Rules:
    - No caller identity required, the token is the credential
    - Unknown token fails with INVITATION_NOT_FOUND
    - Past expires_at the invitation is presented as expired, whatever the
      stored status says
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[InvitationResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            business = await self.uow.businesses.get_by_id(invitation.business_id)
            inviter = await self.uow.users.get_by_id(invitation.invited_by)

            return Return.ok(
                InvitationResponse.from_entity(
                    invitation, utcnow(), inviter=inviter, business=business
                )
            )
