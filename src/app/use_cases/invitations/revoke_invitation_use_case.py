"""
Revoke Invitation Use Case

Handles revoking invitations.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.permission_resolver import PermissionResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, InvitationStatus

from .dtos import RevokeInvitationResponse


class RevokeInvitationUseCase:
    """
    Use case for revoking invitations.

    Business Rules:
    - Only owner/admin (manage_team) can revoke
    - Pending invitations are deleted, which makes their token dead
    - Already resolved invitations are left as audit records and the call
      still succeeds
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, business_id: UUID, invitation_id: UUID
    ) -> Result[RevokeInvitationResponse]:
        """
        Execute revoke invitation use case.

        Args:
            user_id: User ID of the person revoking the invite
            business_id: Business the invitation belongs to
            invitation_id: ID of the invitation to revoke

        Returns:
            Result with RevokeInvitationResponse DTO, or Error
        """
        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            permission = await PermissionResolver(self.uow).resolve_for(business, user_id)
            if not permission.can_manage_team:
                return Return.err(
                    Error(
                        "PERMISSION_DENIED",
                        "You do not have permission to revoke invitations",
                    )
                )

            invitation = await self.uow.invitations.get_by_id(invitation_id)

            # Invitations of other businesses are reported as missing
            if invitation is None or invitation.business_id != business_id:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            if invitation.status != InvitationStatus.pending:
                return Return.ok(RevokeInvitationResponse(status="revoked"))

            await self.uow.invitations.delete(invitation)
            await self.uow.audit_events.create(
                AuditEvent(
                    business_id=business_id,
                    user_id=user_id,
                    action="invitation_revoked",
                    event_metadata={
                        "invitation_id": str(invitation.id),
                        "email": invitation.email,
                    },
                )
            )
            await self.uow.commit()

            return Return.ok(RevokeInvitationResponse(status="revoked"))
