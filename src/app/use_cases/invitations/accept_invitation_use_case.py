"""
Accept Invitation Use Case

Turns a pending invitation into a membership.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import DuplicateRecordError
from src.app.services.membership_service import MembershipService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, InvitationStatus

from .dtos import AcceptInvitationResponse, BusinessSummary

logger = logging.getLogger(__name__)


class AcceptInvitationUseCase:
    """
    Use case for accepting business invitations.

    Business Rules:
    - Unknown token fails with INVITATION_NOT_FOUND
    - Invitations past expires_at fail with INVITATION_EXPIRED
    - Non-pending invitations fail with INVALID_STATE_TRANSITION
    - The caller's email must match the invited email (EMAIL_MISMATCH)
    - None of the failures above write to the store
    - Membership upsert and the pending->accepted transition commit together;
      losing the transition to a concurrent caller rolls both back
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, token: str, user_id: UUID, user_email: str
    ) -> Result[AcceptInvitationResponse]:
        """
        Execute accept invitation use case.

        Args:
            token: Invitation token
            user_id: Verified ID of the accepting user
            user_email: Verified email of the accepting user

        Returns:
            Result with AcceptInvitationResponse DTO, or Error
        """
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            if invitation.is_expired(utcnow()):
                return Return.err(
                    Error("INVITATION_EXPIRED", "This invitation has expired")
                )

            if invitation.status != InvitationStatus.pending:
                return Return.err(
                    Error(
                        "INVALID_STATE_TRANSITION",
                        f"This invitation has already been {invitation.status.value}",
                    )
                )

            if user_email.strip().lower() != invitation.email:
                return Return.err(
                    Error(
                        "EMAIL_MISMATCH",
                        "This invitation was sent to a different email address",
                    )
                )

            business = await self.uow.businesses.get_by_id(invitation.business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            memberships = MembershipService(self.uow)
            try:
                await memberships.ensure_profile(user_id, user_email)
                member = await memberships.ensure_member(
                    business, user_id, invitation.role, invitation.invited_by
                )

                transitioned = await self.uow.invitations.transition_status(
                    invitation.id, InvitationStatus.pending, InvitationStatus.accepted
                )
                if not transitioned:
                    await self.uow.rollback()
                    return Return.err(
                        Error(
                            "INVALID_STATE_TRANSITION",
                            "This invitation is no longer pending",
                        )
                    )

                await self.uow.audit_events.create(
                    AuditEvent(
                        business_id=business.id,
                        user_id=user_id,
                        action="invitation_accepted",
                        event_metadata={
                            "invitation_id": str(invitation.id),
                            "role": invitation.role.value,
                            "member_id": str(member.id) if member else None,
                        },
                    )
                )
                await self.uow.commit()
            except DuplicateRecordError:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        "INVALID_STATE_TRANSITION",
                        "This invitation was resolved concurrently",
                    )
                )

            logger.info("Invitation %s accepted by user %s", invitation.id, user_id)

            role = member.role.value if member is not None else "owner"
            return Return.ok(
                AcceptInvitationResponse(
                    status=InvitationStatus.accepted.value,
                    business=BusinessSummary.from_entity(business),
                    role=role,
                )
            )
