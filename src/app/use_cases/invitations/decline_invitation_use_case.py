"""
Decline Invitation Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, InvitationStatus

from .dtos import DeclineInvitationResponse

logger = logging.getLogger(__name__)


class DeclineInvitationUseCase:
    """
    Use case for declining an invitation through its link.

    Business Rules:
    - No caller identity and no email check, holding the link is enough
    - Expired invitations can still be declined
    - Non-pending invitations fail with INVALID_STATE_TRANSITION; of two
      concurrent declines exactly one wins the pending->declined transition
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[DeclineInvitationResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            if invitation.status != InvitationStatus.pending:
                return Return.err(
                    Error(
                        "INVALID_STATE_TRANSITION",
                        f"This invitation has already been {invitation.status.value}",
                    )
                )

            transitioned = await self.uow.invitations.transition_status(
                invitation.id, InvitationStatus.pending, InvitationStatus.declined
            )
            if not transitioned:
                return Return.err(
                    Error(
                        "INVALID_STATE_TRANSITION",
                        "This invitation is no longer pending",
                    )
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    business_id=invitation.business_id,
                    action="invitation_declined",
                    event_metadata={
                        "invitation_id": str(invitation.id),
                        "email": invitation.email,
                    },
                )
            )
            await self.uow.commit()

            logger.info("Invitation %s declined", invitation.id)
            return Return.ok(
                DeclineInvitationResponse(status=InvitationStatus.declined.value)
            )
