"""
Create Invitation Use Case

Handles inviting an e-mail address to join a business at a role.
"""

import logging
import secrets
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import DuplicateRecordError
from src.app.services.notifier import InvitationNotifier
from src.app.services.permission_resolver import PermissionResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import (
    INVITATION_TTL,
    AuditEvent,
    BusinessInvitation,
    InvitationStatus,
    MemberRole,
)

from .dtos import InvitationResponse

logger = logging.getLogger(__name__)


class CreateInvitationUseCase:
    """
    Use case for inviting users to join a business.

    Business Rules:
    - Only owner/admin (manage_team) can invite
    - Role must be admin, editor or viewer
    - Owner and existing members cannot be invited
    - At most one live pending invitation per (business, email); a lapsed
      one is marked expired to free the slot. The pending
      unique index backs the pre-check against concurrent inserts
    - Invitation expires 7 days after creation
    - Token is a URL-safe secret (secrets.token_urlsafe)
    """

    def __init__(self, uow: UnitOfWork, notifier: Optional[InvitationNotifier] = None):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self, inviter_user_id: UUID, business_id: UUID, email: str, role: str
    ) -> Result[InvitationResponse]:
        """
        Execute create invitation use case.

        Args:
            inviter_user_id: User ID of the person sending the invite
            business_id: Target business ID
            email: Email address to invite
            role: Role to offer (admin/editor/viewer)

        Returns:
            Result with InvitationResponse DTO (token included), or Error
        """
        try:
            member_role = MemberRole(role)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    f"Invalid role: {role}. Must be one of: admin, editor, viewer",
                )
            )

        email = email.strip().lower()

        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            permission = await PermissionResolver(self.uow).resolve_for(
                business, inviter_user_id
            )
            if not permission.can_manage_team:
                return Return.err(
                    Error(
                        "PERMISSION_DENIED",
                        "You do not have permission to invite team members",
                    )
                )

            existing_user = await self.uow.users.get_by_email(email)
            if existing_user is not None:
                existing_member = await self.uow.members.get_by_business_and_user(
                    business_id, existing_user.id
                )
                if business.is_owner(existing_user.id) or existing_member is not None:
                    return Return.err(
                        Error(
                            "ALREADY_MEMBER",
                            "User is already a member of this business",
                        )
                    )

            now = utcnow()
            pending_invitation = (
                await self.uow.invitations.get_pending_by_business_and_email(
                    business_id, email
                )
            )
            if pending_invitation is not None:
                if not pending_invitation.is_expired(now):
                    return Return.err(
                        Error(
                            "DUPLICATE_INVITATION",
                            "An invitation has already been sent to this email",
                        )
                    )
                # Lapsed invitation still holds the pending slot
                await self.uow.invitations.transition_status(
                    pending_invitation.id,
                    InvitationStatus.pending,
                    InvitationStatus.expired,
                )
                logger.info(
                    "Invitation %s marked expired before re-inviting", pending_invitation.id
                )

            invitation = BusinessInvitation(
                business_id=business_id,
                email=email,
                role=member_role,
                invited_by=inviter_user_id,
                token=secrets.token_urlsafe(32),
                expires_at=now + INVITATION_TTL,
                created_at=now,
                updated_at=now,
            )

            try:
                invitation = await self.uow.invitations.create(invitation)
                await self.uow.audit_events.create(
                    AuditEvent(
                        business_id=business_id,
                        user_id=inviter_user_id,
                        action="invite_sent",
                        event_metadata={
                            "invitation_id": str(invitation.id),
                            "invited_email": email,
                            "role": member_role.value,
                        },
                    )
                )
                await self.uow.commit()
            except DuplicateRecordError:
                # Lost the race against a concurrent invite for the same email
                await self.uow.rollback()
                return Return.err(
                    Error(
                        "DUPLICATE_INVITATION",
                        "An invitation has already been sent to this email",
                    )
                )

            logger.info(
                "Invitation %s created for business %s (role=%s)",
                invitation.id,
                business_id,
                member_role.value,
            )

            if self.notifier is not None:
                try:
                    await self.notifier.send_invitation(invitation, business)
                except Exception:
                    # Delivery is best effort, the invitation is already stored
                    logger.exception("Failed to send invitation %s", invitation.id)

            return Return.ok(
                InvitationResponse.from_entity(
                    invitation, now, include_token=True, business=business
                )
            )
