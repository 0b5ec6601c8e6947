"""
Create Access Request Use Case

Handles a user asking to join a business.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import DuplicateRecordError
from src.app.services.membership_service import MembershipService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    MAX_MESSAGE_LENGTH,
    AuditEvent,
    BusinessAccessRequest,
    RequestableRole,
)

from .dtos import AccessRequestResponse

logger = logging.getLogger(__name__)


class CreateAccessRequestUseCase:
    """
    Use case for requesting access to a business.

    Business Rules:
    - Any authenticated user may request access to any business
    - Requested role must be editor or viewer
    - Message is optional, at most 500 characters
    - Owner and existing members cannot request access
    - At most one pending request per (business, user)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        user_email: str,
        business_id: UUID,
        requested_role: str,
        message: Optional[str] = None,
    ) -> Result[AccessRequestResponse]:
        try:
            role = RequestableRole(requested_role)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    f"Invalid role: {requested_role}. Must be one of: editor, viewer",
                )
            )

        if message is not None and len(message) > MAX_MESSAGE_LENGTH:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Message must be at most {MAX_MESSAGE_LENGTH} characters",
                )
            )

        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            existing_member = await self.uow.members.get_by_business_and_user(
                business_id, user_id
            )
            if business.is_owner(user_id) or existing_member is not None:
                return Return.err(
                    Error("ALREADY_MEMBER", "You are already a member of this business")
                )

            pending = await self.uow.access_requests.get_pending_by_business_and_user(
                business_id, user_id
            )
            if pending is not None:
                return Return.err(
                    Error(
                        "DUPLICATE_ACCESS_REQUEST",
                        "You already have a pending access request for this business",
                    )
                )

            try:
                profile = await MembershipService(self.uow).ensure_profile(
                    user_id, user_email
                )
                request = await self.uow.access_requests.create(
                    BusinessAccessRequest(
                        business_id=business_id,
                        user_id=user_id,
                        requested_role=role,
                        message=message,
                    )
                )
                await self.uow.audit_events.create(
                    AuditEvent(
                        business_id=business_id,
                        user_id=user_id,
                        action="access_requested",
                        event_metadata={
                            "access_request_id": str(request.id),
                            "requested_role": role.value,
                        },
                    )
                )
                await self.uow.commit()
            except DuplicateRecordError:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        "DUPLICATE_ACCESS_REQUEST",
                        "You already have a pending access request for this business",
                    )
                )

            logger.info("Access request %s created for business %s", request.id, business_id)
            return Return.ok(AccessRequestResponse.from_entity(request, profile))
