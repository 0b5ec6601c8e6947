"""
Review Access Request Use Case

Approves or rejects a pending access request.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import DuplicateRecordError
from src.app.services.membership_service import MembershipService
from src.app.services.permission_resolver import PermissionResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import (
    AccessRequestStatus,
    AuditEvent,
    MemberRole,
    ReviewAction,
)

from .dtos import ReviewAccessRequestResponse

logger = logging.getLogger(__name__)


class ReviewAccessRequestUseCase:
    """
    Use case for reviewing access requests.

    Business Rules:
    - Only owner/admin (manage_team) can review
    - Only pending requests can be reviewed (INVALID_STATE_TRANSITION)
    - Approval creates the membership at the requested role through the same
      path as invitation acceptance, in the same unit of work
    - Reviewer and review time are recorded on the request
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, business_id: UUID, request_id: UUID, action: str
    ) -> Result[ReviewAccessRequestResponse]:
        """
        Execute review access request use case.

        Args:
            user_id: Reviewer user ID
            business_id: Business the request targets
            request_id: Access request ID
            action: approve or reject

        Returns:
            Result with ReviewAccessRequestResponse DTO, or Error
        """
        try:
            review_action = ReviewAction(action)
        except ValueError:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Invalid action: {action}. Must be one of: approve, reject",
                )
            )

        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            permission = await PermissionResolver(self.uow).resolve_for(business, user_id)
            if not permission.can_manage_team:
                return Return.err(
                    Error(
                        "PERMISSION_DENIED",
                        "You do not have permission to review access requests",
                    )
                )

            request = await self.uow.access_requests.get_by_id(request_id)
            if request is None or request.business_id != business_id:
                return Return.err(
                    Error("ACCESS_REQUEST_NOT_FOUND", "Access request not found")
                )

            if request.status != AccessRequestStatus.pending:
                return Return.err(
                    Error(
                        "INVALID_STATE_TRANSITION",
                        "Access request has already been reviewed",
                    )
                )

            if review_action == ReviewAction.approve:
                new_status = AccessRequestStatus.approved
            else:
                new_status = AccessRequestStatus.rejected

            try:
                if new_status == AccessRequestStatus.approved:
                    await MembershipService(self.uow).ensure_member(
                        business,
                        request.user_id,
                        MemberRole(request.requested_role.value),
                        user_id,
                    )

                resolved = await self.uow.access_requests.resolve(
                    request.id, new_status, user_id, utcnow()
                )
                if not resolved:
                    await self.uow.rollback()
                    return Return.err(
                        Error(
                            "INVALID_STATE_TRANSITION",
                            "Access request has already been reviewed",
                        )
                    )

                await self.uow.audit_events.create(
                    AuditEvent(
                        business_id=business_id,
                        user_id=user_id,
                        action=f"access_request_{new_status.value}",
                        event_metadata={
                            "access_request_id": str(request.id),
                            "requester_id": str(request.user_id),
                            "requested_role": request.requested_role.value,
                        },
                    )
                )
                await self.uow.commit()
            except DuplicateRecordError:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        "INVALID_STATE_TRANSITION",
                        "Access request was reviewed concurrently",
                    )
                )

            logger.info("Access request %s %s by %s", request.id, new_status.value, user_id)
            return Return.ok(ReviewAccessRequestResponse(status=new_status.value))
