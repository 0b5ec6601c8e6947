"""
Delete Business Use Case

Owner-only hard delete of a business and everything that hangs off it.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.permission_resolver import PermissionResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent

from .dtos import DeleteBusinessResponse

logger = logging.getLogger(__name__)


class DeleteBusinessUseCase:
    """
    Use case for deleting a business.

    Business Rules:
    - Only the owner holds the delete capability
    - Members, invitations (any status) and access requests are deleted in
      the same unit of work as the business
    - Audit events are kept; a business_deleted event is appended
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, business_id: UUID
    ) -> Result[DeleteBusinessResponse]:
        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            permissions = await PermissionResolver(self.uow).resolve_for(business, user_id)
            if not permissions.can_delete:
                return Return.err(
                    Error(
                        "PERMISSION_DENIED",
                        "Only the business owner can delete the business",
                    )
                )

            members_removed = await self.uow.members.delete_by_business_id(business_id)
            invitations_removed = await self.uow.invitations.delete_by_business_id(
                business_id
            )
            requests_removed = await self.uow.access_requests.delete_by_business_id(
                business_id
            )
            await self.uow.businesses.delete(business)

            await self.uow.audit_events.create(
                AuditEvent(
                    business_id=business_id,
                    user_id=user_id,
                    action="business_deleted",
                    event_metadata={
                        "name": business.name,
                        "members_removed": members_removed,
                        "invitations_removed": invitations_removed,
                        "access_requests_removed": requests_removed,
                    },
                )
            )
            await self.uow.commit()

            logger.info("Business %s deleted by owner %s", business_id, user_id)
            return Return.ok(
                DeleteBusinessResponse(
                    status="deleted",
                    members_removed=members_removed,
                    invitations_removed=invitations_removed,
                    access_requests_removed=requests_removed,
                )
            )
