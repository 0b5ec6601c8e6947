"""
Update Business Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.permission_resolver import PermissionResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent

from .dtos import BusinessResponse


class UpdateBusinessUseCase:
    """
    Use case for renaming a business.

    Business Rules:
    - Requires edit (owner, admin, editor)
    - Name must not be blank; the slug is left unchanged
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, business_id: UUID, name: str
    ) -> Result[BusinessResponse]:
        name = name.strip()
        if not name:
            return Return.err(Error("VALIDATION_ERROR", "Business name is required"))

        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            permissions = await PermissionResolver(self.uow).resolve_for(business, user_id)
            if not permissions.can_edit:
                return Return.err(
                    Error(
                        "PERMISSION_DENIED",
                        "You do not have permission to edit this business",
                    )
                )

            old_name = business.name
            business.name = name
            business.updated_at = utcnow()
            business = await self.uow.businesses.update(business)

            await self.uow.audit_events.create(
                AuditEvent(
                    business_id=business_id,
                    user_id=user_id,
                    action="business_updated",
                    event_metadata={"old_name": old_name, "new_name": name},
                )
            )
            await self.uow.commit()

            return Return.ok(BusinessResponse.from_entity(business, permissions))
