"""
Get Business Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.permission_resolver import PermissionResolver
from src.app.services.unit_of_work import UnitOfWork

from .dtos import BusinessResponse


class GetBusinessUseCase:
    """Read a business; requires view access"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, business_id: UUID) -> Result[BusinessResponse]:
        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            permissions = await PermissionResolver(self.uow).resolve_for(business, user_id)
            if not permissions.can_view:
                return Return.err(
                    Error("PERMISSION_DENIED", "You do not have access to this business")
                )

            return Return.ok(BusinessResponse.from_entity(business, permissions))
