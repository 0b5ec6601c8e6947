"""
List Businesses Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.permission_resolver import PermissionResolver
from src.app.services.unit_of_work import UnitOfWork

from .dtos import BusinessResponse, ListBusinessesResponse


class ListBusinessesUseCase:
    """Businesses the caller owns or is a member of, with their permissions"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[ListBusinessesResponse]:
        async with self.uow:
            resolver = PermissionResolver(self.uow)
            businesses = await self.uow.businesses.list_for_user(user_id)

            responses = []
            for business in businesses:
                permissions = await resolver.resolve_for(business, user_id)
                responses.append(BusinessResponse.from_entity(business, permissions))

            return Return.ok(ListBusinessesResponse(businesses=responses))
