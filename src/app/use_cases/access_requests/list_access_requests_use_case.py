"""
List Access Requests Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.permission_resolver import PermissionResolver
from src.app.services.unit_of_work import UnitOfWork

from .dtos import AccessRequestResponse, ListAccessRequestsResponse


class ListAccessRequestsUseCase:
    """Pending access requests of a business, newest first (owner/admin only)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, business_id: UUID
    ) -> Result[ListAccessRequestsResponse]:
        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            permission = await PermissionResolver(self.uow).resolve_for(business, user_id)
            if not permission.can_manage_team:
                return Return.err(
                    Error(
                        "PERMISSION_DENIED",
                        "You do not have permission to view access requests",
                    )
                )

            requests = await self.uow.access_requests.get_pending_by_business_id(
                business_id
            )
            profiles = {
                profile.id: profile
                for profile in await self.uow.users.get_by_ids(
                    [request.user_id for request in requests]
                )
            }

            return Return.ok(
                ListAccessRequestsResponse(
                    access_requests=[
                        AccessRequestResponse.from_entity(
                            request, profiles.get(request.user_id)
                        )
                        for request in requests
                    ]
                )
            )
