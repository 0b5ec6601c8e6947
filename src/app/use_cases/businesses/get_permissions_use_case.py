"""
Get Permissions Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.permission_resolver import PermissionResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.roles import UserBusinessPermission


class GetPermissionsUseCase:
    """
    Caller's capability set on a business.

    Never fails for strangers or unknown businesses: they get the all-false
    row.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, business_id: UUID
    ) -> Result[UserBusinessPermission]:
        async with self.uow:
            permission = await PermissionResolver(self.uow).resolve(user_id, business_id)
            return Return.ok(permission)
