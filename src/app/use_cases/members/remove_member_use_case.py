"""
Remove Member Use Case

Handles members leaving a business and managers removing them.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.permission_resolver import PermissionResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent

from .dtos import RemoveMemberResponse


class RemoveMemberUseCase:
    """
    Use case for removing members from a business.

    Business Rules:
    - The owner can never be removed (OWNER_IMMUTABLE), whoever asks
    - A member can always remove themselves, whatever their role
    - Removing someone else requires manage_team
    - The membership row is deleted; access ends on the next request
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, business_id: UUID, target_user_id: UUID
    ) -> Result[RemoveMemberResponse]:
        """
        Execute remove member use case.

        Args:
            user_id: User ID of the caller
            business_id: Business ID
            target_user_id: User ID of the member to remove

        Returns:
            Result with RemoveMemberResponse DTO ("left" or "removed"), or Error
        """
        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            if business.is_owner(target_user_id):
                return Return.err(
                    Error("OWNER_IMMUTABLE", "The business owner cannot be removed")
                )

            is_self_removal = user_id == target_user_id
            if not is_self_removal:
                permission = await PermissionResolver(self.uow).resolve_for(
                    business, user_id
                )
                if not permission.can_manage_team:
                    return Return.err(
                        Error(
                            "PERMISSION_DENIED",
                            "You do not have permission to remove team members",
                        )
                    )

            member = await self.uow.members.get_by_business_and_user(
                business_id, target_user_id
            )
            if member is None:
                return Return.err(
                    Error("MEMBER_NOT_FOUND", "User is not a member of this business")
                )

            await self.uow.members.delete(member)

            await self.uow.audit_events.create(
                AuditEvent(
                    business_id=business_id,
                    user_id=user_id,
                    action="member_left" if is_self_removal else "member_removed",
                    event_metadata={
                        "removed_user_id": str(target_user_id),
                        "removed_user_role": member.role.value,
                    },
                )
            )
            await self.uow.commit()

            return Return.ok(
                RemoveMemberResponse(status="left" if is_self_removal else "removed")
            )
