"""
Update Member Role Use Case

Handles changing a member's role within a business.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.permission_resolver import PermissionResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, MemberRole

from .dtos import MemberResponse, UpdateMemberRoleResponse


class UpdateMemberRoleUseCase:
    """
    Use case for changing a member's role within a business.

    Business Rules:
    - New role must be admin, editor or viewer (checked before permissions)
    - Only owner/admin (manage_team) can change roles
    - The owner's role cannot be changed (OWNER_IMMUTABLE)
    - Target user must be a member
    - Takes effect on the next permission check, nothing is cached
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, business_id: UUID, target_user_id: UUID, new_role: str
    ) -> Result[UpdateMemberRoleResponse]:
        """
        Execute update member role use case.

        Args:
            user_id: User ID of the person making the change
            business_id: Business ID
            target_user_id: User ID whose role is being changed
            new_role: New role to assign (admin/editor/viewer)

        Returns:
            Result with UpdateMemberRoleResponse DTO, or Error
        """
        try:
            member_role = MemberRole(new_role)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    f"Invalid role: {new_role}. Must be one of: admin, editor, viewer",
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
                        "You do not have permission to manage team members",
                    )
                )

            if business.is_owner(target_user_id):
                return Return.err(
                    Error("OWNER_IMMUTABLE", "The business owner's role cannot be changed")
                )

            member = await self.uow.members.get_by_business_and_user(
                business_id, target_user_id
            )
            if member is None:
                return Return.err(
                    Error("MEMBER_NOT_FOUND", "User is not a member of this business")
                )

            old_role = member.role.value
            member.role = member_role
            member.updated_at = utcnow()
            member = await self.uow.members.update(member)

            await self.uow.audit_events.create(
                AuditEvent(
                    business_id=business_id,
                    user_id=user_id,
                    action="member_role_changed",
                    event_metadata={
                        "target_user_id": str(target_user_id),
                        "old_role": old_role,
                        "new_role": member_role.value,
                    },
                )
            )
            await self.uow.commit()

            return Return.ok(
                UpdateMemberRoleResponse(
                    status="updated", member=MemberResponse.from_entity(member)
                )
            )
