"""
Member API Routes

Listing, role changes and removal of business members.
"""

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.ids import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.members import (
    ListMembersResponse,
    ListMembersUseCase,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    UpdateMemberRoleResponse,
    UpdateMemberRoleUseCase,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/businesses/{business_id}/members", tags=["Members"])


class UpdateMemberRoleRequest(BaseModel):
    role: str = Field(..., description="New role: admin, editor or viewer")


@router.get("", status_code=status.HTTP_200_OK, response_model=ListMembersResponse)
async def list_members(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Members

    Any owner or member may list the team. The owner is reported separately
    since they hold no membership row.
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")

    result = await ListMembersUseCase(uow).execute(current_user["user_id"], business_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{user_id}", status_code=status.HTTP_200_OK, response_model=UpdateMemberRoleResponse
)
async def update_member_role(
    business_id: str,
    user_id: str,
    request: UpdateMemberRoleRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Member Role

    Raises:
        - 400 Bad Request: INVALID_ROLE, INVALID_BUSINESS_ID, INVALID_USER_ID
        - 403 Forbidden: PERMISSION_DENIED (requires owner or admin)
        - 404 Not Found: BUSINESS_NOT_FOUND, MEMBER_NOT_FOUND
        - 409 Conflict: OWNER_IMMUTABLE
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")
    target_uuid = parse_uuid(user_id, "INVALID_USER_ID", "user")

    use_case = UpdateMemberRoleUseCase(uow)
    result = await use_case.execute(
        current_user["user_id"], business_uuid, target_uuid, request.role
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{user_id}", status_code=status.HTTP_200_OK, response_model=RemoveMemberResponse
)
async def remove_member(
    business_id: str,
    user_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Member

    Members may remove themselves (leave); removing others requires owner
    or admin. The owner can never be removed.

    Raises:
        - 400 Bad Request: INVALID_BUSINESS_ID, INVALID_USER_ID
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: BUSINESS_NOT_FOUND, MEMBER_NOT_FOUND
        - 409 Conflict: OWNER_IMMUTABLE
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")
    target_uuid = parse_uuid(user_id, "INVALID_USER_ID", "user")

    result = await RemoveMemberUseCase(uow).execute(
        current_user["user_id"], business_uuid, target_uuid
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
