"""
Business API Routes

Business lifecycle and the permissions lookup.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.ids import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.businesses import (
    BusinessResponse,
    CreateBusinessUseCase,
    DeleteBusinessResponse,
    DeleteBusinessUseCase,
    GetBusinessUseCase,
    GetPermissionsUseCase,
    ListBusinessesResponse,
    ListBusinessesUseCase,
    UpdateBusinessUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.roles import UserBusinessPermission

router = APIRouter(prefix="/businesses", tags=["Businesses"])


class CreateBusinessRequest(BaseModel):
    """
    Create business HTTP request payload

    The slug is derived from the name when omitted.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    slug: Optional[str] = Field(None, max_length=255, description="URL-safe identifier")


class UpdateBusinessRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="New display name")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=BusinessResponse)
async def create_business(
    request: CreateBusinessRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Business

    The caller becomes the owner.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 401 Unauthorized: Missing or invalid token
        - 409 Conflict: SLUG_TAKEN
    """
    use_case = CreateBusinessUseCase(uow)
    result = await use_case.execute(
        owner_id=current_user["user_id"],
        owner_email=current_user["email"],
        name=request.name,
        slug=request.slug,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=ListBusinessesResponse)
async def list_businesses(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List businesses the caller owns or belongs to"""
    result = await ListBusinessesUseCase(uow).execute(current_user["user_id"])

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{business_id}", status_code=status.HTTP_200_OK, response_model=BusinessResponse
)
async def get_business(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Business

    Raises:
        - 400 Bad Request: INVALID_BUSINESS_ID
        - 403 Forbidden: PERMISSION_DENIED (not owner or member)
        - 404 Not Found: BUSINESS_NOT_FOUND
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")

    result = await GetBusinessUseCase(uow).execute(current_user["user_id"], business_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{business_id}", status_code=status.HTTP_200_OK, response_model=BusinessResponse
)
async def update_business(
    business_id: str,
    request: UpdateBusinessRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Business

    Requires edit access (owner, admin or editor).
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")

    result = await UpdateBusinessUseCase(uow).execute(
        current_user["user_id"], business_uuid, request.name
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{business_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteBusinessResponse,
)
async def delete_business(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Business

    Owner only. Removes members, invitations and access requests with it.

    Raises:
        - 400 Bad Request: INVALID_BUSINESS_ID
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: BUSINESS_NOT_FOUND
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")

    result = await DeleteBusinessUseCase(uow).execute(
        current_user["user_id"], business_uuid
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{business_id}/permissions",
    status_code=status.HTTP_200_OK,
    response_model=UserBusinessPermission,
)
async def get_permissions(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Permissions

    Resolves the caller's capabilities. Strangers and unknown businesses get
    every flag set to false rather than an error.
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")

    result = await GetPermissionsUseCase(uow).execute(
        current_user["user_id"], business_uuid
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
