"""
Access Request API Routes

Users ask to join a business; owners and admins approve or reject.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.ids import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access_requests import (
    AccessRequestResponse,
    CreateAccessRequestUseCase,
    ListAccessRequestsResponse,
    ListAccessRequestsUseCase,
    ReviewAccessRequestResponse,
    ReviewAccessRequestUseCase,
    WithdrawAccessRequestResponse,
    WithdrawAccessRequestUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import ReviewAction

router = APIRouter(
    prefix="/businesses/{business_id}/access-requests", tags=["Access Requests"]
)


class CreateAccessRequestRequest(BaseModel):
    requested_role: str = Field(..., description="Requested role: editor or viewer")
    message: Optional[str] = Field(None, description="Optional note to the reviewers")


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=AccessRequestResponse
)
async def create_access_request(
    business_id: str,
    request: CreateAccessRequestRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Request Access

    Raises:
        - 400 Bad Request: INVALID_ROLE, VALIDATION_ERROR (message too long)
        - 404 Not Found: BUSINESS_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER, DUPLICATE_ACCESS_REQUEST
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")

    use_case = CreateAccessRequestUseCase(uow)
    result = await use_case.execute(
        user_id=current_user["user_id"],
        user_email=current_user["email"],
        business_id=business_uuid,
        requested_role=request.requested_role,
        message=request.message,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=ListAccessRequestsResponse)
async def list_access_requests(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Pending requests of a business; requires owner or admin"""
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")

    result = await ListAccessRequestsUseCase(uow).execute(
        current_user["user_id"], business_uuid
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


async def _review(
    business_id: str, request_id: str, action: ReviewAction, current_user: dict, uow
):
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")
    request_uuid = parse_uuid(request_id, "INVALID_REQUEST_ID", "access request")

    result = await ReviewAccessRequestUseCase(uow).execute(
        current_user["user_id"], business_uuid, request_uuid, action.value
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{request_id}/approve",
    status_code=status.HTTP_200_OK,
    response_model=ReviewAccessRequestResponse,
)
async def approve_access_request(
    business_id: str,
    request_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Approve Access Request

    Creates the membership at the requested role.

    Raises:
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: BUSINESS_NOT_FOUND, ACCESS_REQUEST_NOT_FOUND
        - 409 Conflict: INVALID_STATE_TRANSITION (already reviewed)
    """
    return await _review(business_id, request_id, ReviewAction.approve, current_user, uow)


@router.post(
    "/{request_id}/reject",
    status_code=status.HTTP_200_OK,
    response_model=ReviewAccessRequestResponse,
)
async def reject_access_request(
    business_id: str,
    request_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Reject Access Request"""
    return await _review(business_id, request_id, ReviewAction.reject, current_user, uow)


@router.delete(
    "/{request_id}",
    status_code=status.HTTP_200_OK,
    response_model=WithdrawAccessRequestResponse,
)
async def withdraw_access_request(
    business_id: str,
    request_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Withdraw Access Request; only the requester may withdraw"""
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")
    request_uuid = parse_uuid(request_id, "INVALID_REQUEST_ID", "access request")

    result = await WithdrawAccessRequestUseCase(uow).execute(
        current_user["user_id"], business_uuid, request_uuid
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
