"""
Invitation API Routes

Business-scoped management (create, list, revoke) and the token-addressed
endpoints used by the invitee (view, accept, decline).
"""

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.api.utils.ids import parse_uuid
from src.app.services.notifier import InvitationNotifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CreateInvitationUseCase,
    DeclineInvitationResponse,
    DeclineInvitationUseCase,
    GetInvitationUseCase,
    InvitationResponse,
    ListInvitationsResponse,
    ListInvitationsUseCase,
    RevokeInvitationResponse,
    RevokeInvitationUseCase,
)
from src.depends import get_current_user, get_notifier, get_unit_of_work

router = APIRouter(tags=["Invitations"])


class CreateInvitationRequest(BaseModel):
    """
    Create invitation HTTP request payload

    Validates incoming request for inviting a user to a business.
    """

    email: EmailStr = Field(..., description="Email address of the invitee")
    role: str = Field(..., description="Role to grant: admin, editor or viewer")


@router.post(
    "/businesses/{business_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=InvitationResponse,
    response_model_exclude_none=True,
)
async def create_invitation(
    business_id: str,
    request: CreateInvitationRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: InvitationNotifier = Depends(get_notifier),
):
    """
    Create Invitation

    Raises:
        - 400 Bad Request: INVALID_ROLE, VALIDATION_ERROR, INVALID_BUSINESS_ID
        - 401 Unauthorized: Missing or invalid token
        - 403 Forbidden: PERMISSION_DENIED (requires owner or admin)
        - 404 Not Found: BUSINESS_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER, DUPLICATE_INVITATION
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")

    use_case = CreateInvitationUseCase(uow, notifier)
    result = await use_case.execute(
        inviter_user_id=current_user["user_id"],
        business_id=business_uuid,
        email=request.email,
        role=request.role,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/businesses/{business_id}/invitations",
    status_code=status.HTTP_200_OK,
    response_model=ListInvitationsResponse,
)
async def list_invitations(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List every invitation of a business, newest first"""
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")

    result = await ListInvitationsUseCase(uow).execute(
        current_user["user_id"], business_uuid
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/businesses/{business_id}/invitations/{invitation_id}",
    status_code=status.HTTP_200_OK,
    response_model=RevokeInvitationResponse,
)
async def revoke_invitation(
    business_id: str,
    invitation_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke Invitation

    Deletes a pending invitation; already resolved invitations are left as
    they are.

    Raises:
        - 400 Bad Request: INVALID_BUSINESS_ID, INVALID_INVITATION_ID
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: BUSINESS_NOT_FOUND, INVITATION_NOT_FOUND
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")
    invitation_uuid = parse_uuid(invitation_id, "INVALID_INVITATION_ID", "invitation")

    result = await RevokeInvitationUseCase(uow).execute(
        current_user["user_id"], business_uuid, invitation_uuid
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/invitations/{token}",
    status_code=status.HTTP_200_OK,
    response_model=InvitationResponse,
    response_model_exclude_none=True,
)
async def get_invitation(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Invitation (public)

    Holding the token is the authorization. Expired invitations are still
    returned, with status "expired".
    """
    result = await GetInvitationUseCase(uow).execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/invitations/{token}/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInvitationResponse,
)
async def accept_invitation(
    token: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation

    The caller's verified email must match the invited email.

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 403 Forbidden: EMAIL_MISMATCH
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVALID_STATE_TRANSITION
        - 410 Gone: INVITATION_EXPIRED
    """
    use_case = AcceptInvitationUseCase(uow)
    result = await use_case.execute(
        token, current_user["user_id"], current_user["email"]
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/invitations/{token}/decline",
    status_code=status.HTTP_200_OK,
    response_model=DeclineInvitationResponse,
)
async def decline_invitation(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Decline Invitation (public); allowed even after expiry"""
    result = await DeclineInvitationUseCase(uow).execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
