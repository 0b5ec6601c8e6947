"""
Audit API Routes

Handles audit event retrieval endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.api.utils.ids import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import AuditEventsResponse, GetAuditEventsUseCase
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/businesses", tags=["Audit"])


@router.get(
    "/{business_id}/audit-events",
    status_code=status.HTTP_200_OK,
    response_model=AuditEventsResponse,
)
async def get_audit_events(
    business_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of events to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
):
    """
    Get Team Audit Events

    Returns team management logs for the business.
    Only accessible by the owner and admins.

    Query Parameters:
        - limit: Maximum number of events to return (1-100, default 50)
        - cursor: Pagination cursor for fetching next page

    Returns:
        - events: List of audit events ordered by newest first
        - next_cursor: Cursor for next page (null if no more events)

    Raises:
        - 400 Bad Request: INVALID_BUSINESS_ID
        - 401 Unauthorized: Missing or invalid token
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: BUSINESS_NOT_FOUND
    """
    business_uuid = parse_uuid(business_id, "INVALID_BUSINESS_ID", "business")

    use_case = GetAuditEventsUseCase(uow)
    result = await use_case.execute(
        user_id=current_user["user_id"],
        business_id=business_uuid,
        limit=limit,
        cursor=cursor,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
