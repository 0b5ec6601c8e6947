"""
Get Audit Events Use Case

Retrieves team management audit events for a business with pagination.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.services.permission_resolver import PermissionResolver
from src.app.services.unit_of_work import UnitOfWork


class AuditEventResponse(BaseModel):
    """Single audit event in response"""

    action: str
    user_id: Optional[UUID]
    user_email: Optional[str]
    timestamp: datetime
    metadata: Dict[str, Any]


class AuditEventsResponse(BaseModel):
    events: List[AuditEventResponse]
    next_cursor: Optional[str]


class GetAuditEventsUseCase:
    """
    Use case for retrieving audit events for a business.

    Business Rules:
    - Caller must hold manage_team (owner or admin)
    - Results ordered by newest first
    - Supports cursor-based pagination
    - Each event includes action, actor email, timestamp, metadata
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        business_id: UUID,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[AuditEventsResponse]:
        """
        Execute get audit events use case.

        Args:
            user_id: Caller user ID
            business_id: Business ID
            limit: Maximum number of events to return
            cursor: Pagination cursor (optional)

        Returns:
            Result with events list and next_cursor, or Error
        """
        async with self.uow:
            business = await self.uow.businesses.get_by_id(business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            permission = await PermissionResolver(self.uow).resolve_for(business, user_id)
            if not permission.can_manage_team:
                return Return.err(
                    Error(
                        "PERMISSION_DENIED",
                        "You do not have permission to view audit events",
                    )
                )

            events, next_cursor = await self.uow.audit_events.get_by_business_paginated(
                business_id, limit=limit, cursor=cursor
            )

            actor_ids = list({event.user_id for event in events if event.user_id})
            emails = {
                profile.id: profile.email
                for profile in await self.uow.users.get_by_ids(actor_ids)
            }

            return Return.ok(
                AuditEventsResponse(
                    events=[
                        AuditEventResponse(
                            action=event.action,
                            user_id=event.user_id,
                            user_email=emails.get(event.user_id),
                            timestamp=event.created_at,
                            metadata=event.event_metadata or {},
                        )
                        for event in events
                    ],
                    next_cursor=next_cursor,
                )
            )
