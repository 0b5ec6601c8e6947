import base64
import binascii
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.store_errors import translate_store_errors
from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.domain.entities import AuditEvent


class AuditEventRepository(IAuditEventRepository):
    """AuditEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        async with translate_store_errors():
            self.session.add(audit_event)
            await self.session.flush()
            await self.session.refresh(audit_event)
        return audit_event

    async def get_by_business_paginated(
        self, business_id: UUID, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[AuditEvent], Optional[str]]:
        """
        Get audit events for a business with cursor-based pagination.

        Cursor format: base64-encoded "<ISO created_at>|<id>" of the last event
        returned. Ordering is (created_at, id) descending so events sharing a
        timestamp are neither skipped nor repeated across pages.
        """
        stmt = select(AuditEvent).where(AuditEvent.business_id == business_id)

        if cursor:
            try:
                cursor_str = base64.b64decode(cursor).decode("utf-8")
                timestamp_str, id_str = cursor_str.split("|", 1)
                cursor_timestamp = datetime.fromisoformat(timestamp_str)
                cursor_id = UUID(id_str)
                stmt = stmt.where(
                    or_(
                        AuditEvent.created_at < cursor_timestamp,
                        and_(
                            AuditEvent.created_at == cursor_timestamp,
                            AuditEvent.id < cursor_id,
                        ),
                    )
                )
            except (ValueError, TypeError, binascii.Error):
                # Invalid cursor, start from the newest event
                pass

        stmt = stmt.order_by(AuditEvent.created_at.desc(), AuditEvent.id.desc()).limit(
            limit + 1
        )

        async with translate_store_errors():
            result = await self.session.exec(stmt)
            events = list(result.all())

        has_more = len(events) > limit
        if has_more:
            events = events[:limit]

        next_cursor = None
        if has_more and events:
            last = events[-1]
            cursor_str = f"{last.created_at.isoformat()}|{last.id}"
            next_cursor = base64.b64encode(cursor_str.encode("utf-8")).decode("utf-8")

        return events, next_cursor
