"""
BusinessAccessRequest Entity

User initiated requests to join a business.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import AccessRequestStatus, RequestableRole

MAX_MESSAGE_LENGTH = 500


class BusinessAccessRequest(SQLModel, table=True):
    """
    BusinessAccessRequest entity - a user asking to join a business.

    Business Rules:
    - Any authenticated user may request editor or viewer access
    - At most one pending request per (business_id, user_id)
    - Reviewed only by owner/admin; no expiry
    """

    __tablename__ = "business_access_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    business_id: UUID = Field(foreign_key="businesses.id", nullable=False, index=True)
    user_id: UUID = Field(nullable=False, index=True)

    requested_role: RequestableRole = Field(nullable=False)
    message: Optional[str] = Field(default=None, max_length=MAX_MESSAGE_LENGTH)

    status: AccessRequestStatus = Field(default=AccessRequestStatus.pending)

    reviewed_by: Optional[UUID] = Field(default=None)
    reviewed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_access_request_status", "status"),
        Index(
            "uq_access_request_pending_business_user",
            "business_id",
            "user_id",
            unique=True,
            sqlite_where=text("status = 'pending'"),
            postgresql_where=text("status = 'pending'"),
        ),
    )
