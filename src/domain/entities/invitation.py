"""
BusinessInvitation Entity

E-mail invitations to join a business.
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import InvitationStatus, MemberRole

INVITATION_TTL = timedelta(days=7)


class BusinessInvitation(SQLModel, table=True):
    """
    BusinessInvitation entity - an offer to join a business at a role.

    Business Rules:
    - Created by an owner/admin, expires 7 days after creation
    - Token is URL-safe, unique and acts as the bearer credential
    - At most one pending invitation per (business_id, email)
    - Expiry is derived from expires_at at read time, never swept. The
      stored status turns expired only when a re-invite replaces the row
    - Kept after accept/decline as an audit record
    """

    __tablename__ = "business_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    business_id: UUID = Field(foreign_key="businesses.id", nullable=False, index=True)
    email: str = Field(max_length=255, nullable=False, index=True)

    role: MemberRole = Field(nullable=False)
    invited_by: UUID = Field(nullable=False)
    token: str = Field(unique=True, index=True, max_length=64)

    status: InvitationStatus = Field(default=InvitationStatus.pending)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_expires_at", "expires_at"),
        Index("idx_invitation_status", "status"),
        Index(
            "uq_invitation_pending_business_email",
            "business_id",
            "email",
            unique=True,
            sqlite_where=text("status = 'pending'"),
            postgresql_where=text("status = 'pending'"),
        ),
    )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or utcnow()) > self.expires_at

    def effective_status(self, now: Optional[datetime] = None) -> InvitationStatus:
        """Stored status with read-time expiry layered on top"""
        if self.is_expired(now):
            return InvitationStatus.expired
        return self.status
