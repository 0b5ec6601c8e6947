"""
BusinessMember Entity

Links a non-owner user to a business with a role.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import MemberRole


class BusinessMember(SQLModel, table=True):
    """
    BusinessMember entity - active participation of a user in a business.

    Business Rules:
    - (business_id, user_id) is unique
    - Created by invitation acceptance or access request approval
    - Removed by leaving, by a team manager, or by business deletion
    """

    __tablename__ = "business_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    business_id: UUID = Field(foreign_key="businesses.id", nullable=False, index=True)
    user_id: UUID = Field(nullable=False, index=True)

    role: MemberRole = Field(nullable=False)
    invited_by: Optional[UUID] = Field(default=None)

    # Timestamps
    joined_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_member_business_user", "business_id", "user_id", unique=True),
        Index("idx_member_role", "role"),
    )
