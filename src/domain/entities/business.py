"""
Business Entity

A shared workspace jointly managed by its owner and members.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class Business(SQLModel, table=True):
    """
    Business entity - owned by exactly one user.

    Business Rules:
    - owner_id is immutable; the owner never has a membership row
    - Slug is unique across all businesses
    - Deletion cascades to members, invitations and access requests
    """

    __tablename__ = "businesses"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    slug: str = Field(unique=True, index=True, max_length=255)

    owner_id: UUID = Field(nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_business_owner", "owner_id"),)

    def is_owner(self, user_id: UUID) -> bool:
        return self.owner_id == user_id
