"""
UserProfile Entity

Display data for a user identity issued by the external identity provider.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utcnow


class UserProfile(SQLModel, table=True):
    """
    UserProfile entity - who a user id belongs to, for display only.

    Business Rules:
    - id is the identity provider's user id, never generated here
    - Email is unique and stored lower-cased
    - Created just in time from a verified caller identity
    """

    __tablename__ = "users"

    id: UUID = Field(primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    full_name: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
