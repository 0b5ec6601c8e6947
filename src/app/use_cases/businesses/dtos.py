"""
Business Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import Business
from src.domain.roles import UserBusinessPermission


class BusinessResponse(BaseModel):
    """A business plus the caller's resolved permissions on it"""

    id: UUID
    name: str
    slug: str
    owner_id: UUID
    created_at: datetime
    updated_at: datetime
    permissions: Optional[UserBusinessPermission] = None

    @classmethod
    def from_entity(
        cls, business: Business, permissions: Optional[UserBusinessPermission] = None
    ) -> "BusinessResponse":
        return cls(
            id=business.id,
            name=business.name,
            slug=business.slug,
            owner_id=business.owner_id,
            created_at=business.created_at,
            updated_at=business.updated_at,
            permissions=permissions,
        )


class ListBusinessesResponse(BaseModel):
    businesses: List[BusinessResponse]


class DeleteBusinessResponse(BaseModel):
    status: str
    members_removed: int
    invitations_removed: int
    access_requests_removed: int
