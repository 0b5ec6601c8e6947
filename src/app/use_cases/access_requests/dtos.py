"""
Access Request Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.use_cases.members.dtos import UserSummary
from src.domain.entities import BusinessAccessRequest, UserProfile


class AccessRequestResponse(BaseModel):
    id: UUID
    business_id: UUID
    user_id: UUID
    requested_role: str
    message: Optional[str]
    status: str
    reviewed_by: Optional[UUID]
    reviewed_at: Optional[datetime]
    created_at: datetime
    user: Optional[UserSummary] = None

    @classmethod
    def from_entity(
        cls, request: BusinessAccessRequest, profile: Optional[UserProfile] = None
    ) -> "AccessRequestResponse":
        return cls(
            id=request.id,
            business_id=request.business_id,
            user_id=request.user_id,
            requested_role=request.requested_role.value,
            message=request.message,
            status=request.status.value,
            reviewed_by=request.reviewed_by,
            reviewed_at=request.reviewed_at,
            created_at=request.created_at,
            user=UserSummary.from_profile(profile),
        )


class ListAccessRequestsResponse(BaseModel):
    access_requests: List[AccessRequestResponse]


class ReviewAccessRequestResponse(BaseModel):
    status: str


class WithdrawAccessRequestResponse(BaseModel):
    status: str
