"""
Member Use Case DTOs (Data Transfer Objects)

Response classes for the member management use cases.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import BusinessMember, UserProfile


class UserSummary(BaseModel):
    """Display data of a user joined into responses"""

    id: UUID
    email: str
    full_name: Optional[str] = None

    @classmethod
    def from_profile(cls, profile: Optional[UserProfile]) -> Optional["UserSummary"]:
        if profile is None:
            return None
        return cls(id=profile.id, email=profile.email, full_name=profile.full_name)


class MemberResponse(BaseModel):
    """A membership row joined with the member's profile"""

    id: UUID
    business_id: UUID
    user_id: UUID
    role: str
    invited_by: Optional[UUID]
    joined_at: datetime
    user: Optional[UserSummary] = None

    @classmethod
    def from_entity(
        cls, member: BusinessMember, profile: Optional[UserProfile] = None
    ) -> "MemberResponse":
        return cls(
            id=member.id,
            business_id=member.business_id,
            user_id=member.user_id,
            role=member.role.value,
            invited_by=member.invited_by,
            joined_at=member.joined_at,
            user=UserSummary.from_profile(profile),
        )


class ListMembersResponse(BaseModel):
    """Members of a business; the owner is reported separately"""

    members: List[MemberResponse]
    owner: Optional[UserSummary]


class UpdateMemberRoleResponse(BaseModel):
    status: str
    member: MemberResponse


class RemoveMemberResponse(BaseModel):
    status: str
