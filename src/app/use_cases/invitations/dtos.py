"""
Invitation Use Case DTOs (Data Transfer Objects)

Response classes for the invitation lifecycle use cases.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.use_cases.members.dtos import UserSummary
from src.domain.entities import Business, BusinessInvitation, UserProfile


class BusinessSummary(BaseModel):
    id: UUID
    name: str
    slug: str

    @classmethod
    def from_entity(cls, business: Optional[Business]) -> Optional["BusinessSummary"]:
        if business is None:
            return None
        return cls(id=business.id, name=business.name, slug=business.slug)


class InvitationResponse(BaseModel):
    """
    Invitation details.

    ``status`` is the effective status: past ``expires_at`` it reads
    ``expired`` whatever was stored. ``token`` is only included for callers
    allowed to manage the team.
    """

    id: UUID
    business_id: UUID
    email: str
    role: str
    invited_by: UUID
    status: str
    is_expired: bool
    expires_at: datetime
    created_at: datetime
    updated_at: datetime
    token: Optional[str] = None
    inviter: Optional[UserSummary] = None
    business: Optional[BusinessSummary] = None

    @classmethod
    def from_entity(
        cls,
        invitation: BusinessInvitation,
        now: datetime,
        include_token: bool = False,
        inviter: Optional[UserProfile] = None,
        business: Optional[Business] = None,
    ) -> "InvitationResponse":
        return cls(
            id=invitation.id,
            business_id=invitation.business_id,
            email=invitation.email,
            role=invitation.role.value,
            invited_by=invitation.invited_by,
            status=invitation.effective_status(now).value,
            is_expired=invitation.is_expired(now),
            expires_at=invitation.expires_at,
            created_at=invitation.created_at,
            updated_at=invitation.updated_at,
            token=invitation.token if include_token else None,
            inviter=UserSummary.from_profile(inviter),
            business=BusinessSummary.from_entity(business),
        )


class ListInvitationsResponse(BaseModel):
    invitations: List[InvitationResponse]


class AcceptInvitationResponse(BaseModel):
    status: str
    business: BusinessSummary
    role: str


class DeclineInvitationResponse(BaseModel):
    status: str


class RevokeInvitationResponse(BaseModel):
    status: str
