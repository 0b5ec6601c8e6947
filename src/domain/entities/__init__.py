"""
Team Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AccessRequestStatus,
    BusinessRole,
    Capability,
    InvitationStatus,
    MemberRole,
    RequestableRole,
    ReviewAction,
)

# Export all entities
from .user import UserProfile
from .business import Business
from .member import BusinessMember
from .invitation import INVITATION_TTL, BusinessInvitation
from .access_request import MAX_MESSAGE_LENGTH, BusinessAccessRequest
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "AccessRequestStatus",
    "BusinessRole",
    "Capability",
    "InvitationStatus",
    "MemberRole",
    "RequestableRole",
    "ReviewAction",
    # Entities
    "UserProfile",
    "Business",
    "BusinessMember",
    "BusinessInvitation",
    "BusinessAccessRequest",
    "AuditEvent",
    # Constants
    "INVITATION_TTL",
    "MAX_MESSAGE_LENGTH",
]
