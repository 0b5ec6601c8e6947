"""
Invitation Lifecycle Use Cases

pending -> {accepted, declined, expired}, plus revoke while pending.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .create_invitation_use_case import CreateInvitationUseCase
from .decline_invitation_use_case import DeclineInvitationUseCase
from .dtos import (
    AcceptInvitationResponse,
    BusinessSummary,
    DeclineInvitationResponse,
    InvitationResponse,
    ListInvitationsResponse,
    RevokeInvitationResponse,
)
from .get_invitation_use_case import GetInvitationUseCase
from .list_invitations_use_case import ListInvitationsUseCase
from .revoke_invitation_use_case import RevokeInvitationUseCase

__all__ = [
    "CreateInvitationUseCase",
    "ListInvitationsUseCase",
    "GetInvitationUseCase",
    "AcceptInvitationUseCase",
    "DeclineInvitationUseCase",
    "RevokeInvitationUseCase",
    "InvitationResponse",
    "ListInvitationsResponse",
    "AcceptInvitationResponse",
    "DeclineInvitationResponse",
    "RevokeInvitationResponse",
    "BusinessSummary",
]
