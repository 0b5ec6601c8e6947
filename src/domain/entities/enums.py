"""
Team Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class BusinessRole(str, Enum):
    """Effective role of a user within a business, owner included"""

    owner = "owner"
    admin = "admin"
    editor = "editor"
    viewer = "viewer"


class MemberRole(str, Enum):
    """Role stored on a membership row (the owner is never a member row)"""

    admin = "admin"
    editor = "editor"
    viewer = "viewer"


class RequestableRole(str, Enum):
    """Roles a user may ask for through an access request"""

    editor = "editor"
    viewer = "viewer"


class Capability(str, Enum):
    view = "view"
    edit = "edit"
    manage_team = "manage_team"
    delete = "delete"


class InvitationStatus(str, Enum):
    """Invitation status"""

    pending = "pending"
    accepted = "accepted"
    declined = "declined"
    expired = "expired"


class AccessRequestStatus(str, Enum):
    """Access request status"""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class ReviewAction(str, Enum):
    approve = "approve"
    reject = "reject"
