"""
Role Model

The capability matrix for business roles. Pure data: every permission
decision in the service is a lookup into CAPABILITY_MATRIX.
"""

from typing import FrozenSet, Optional
from uuid import UUID

from pydantic import BaseModel

from .entities.enums import BusinessRole, Capability

CAPABILITY_MATRIX: dict[BusinessRole, FrozenSet[Capability]] = {
    BusinessRole.owner: frozenset(
        {Capability.view, Capability.edit, Capability.manage_team, Capability.delete}
    ),
    BusinessRole.admin: frozenset(
        {Capability.view, Capability.edit, Capability.manage_team}
    ),
    BusinessRole.editor: frozenset({Capability.view, Capability.edit}),
    BusinessRole.viewer: frozenset({Capability.view}),
}

NO_CAPABILITIES: FrozenSet[Capability] = frozenset()


def capabilities_for(role: Optional[BusinessRole]) -> FrozenSet[Capability]:
    """Capabilities granted by a role; None means not a member"""
    if role is None:
        return NO_CAPABILITIES
    return CAPABILITY_MATRIX[role]

def has_capability(role: Optional[BusinessRole], capability: Capability) -> bool:
    return capability in capabilities_for(role)

class UserBusinessPermission(BaseModel):
    """Resolved capability set of a user on a business"""

    business_id: UUID
    user_id: UUID
    role: BusinessRole
    can_view: bool
    can_edit: bool
    can_manage_team: bool
    can_delete: bool

    @classmethod
    def from_role(
        cls, business_id: UUID, user_id: UUID, role: Optional[BusinessRole]
    ) -> "UserBusinessPermission":
        """
        Build the permission row for a role.

        Non-members (role=None) are reported as viewer shaped with every flag
        false, so callers can render them without special casing.
        """
        granted = capabilities_for(role)
        return cls(
            business_id=business_id,
            user_id=user_id,
            role=role or BusinessRole.viewer,
            can_view=Capability.view in granted,
            can_edit=Capability.edit in granted,
            can_manage_team=Capability.manage_team in granted,
            can_delete=Capability.delete in granted,
        )

    def allows(self, capability: Capability) -> bool:
        return {
            Capability.view: self.can_view,
            Capability.edit: self.can_edit,
            Capability.manage_team: self.can_manage_team,
            Capability.delete: self.can_delete,
        }[capability]
