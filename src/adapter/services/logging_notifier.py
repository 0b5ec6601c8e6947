"""
Invitation delivery that writes the acceptance link to the application log.

Stands in for an email sender; swap it through the get_notifier dependency.
"""

import logging

from config import ApplicationConfig
from src.app.services.notifier import InvitationNotifier
from src.domain.entities import Business, BusinessInvitation

logger = logging.getLogger(__name__)


class LoggingInvitationNotifier(InvitationNotifier):
    def __init__(self, base_url: str = ApplicationConfig.INVITATION_BASE_URL):
        self.base_url = base_url.rstrip("/")

    def build_link(self, token: str) -> str:
        return f"{self.base_url}/{token}"

    async def send_invitation(
        self, invitation: BusinessInvitation, business: Business
    ) -> None:
        # Only a token prefix is logged
        logger.info(
            "Invitation to %s for business '%s' as %s: %s...",
            invitation.email,
            business.name,
            invitation.role.value,
            self.build_link(invitation.token[:8]),
        )
