from abc import ABC, abstractmethod

from src.domain.entities import Business, BusinessInvitation


class InvitationNotifier(ABC):
    """Delivers invitation links to invitees - application layer"""

    @abstractmethod
    async def send_invitation(
        self, invitation: BusinessInvitation, business: Business
    ) -> None:
        pass
