from abc import ABC, abstractmethod

from src.app.repositories.access_request_repository import IAccessRequestRepository
from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.business_repository import IBusinessRepository
from src.app.repositories.invitation_repository import IInvitationRepository
from src.app.repositories.member_repository import IMemberRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    businesses: IBusinessRepository
    members: IMemberRepository
    invitations: IInvitationRepository
    access_requests: IAccessRequestRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
