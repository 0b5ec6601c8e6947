from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.access_request_repository import AccessRequestRepository
from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.business_repository import BusinessRepository
from src.adapter.repositories.invitation_repository import InvitationRepository
from src.adapter.repositories.member_repository import MemberRepository
from src.adapter.repositories.store_errors import translate_store_errors
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.users = UserRepository(self.session)
        self.businesses = BusinessRepository(self.session)
        self.members = MemberRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.access_requests = AccessRequestRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed by the use case is discarded
        await self.rollback()

    async def commit(self):
        async with translate_store_errors():
            await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
