"""
Withdraw Access Request Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent

from .dtos import WithdrawAccessRequestResponse


class WithdrawAccessRequestUseCase:
    """
    Use case for a requester withdrawing their own access request.

    Business Rules:
    - Only the requester can withdraw (PERMISSION_DENIED otherwise)
    - The request row is deleted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, business_id: UUID, request_id: UUID
    ) -> Result[WithdrawAccessRequestResponse]:
        async with self.uow:
            request = await self.uow.access_requests.get_by_id(request_id)
            if request is None or request.business_id != business_id:
                return Return.err(
                    Error("ACCESS_REQUEST_NOT_FOUND", "Access request not found")
                )

            if request.user_id != user_id:
                return Return.err(
                    Error(
                        "PERMISSION_DENIED",
                        "You can only withdraw your own access requests",
                    )
                )

            await self.uow.access_requests.delete(request)
            await self.uow.audit_events.create(
                AuditEvent(
                    business_id=business_id,
                    user_id=user_id,
                    action="access_request_withdrawn",
                    event_metadata={"access_request_id": str(request.id)},
                )
            )
            await self.uow.commit()

            return Return.ok(WithdrawAccessRequestResponse(status="withdrawn"))
