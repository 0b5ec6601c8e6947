"""
Create Business Use Case
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import DuplicateRecordError
from src.app.services.membership_service import MembershipService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import slugify
from src.domain.entities import AuditEvent, Business, BusinessRole
from src.domain.roles import UserBusinessPermission

from .dtos import BusinessResponse


class CreateBusinessUseCase:
    """
    Use case for creating a business owned by the caller.

    Business Rules:
    - Name must not be blank
    - Slug defaults to the slugified name and must be unique (SLUG_TAKEN)
    - The caller becomes the immutable owner; no membership row is created
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        owner_id: UUID,
        owner_email: str,
        name: str,
        slug: Optional[str] = None,
    ) -> Result[BusinessResponse]:
        name = name.strip()
        if not name:
            return Return.err(Error("VALIDATION_ERROR", "Business name is required"))

        business_slug = slugify(slug or name)

        async with self.uow:
            if await self.uow.businesses.get_by_slug(business_slug) is not None:
                return Return.err(
                    Error("SLUG_TAKEN", f"The slug '{business_slug}' is already in use")
                )

            try:
                await MembershipService(self.uow).ensure_profile(owner_id, owner_email)
                business = await self.uow.businesses.create(
                    Business(name=name, slug=business_slug, owner_id=owner_id)
                )
                await self.uow.audit_events.create(
                    AuditEvent(
                        business_id=business.id,
                        user_id=owner_id,
                        action="business_created",
                        event_metadata={"name": name, "slug": business_slug},
                    )
                )
                await self.uow.commit()
            except DuplicateRecordError:
                await self.uow.rollback()
                return Return.err(
                    Error("SLUG_TAKEN", f"The slug '{business_slug}' is already in use")
                )

            return Return.ok(
                BusinessResponse.from_entity(
                    business,
                    UserBusinessPermission.from_role(
                        business.id, owner_id, BusinessRole.owner
                    ),
                )
            )
