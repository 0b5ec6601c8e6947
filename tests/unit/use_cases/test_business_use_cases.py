from uuid import uuid4

import pytest

from src.app.errors import DuplicateRecordError
from src.app.use_cases.audit import GetAuditEventsUseCase
from src.app.use_cases.businesses import (
    CreateBusinessUseCase,
    DeleteBusinessUseCase,
    GetBusinessUseCase,
    GetPermissionsUseCase,
    ListBusinessesUseCase,
    UpdateBusinessUseCase,
)
from src.domain.entities import AuditEvent, BusinessMember, MemberRole, UserProfile


@pytest.mark.asyncio
async def test_create_business_makes_caller_owner(mock_uow, owner_id):
    result = await CreateBusinessUseCase(mock_uow).execute(
        owner_id, "alice@example.com", "Acme Bakery"
    )

    assert result.is_ok()
    assert result.value.slug == "acme-bakery"
    assert result.value.owner_id == owner_id
    assert result.value.permissions.can_delete is True
    mock_uow.members.create_if_absent.assert_not_called()
    assert mock_uow.audit_events.create.call_args.args[0].action == "business_created"


@pytest.mark.asyncio
async def test_create_business_blank_name(mock_uow, owner_id):
    result = await CreateBusinessUseCase(mock_uow).execute(owner_id, "a@b.co", "   ")

    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_create_business_slug_taken(mock_uow, owner_id, business):
    mock_uow.businesses.get_by_slug.return_value = business

    result = await CreateBusinessUseCase(mock_uow).execute(
        owner_id, "a@b.co", "Other", slug="acme-bakery"
    )

    assert result.error.code == "SLUG_TAKEN"


@pytest.mark.asyncio
async def test_create_business_slug_race(mock_uow, owner_id):
    mock_uow.businesses.create.side_effect = DuplicateRecordError("unique")

    result = await CreateBusinessUseCase(mock_uow).execute(owner_id, "a@b.co", "Acme")

    assert result.error.code == "SLUG_TAKEN"


@pytest.mark.asyncio
async def test_list_businesses_carries_permissions(mock_uow, business, owner_id):
    mock_uow.businesses.list_for_user.return_value = [business]

    result = await ListBusinessesUseCase(mock_uow).execute(owner_id)

    assert [b.permissions.role.value for b in result.value.businesses] == ["owner"]


@pytest.mark.asyncio
async def test_get_business_for_stranger_is_denied(mock_uow, business):
    mock_uow.businesses.get_by_id.return_value = business

    result = await GetBusinessUseCase(mock_uow).execute(uuid4(), business.id)

    assert result.error.code == "PERMISSION_DENIED"


@pytest.mark.asyncio
async def test_editor_can_rename(mock_uow, business):
    editor_id = uuid4()
    mock_uow.businesses.get_by_id.return_value = business
    mock_uow.members.get_by_business_and_user.return_value = BusinessMember(
        business_id=business.id, user_id=editor_id, role=MemberRole.editor
    )

    result = await UpdateBusinessUseCase(mock_uow).execute(
        editor_id, business.id, "Acme Bakery & Cafe"
    )

    assert result.value.name == "Acme Bakery & Cafe"
    assert result.value.slug == "acme-bakery"


@pytest.mark.asyncio
async def test_viewer_cannot_rename(mock_uow, business):
    viewer_id = uuid4()
    mock_uow.businesses.get_by_id.return_value = business
    mock_uow.members.get_by_business_and_user.return_value = BusinessMember(
        business_id=business.id, user_id=viewer_id, role=MemberRole.viewer
    )

    result = await UpdateBusinessUseCase(mock_uow).execute(viewer_id, business.id, "X")

    assert result.error.code == "PERMISSION_DENIED"
    mock_uow.businesses.update.assert_not_called()


@pytest.mark.asyncio
async def test_only_owner_deletes(mock_uow, business):
    admin_id = uuid4()
    mock_uow.businesses.get_by_id.return_value = business
    mock_uow.members.get_by_business_and_user.return_value = BusinessMember(
        business_id=business.id, user_id=admin_id, role=MemberRole.admin
    )

    result = await DeleteBusinessUseCase(mock_uow).execute(admin_id, business.id)

    assert result.error.code == "PERMISSION_DENIED"
    mock_uow.businesses.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_cascades(mock_uow, business, owner_id):
    mock_uow.businesses.get_by_id.return_value = business
    mock_uow.members.delete_by_business_id.return_value = 2
    mock_uow.invitations.delete_by_business_id.return_value = 3
    mock_uow.access_requests.delete_by_business_id.return_value = 1

    result = await DeleteBusinessUseCase(mock_uow).execute(owner_id, business.id)

    assert result.is_ok()
    assert result.value.members_removed == 2
    assert result.value.invitations_removed == 3
    assert result.value.access_requests_removed == 1
    mock_uow.businesses.delete.assert_called_once_with(business)
    assert mock_uow.audit_events.create.call_args.args[0].action == "business_deleted"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_permissions_never_fail(mock_uow):
    result = await GetPermissionsUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.is_ok()
    assert result.value.can_view is False


@pytest.mark.asyncio
async def test_audit_events_include_actor_email(mock_uow, business, owner_id):
    mock_uow.businesses.get_by_id.return_value = business
    mock_uow.audit_events.get_by_business_paginated.return_value = (
        [AuditEvent(business_id=business.id, user_id=owner_id, action="invite_sent")],
        "next",
    )
    mock_uow.users.get_by_ids.return_value = [
        UserProfile(id=owner_id, email="alice@example.com")
    ]

    result = await GetAuditEventsUseCase(mock_uow).execute(owner_id, business.id)

    assert result.value.next_cursor == "next"
    assert result.value.events[0].user_email == "alice@example.com"
    assert result.value.events[0].metadata == {}


@pytest.mark.asyncio
async def test_audit_events_require_manage_team(mock_uow, business):
    mock_uow.businesses.get_by_id.return_value = business

    result = await GetAuditEventsUseCase(mock_uow).execute(uuid4(), business.id)

    assert result.error.code == "PERMISSION_DENIED"
