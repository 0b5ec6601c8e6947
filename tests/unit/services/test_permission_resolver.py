from uuid import uuid4

import pytest

from src.app.services.membership_service import MembershipService
from src.app.services.permission_resolver import PermissionResolver
from src.domain.entities import BusinessMember, BusinessRole, MemberRole, UserProfile


@pytest.mark.asyncio
async def test_owner_resolves_to_owner_without_member_lookup(mock_uow, business, owner_id):
    resolver = PermissionResolver(mock_uow)

    permission = await resolver.resolve_for(business, owner_id)

    assert permission.role == BusinessRole.owner
    assert permission.can_delete is True
    mock_uow.members.get_by_business_and_user.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("member_role", list(MemberRole))
async def test_member_resolves_to_member_role(mock_uow, business, member_role):
    user_id = uuid4()
    mock_uow.members.get_by_business_and_user.return_value = BusinessMember(
        business_id=business.id, user_id=user_id, role=member_role
    )

    permission = await PermissionResolver(mock_uow).resolve_for(business, user_id)

    assert permission.role.value == member_role.value
    assert permission.can_view is True
    assert permission.can_delete is False


@pytest.mark.asyncio
async def test_stranger_gets_all_false(mock_uow, business):
    permission = await PermissionResolver(mock_uow).resolve_for(business, uuid4())

    assert permission.can_view is False
    assert permission.can_manage_team is False


@pytest.mark.asyncio
async def test_unknown_business_resolves_all_false(mock_uow):
    business_id = uuid4()

    permission = await PermissionResolver(mock_uow).resolve(uuid4(), business_id)

    assert permission.business_id == business_id
    assert permission.can_view is False


@pytest.mark.asyncio
async def test_ensure_member_skips_owner(mock_uow, business, owner_id):
    member = await MembershipService(mock_uow).ensure_member(
        business, owner_id, MemberRole.admin, None
    )

    assert member is None
    mock_uow.members.create_if_absent.assert_not_called()


@pytest.mark.asyncio
async def test_ensure_member_keeps_existing_membership(mock_uow, business):
    existing = BusinessMember(
        business_id=business.id, user_id=uuid4(), role=MemberRole.admin
    )
    mock_uow.members.get_by_business_and_user.return_value = existing

    member = await MembershipService(mock_uow).ensure_member(
        business, existing.user_id, MemberRole.viewer, uuid4()
    )

    assert member is existing
    assert member.role == MemberRole.admin
    mock_uow.members.create_if_absent.assert_not_called()


@pytest.mark.asyncio
async def test_ensure_profile_creates_lowercased_profile(mock_uow):
    user_id = uuid4()

    profile = await MembershipService(mock_uow).ensure_profile(user_id, "Bob@Example.COM")

    assert profile.id == user_id
    assert profile.email == "bob@example.com"


@pytest.mark.asyncio
async def test_ensure_profile_returns_existing(mock_uow):
    existing = UserProfile(id=uuid4(), email="bob@example.com")
    mock_uow.users.get_by_id.return_value = existing

    profile = await MembershipService(mock_uow).ensure_profile(existing.id, "x@y.z")

    assert profile is existing
    mock_uow.users.create.assert_not_called()


@pytest.mark.asyncio
async def test_ensure_member_returns_concurrently_inserted_membership(mock_uow, business):
    user_id = uuid4()
    winner = BusinessMember(business_id=business.id, user_id=user_id, role=MemberRole.editor)
    mock_uow.members.get_by_business_and_user.side_effect = [None, winner]
    mock_uow.members.create_if_absent.side_effect = None
    mock_uow.members.create_if_absent.return_value = None

    member = await MembershipService(mock_uow).ensure_member(
        business, user_id, MemberRole.viewer, uuid4()
    )

    assert member is winner
    assert member.role == MemberRole.editor
