from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.invitations import AcceptInvitationUseCase
from src.domain.base import utcnow
from src.domain.entities import (
    BusinessInvitation,
    BusinessMember,
    InvitationStatus,
    MemberRole,
)


def make_invitation(business, status=InvitationStatus.pending, expires_in=timedelta(days=7)):
    return BusinessInvitation(
        id=uuid4(),
        business_id=business.id,
        email="bob@example.com",
        role=MemberRole.viewer,
        invited_by=business.owner_id,
        token="tok-bob",
        status=status,
        expires_at=utcnow() + expires_in,
    )


@pytest.mark.asyncio
async def test_accept_creates_member_and_transitions(mock_uow, business):
    # Arrange
    bob_id = uuid4()
    invitation = make_invitation(business)
    mock_uow.invitations.get_by_token.return_value = invitation
    mock_uow.businesses.get_by_id.return_value = business

    # Act
    use_case = AcceptInvitationUseCase(mock_uow)
    result = await use_case.execute("tok-bob", bob_id, "BOB@example.com")

    # Assert
    assert result.is_ok()
    assert result.value.status == "accepted"
    assert result.value.role == "viewer"
    assert result.value.business.id == business.id

    member = mock_uow.members.create_if_absent.call_args.args[0]
    assert member.user_id == bob_id
    assert member.role == MemberRole.viewer
    assert member.invited_by == business.owner_id

    mock_uow.invitations.transition_status.assert_called_once_with(
        invitation.id, InvitationStatus.pending, InvitationStatus.accepted
    )
    assert mock_uow.audit_events.create.call_args.args[0].action == "invitation_accepted"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_unknown_token(mock_uow):
    result = await AcceptInvitationUseCase(mock_uow).execute("nope", uuid4(), "a@b.co")

    assert result.error.code == "INVITATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_expired_invitation_is_rejected_without_writes(mock_uow, business):
    mock_uow.invitations.get_by_token.return_value = make_invitation(
        business, expires_in=timedelta(seconds=-1)
    )

    result = await AcceptInvitationUseCase(mock_uow).execute(
        "tok-bob", uuid4(), "bob@example.com"
    )

    assert result.error.code == "INVITATION_EXPIRED"
    mock_uow.members.create_if_absent.assert_not_called()
    mock_uow.invitations.transition_status.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status", [InvitationStatus.accepted, InvitationStatus.declined]
)
async def test_resolved_invitation_is_invalid_transition(mock_uow, business, status):
    mock_uow.invitations.get_by_token.return_value = make_invitation(business, status)

    result = await AcceptInvitationUseCase(mock_uow).execute(
        "tok-bob", uuid4(), "bob@example.com"
    )

    assert result.error.code == "INVALID_STATE_TRANSITION"
    assert status.value in result.error.message


@pytest.mark.asyncio
async def test_email_mismatch(mock_uow, business):
    mock_uow.invitations.get_by_token.return_value = make_invitation(business)

    result = await AcceptInvitationUseCase(mock_uow).execute(
        "tok-bob", uuid4(), "mallory@example.com"
    )

    assert result.error.code == "EMAIL_MISMATCH"
    mock_uow.members.create_if_absent.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_existing_membership_is_kept(mock_uow, business):
    bob_id = uuid4()
    existing = BusinessMember(business_id=business.id, user_id=bob_id, role=MemberRole.admin)
    mock_uow.invitations.get_by_token.return_value = make_invitation(business)
    mock_uow.businesses.get_by_id.return_value = business
    mock_uow.members.get_by_business_and_user.return_value = existing

    result = await AcceptInvitationUseCase(mock_uow).execute(
        "tok-bob", bob_id, "bob@example.com"
    )

    assert result.is_ok()
    assert result.value.role == "admin"
    mock_uow.members.create_if_absent.assert_not_called()


@pytest.mark.asyncio
async def test_lost_race_rolls_back(mock_uow, business):
    mock_uow.invitations.get_by_token.return_value = make_invitation(business)
    mock_uow.businesses.get_by_id.return_value = business
    mock_uow.invitations.transition_status.return_value = False

    result = await AcceptInvitationUseCase(mock_uow).execute(
        "tok-bob", uuid4(), "bob@example.com"
    )

    assert result.error.code == "INVALID_STATE_TRANSITION"
    mock_uow.rollback.assert_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_membership_inserted_concurrently_is_kept(mock_uow, business):
    # Arrange
    bob_id = uuid4()
    concurrent = BusinessMember(
        business_id=business.id, user_id=bob_id, role=MemberRole.editor
    )
    mock_uow.invitations.get_by_token.return_value = make_invitation(business)
    mock_uow.businesses.get_by_id.return_value = business
    mock_uow.members.get_by_business_and_user.side_effect = [None, concurrent]
    mock_uow.members.create_if_absent.side_effect = None
    mock_uow.members.create_if_absent.return_value = None

    # Act
    result = await AcceptInvitationUseCase(mock_uow).execute(
        "tok-bob", bob_id, "bob@example.com"
    )

    # Assert
    assert result.is_ok()
    assert result.value.role == "editor"
    mock_uow.invitations.transition_status.assert_called_once()
    mock_uow.commit.assert_called_once()
