import logging
from datetime import timedelta
from uuid import uuid4

import pytest

from src.adapter.services.logging_notifier import LoggingInvitationNotifier
from src.domain.base import utcnow
from src.domain.entities import BusinessInvitation, MemberRole


@pytest.mark.asyncio
async def test_logs_link_without_full_token(caplog, business):
    token = "abcdefgh" + "z" * 35
    invitation = BusinessInvitation(
        business_id=business.id,
        email="bob@example.com",
        role=MemberRole.viewer,
        invited_by=uuid4(),
        token=token,
        expires_at=utcnow() + timedelta(days=7),
    )
    notifier = LoggingInvitationNotifier(base_url="https://app.test/invitations/")

    with caplog.at_level(logging.INFO):
        await notifier.send_invitation(invitation, business)

    assert "https://app.test/invitations/abcdefgh..." in caplog.text
    assert token not in caplog.text


def test_build_link():
    notifier = LoggingInvitationNotifier(base_url="https://app.test/invitations")

    assert notifier.build_link("tok") == "https://app.test/invitations/tok"
