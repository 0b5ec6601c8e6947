from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy import update

from src.domain.base import utcnow
from src.domain.entities import BusinessInvitation


async def invite(client, business_id, owner, email, role):
    return await client.post(
        f"/businesses/{business_id}/invitations",
        json={"email": email, "role": role},
        headers=owner.headers,
    )


async def permissions(client, business_id, identity):
    response = await client.get(
        f"/businesses/{business_id}/permissions", headers=identity.headers
    )
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_bob_accepts_is_promoted_and_leaves(client: AsyncClient, business_id, alice, bob):
    """
    Given alice owns a business
    When she invites bob as viewer and bob accepts
    Then bob can view but not edit, until alice promotes him to editor
    And after leaving bob has no capabilities left
    """
    invite_response = await invite(client, business_id, alice, "bob@example.com", "viewer")
    assert invite_response.status_code == 201
    token = invite_response.json()["token"]

    accept_response = await client.post(f"/invitations/{token}/accept", headers=bob.headers)
    assert accept_response.status_code == 200
    assert accept_response.json()["role"] == "viewer"
    assert accept_response.json()["business"]["id"] == business_id

    bob_permissions = await permissions(client, business_id, bob)
    assert bob_permissions["role"] == "viewer"
    assert bob_permissions["can_view"] is True
    assert bob_permissions["can_edit"] is False

    promote_response = await client.patch(
        f"/businesses/{business_id}/members/{bob.user_id}",
        json={"role": "editor"},
        headers=alice.headers,
    )
    assert promote_response.status_code == 200
    assert promote_response.json()["member"]["role"] == "editor"

    bob_permissions = await permissions(client, business_id, bob)
    assert bob_permissions["can_edit"] is True
    assert bob_permissions["can_manage_team"] is False

    leave_response = await client.delete(
        f"/businesses/{business_id}/members/{bob.user_id}", headers=bob.headers
    )
    assert leave_response.status_code == 200
    assert leave_response.json()["status"] == "left"

    bob_permissions = await permissions(client, business_id, bob)
    assert bob_permissions["can_view"] is False

    # The invitation is kept as a record of the acceptance
    get_response = await client.get(f"/invitations/{token}")
    assert get_response.json()["status"] == "accepted"


@pytest.mark.asyncio
async def test_duplicate_invitation_for_carol(client: AsyncClient, business_id, alice):
    first = await invite(client, business_id, alice, "carol@example.com", "editor")
    assert first.status_code == 201

    second = await invite(client, business_id, alice, "Carol@Example.com", "viewer")
    assert second.status_code == 409
    assert second.json()["error"]["code"] == "DUPLICATE_INVITATION"

    decline = await client.post(f"/invitations/{first.json()['token']}/decline")
    assert decline.status_code == 200
    assert decline.json()["status"] == "declined"

    # Once resolved, a new pending invitation may be sent
    third = await invite(client, business_id, alice, "carol@example.com", "viewer")
    assert third.status_code == 201


@pytest.mark.asyncio
async def test_public_view_hides_token(client: AsyncClient, business_id, alice):
    token = (await invite(client, business_id, alice, "dave@example.com", "admin")).json()[
        "token"
    ]

    response = await client.get(f"/invitations/{token}")

    assert response.status_code == 200
    data = response.json()
    assert "token" not in data
    assert data["status"] == "pending"
    assert data["business"]["name"] == "Acme Bakery"
    assert data["inviter"]["email"] == "alice@example.com"


@pytest.mark.asyncio
async def test_unknown_token(client: AsyncClient, bob):
    assert (await client.get("/invitations/nope")).status_code == 404
    response = await client.post("/invitations/nope/accept", headers=bob.headers)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "INVITATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_expired_invitation_cannot_be_accepted_but_can_be_declined(
    client: AsyncClient, db_session, business_id, alice, bob
):
    token = (await invite(client, business_id, alice, "bob@example.com", "viewer")).json()[
        "token"
    ]
    await db_session.execute(
        update(BusinessInvitation)
        .where(BusinessInvitation.token == token)
        .values(expires_at=utcnow() - timedelta(minutes=1))
    )
    await db_session.commit()

    get_response = await client.get(f"/invitations/{token}")
    assert get_response.json()["status"] == "expired"
    assert get_response.json()["is_expired"] is True

    accept = await client.post(f"/invitations/{token}/accept", headers=bob.headers)
    assert accept.status_code == 410
    assert accept.json()["error"]["code"] == "INVITATION_EXPIRED"

    decline = await client.post(f"/invitations/{token}/decline")
    assert decline.status_code == 200


@pytest.mark.asyncio
async def test_reinvite_after_expiry(client: AsyncClient, db_session, business_id, alice, bob):
    first = (await invite(client, business_id, alice, "bob@example.com", "viewer")).json()
    await db_session.execute(
        update(BusinessInvitation)
        .where(BusinessInvitation.token == first["token"])
        .values(expires_at=utcnow() - timedelta(minutes=1))
    )
    await db_session.commit()

    second = await invite(client, business_id, alice, "bob@example.com", "editor")

    assert second.status_code == 201
    assert second.json()["status"] == "pending"

    listing = await client.get(f"/businesses/{business_id}/invitations", headers=alice.headers)
    statuses = {i["id"]: i["status"] for i in listing.json()["invitations"]}
    assert statuses == {first["id"]: "expired", second.json()["id"]: "pending"}

    # The lapsed invitation is resolved for good
    decline = await client.post(f"/invitations/{first['token']}/decline")
    assert decline.status_code == 409

    accept = await client.post(
        f"/invitations/{second.json()['token']}/accept", headers=bob.headers
    )
    assert accept.status_code == 200
    assert accept.json()["role"] == "editor"


@pytest.mark.asyncio
async def test_email_mismatch(client: AsyncClient, business_id, alice, carol):
    token = (await invite(client, business_id, alice, "bob@example.com", "viewer")).json()[
        "token"
    ]

    response = await client.post(f"/invitations/{token}/accept", headers=carol.headers)

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "EMAIL_MISMATCH"

    carol_permissions = await permissions(client, business_id, carol)
    assert carol_permissions["can_view"] is False


@pytest.mark.asyncio
async def test_second_accept_is_invalid_transition(client: AsyncClient, business_id, alice, bob):
    token = (await invite(client, business_id, alice, "bob@example.com", "viewer")).json()[
        "token"
    ]
    assert (await client.post(f"/invitations/{token}/accept", headers=bob.headers)).status_code == 200

    again = await client.post(f"/invitations/{token}/accept", headers=bob.headers)

    assert again.status_code == 409
    assert again.json()["error"]["code"] == "INVALID_STATE_TRANSITION"
    decline = await client.post(f"/invitations/{token}/decline")
    assert decline.status_code == 409

    members = await client.get(f"/businesses/{business_id}/members", headers=alice.headers)
    bob_rows = [m for m in members.json()["members"] if m["user_id"] == str(bob.user_id)]
    assert len(bob_rows) == 1


@pytest.mark.asyncio
async def test_inviting_existing_member(client: AsyncClient, business_id, alice, bob):
    token = (await invite(client, business_id, alice, "bob@example.com", "viewer")).json()[
        "token"
    ]
    await client.post(f"/invitations/{token}/accept", headers=bob.headers)

    response = await invite(client, business_id, alice, "bob@example.com", "editor")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ALREADY_MEMBER"


@pytest.mark.asyncio
async def test_invalid_role_and_email(client: AsyncClient, business_id, alice):
    bad_role = await invite(client, business_id, alice, "bob@example.com", "owner")
    assert bad_role.status_code == 400
    assert bad_role.json()["error"]["code"] == "INVALID_ROLE"

    bad_email = await invite(client, business_id, alice, "not-an-email", "viewer")
    assert bad_email.status_code == 400
    assert bad_email.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_revoke_and_list(client: AsyncClient, business_id, alice, bob):
    created = (await invite(client, business_id, alice, "erin@example.com", "editor")).json()

    listing = await client.get(f"/businesses/{business_id}/invitations", headers=alice.headers)
    assert listing.status_code == 200
    assert [i["id"] for i in listing.json()["invitations"]] == [created["id"]]

    denied = await client.delete(
        f"/businesses/{business_id}/invitations/{created['id']}", headers=bob.headers
    )
    assert denied.status_code == 403

    revoked = await client.delete(
        f"/businesses/{business_id}/invitations/{created['id']}", headers=alice.headers
    )
    assert revoked.status_code == 200
    assert (await client.get(f"/invitations/{created['token']}")).status_code == 404
