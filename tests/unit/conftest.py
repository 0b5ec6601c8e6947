from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.domain.entities import Business


def _repository(*methods):
    repo = MagicMock()
    for name in methods:
        setattr(repo, name, AsyncMock(return_value=None))
    return repo


def _returns_argument(entity):
    return entity


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories; lookups find nothing by default"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = _repository("get_by_id", "get_by_email", "get_by_ids", "create")
    uow.users.get_by_ids.return_value = []
    uow.users.create.side_effect = _returns_argument

    uow.businesses = _repository(
        "get_by_id", "get_by_slug", "list_for_user", "create", "update", "delete"
    )
    uow.businesses.list_for_user.return_value = []
    uow.businesses.create.side_effect = _returns_argument
    uow.businesses.update.side_effect = _returns_argument

    uow.members = _repository(
        "get_by_business_and_user",
        "get_by_business_id",
        "create_if_absent",
        "update",
        "delete",
        "delete_by_business_id",
    )
    uow.members.get_by_business_id.return_value = []
    uow.members.create_if_absent.side_effect = _returns_argument
    uow.members.update.side_effect = _returns_argument
    uow.members.delete_by_business_id.return_value = 0

    uow.invitations = _repository(
        "get_by_id",
        "get_by_token",
        "get_pending_by_business_and_email",
        "get_by_business_id",
        "create",
        "transition_status",
        "delete",
        "delete_by_business_id",
    )
    uow.invitations.get_by_business_id.return_value = []
    uow.invitations.create.side_effect = _returns_argument
    uow.invitations.transition_status.return_value = True
    uow.invitations.delete_by_business_id.return_value = 0

    uow.access_requests = _repository(
        "get_by_id",
        "get_pending_by_business_and_user",
        "get_pending_by_business_id",
        "create",
        "resolve",
        "delete",
        "delete_by_business_id",
    )
    uow.access_requests.get_pending_by_business_id.return_value = []
    uow.access_requests.create.side_effect = _returns_argument
    uow.access_requests.resolve.return_value = True
    uow.access_requests.delete_by_business_id.return_value = 0

    uow.audit_events = _repository("create", "get_by_business_paginated")
    uow.audit_events.create.side_effect = _returns_argument
    uow.audit_events.get_by_business_paginated.return_value = ([], None)

    return uow


@pytest.fixture
def owner_id():
    return uuid4()


@pytest.fixture
def business(owner_id):
    return Business(id=uuid4(), name="Acme Bakery", slug="acme-bakery", owner_id=owner_id)
