"""
Access Request Use Cases

pending -> {approved, rejected}; approval converges on the same membership
creation path as invitation acceptance.
"""

from .create_access_request_use_case import CreateAccessRequestUseCase
from .dtos import (
    AccessRequestResponse,
    ListAccessRequestsResponse,
    ReviewAccessRequestResponse,
    WithdrawAccessRequestResponse,
)
from .list_access_requests_use_case import ListAccessRequestsUseCase
from .review_access_request_use_case import ReviewAccessRequestUseCase
from .withdraw_access_request_use_case import WithdrawAccessRequestUseCase

__all__ = [
    "CreateAccessRequestUseCase",
    "ListAccessRequestsUseCase",
    "ReviewAccessRequestUseCase",
    "WithdrawAccessRequestUseCase",
    "AccessRequestResponse",
    "ListAccessRequestsResponse",
    "ReviewAccessRequestResponse",
    "WithdrawAccessRequestResponse",
]
