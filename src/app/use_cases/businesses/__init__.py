"""
Business Use Cases
"""

from .create_business_use_case import CreateBusinessUseCase
from .delete_business_use_case import DeleteBusinessUseCase
from .dtos import BusinessResponse, DeleteBusinessResponse, ListBusinessesResponse
from .get_business_use_case import GetBusinessUseCase
from .get_permissions_use_case import GetPermissionsUseCase
from .list_businesses_use_case import ListBusinessesUseCase
from .update_business_use_case import UpdateBusinessUseCase

__all__ = [
    "CreateBusinessUseCase",
    "ListBusinessesUseCase",
    "GetBusinessUseCase",
    "UpdateBusinessUseCase",
    "DeleteBusinessUseCase",
    "GetPermissionsUseCase",
    "BusinessResponse",
    "ListBusinessesResponse",
    "DeleteBusinessResponse",
]
