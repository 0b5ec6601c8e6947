from uuid import UUID

from fastapi import status

from libs.result import Error
from src.api.error import ClientError


def parse_uuid(value: str, code: str, label: str) -> UUID:
    """Parse a path parameter, answering 400 with ``code`` when malformed"""
    try:
        return UUID(value)
    except ValueError:
        raise ClientError(
            Error(code, f"Invalid {label} ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
