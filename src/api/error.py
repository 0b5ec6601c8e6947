from typing import NoReturn

from fastapi import status

from libs.result import Error

# Error code -> HTTP status for client errors; anything unlisted is a server error
CLIENT_ERROR_STATUS = {
    "UNAUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
    "PERMISSION_DENIED": status.HTTP_403_FORBIDDEN,
    "EMAIL_MISMATCH": status.HTTP_403_FORBIDDEN,
    "BUSINESS_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVITATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "MEMBER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ACCESS_REQUEST_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_ROLE": status.HTTP_400_BAD_REQUEST,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "INVALID_BUSINESS_ID": status.HTTP_400_BAD_REQUEST,
    "INVALID_USER_ID": status.HTTP_400_BAD_REQUEST,
    "INVALID_INVITATION_ID": status.HTTP_400_BAD_REQUEST,
    "INVALID_REQUEST_ID": status.HTTP_400_BAD_REQUEST,
    "DUPLICATE_INVITATION": status.HTTP_409_CONFLICT,
    "DUPLICATE_ACCESS_REQUEST": status.HTTP_409_CONFLICT,
    "ALREADY_MEMBER": status.HTTP_409_CONFLICT,
    "INVALID_STATE_TRANSITION": status.HTTP_409_CONFLICT,
    "OWNER_IMMUTABLE": status.HTTP_409_CONFLICT,
    "SLUG_TAKEN": status.HTTP_409_CONFLICT,
    "INVITATION_EXPIRED": status.HTTP_410_GONE,
}

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error) -> NoReturn:
    """Raise the HTTP-level exception matching a use case error"""
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
