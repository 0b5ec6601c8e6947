from typing import Optional
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.logging_notifier import LoggingInvitationNotifier
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt
from src.app.services.notifier import InvitationNotifier

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_notifier() -> InvitationNotifier:
    return LoggingInvitationNotifier()


def _unauthenticated(message: str) -> ClientError:
    return ClientError(
        Error("UNAUTHENTICATED", message),
        status_code=status.HTTP_401_UNAUTHORIZED,
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Caller identity: {"user_id": UUID, "email": str}

    Raises:
        ClientError: 401 UNAUTHENTICATED if the token is missing, invalid,
            expired or lacks the identity claims
    """
    if credentials is None:
        raise _unauthenticated("Authentication required")

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise _unauthenticated("Invalid or expired token")

    email = payload.get("email")
    try:
        user_id = UUID(str(payload.get("user_id")))
    except ValueError:
        raise _unauthenticated("Token does not identify a user")
    if not email:
        raise _unauthenticated("Token does not identify a user")

    return {"user_id": user_id, "email": email}
