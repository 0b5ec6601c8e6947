"""
Translate SQLAlchemy failures into application store errors.
"""

from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.app.errors import DuplicateRecordError, StoreUnavailableError


@asynccontextmanager
async def translate_store_errors():
    try:
        yield
    except IntegrityError as e:
        raise DuplicateRecordError(str(e.orig)) from e
    except SQLAlchemyError as e:
        raise StoreUnavailableError(str(e)) from e
