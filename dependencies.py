import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from database import get_async_db
from storage import SqlAuthorSource, SqlBookSource, SqlCopySource


def get_author_source(db: AsyncSession = Depends(get_async_db)) -> SqlAuthorSource:
    return SqlAuthorSource(db)


def get_book_source(db: AsyncSession = Depends(get_async_db)) -> SqlBookSource:
    return SqlBookSource(db)


def get_copy_source(db: AsyncSession = Depends(get_async_db)) -> SqlCopySource:
    return SqlCopySource(db)


def get_page_logger() -> logging.Logger:
    return logging.getLogger("library_app.pages")
