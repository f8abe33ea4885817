from typing import Any, Protocol, Sequence

from sqlalchemy import asc, desc, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from models import Author, Book, BookInstance

SORT_DIRECTIONS = {"ascending": asc, "descending": desc}


class Query(Protocol):
    def with_sort(self, order_spec: Sequence[tuple[str, str]]) -> "Query": ...

    def with_select(self, fields: str) -> "Query": ...

    def with_related(self, relation: str) -> "Query": ...

    async def resolve(self) -> Any: ...


class AuthorSource(Protocol):
    def find(self) -> Query: ...


class BookSource(Protocol):
    def find_one(self, book_id: str) -> Query: ...


class CopySource(Protocol):
    def find(self, book_id: str) -> Query: ...


class SqlQuery:
    """Chainable read query over one mapped model.

    ``single=True`` resolves to one row or ``None``; otherwise a list.
    With ``with_select`` rows come back as plain dicts of the chosen fields.
    """

    def __init__(self, db: AsyncSession, model, criteria: dict | None = None, single: bool = False):
        self._db = db
        self._model = model
        self._criteria = criteria or {}
        self._single = single
        self._order: list = []
        self._fields: list[str] = []
        self._related: list[str] = []

    def _column(self, name: str):
        try:
            return getattr(self._model, name)
        except AttributeError:
            raise ValueError(f"Unknown field '{name}' on {self._model.__name__}")

    def with_sort(self, order_spec):
        for field, direction in order_spec:
            try:
                order_fn = SORT_DIRECTIONS[direction]
            except KeyError:
                raise ValueError(f"Invalid sort direction '{direction}'")
            self._order.append(order_fn(self._column(field)))
        return self

    def with_select(self, fields: str):
        self._fields = fields.split()
        return self

    def with_related(self, relation: str):
        self._related.append(relation)
        return self

    def statement(self):
        if self._fields:
            stmt = select(*[self._column(f) for f in self._fields])
        else:
            stmt = select(self._model)
            for relation in self._related:
                stmt = stmt.options(selectinload(self._column(relation)))
        for field, value in self._criteria.items():
            stmt = stmt.where(self._column(field) == value)
        if self._order:
            stmt = stmt.order_by(*self._order)
        return stmt

    async def resolve(self):
        result = await self._db.execute(self.statement())
        if self._fields:
            rows = [dict(row) for row in result.mappings().all()]
            if self._single:
                return rows[0] if rows else None
            return rows
        if self._single:
            return result.scalar_one_or_none()
        return list(result.scalars().all())


class SqlAuthorSource:
    def __init__(self, db: AsyncSession):
        self.db = db

    def find(self) -> SqlQuery:
        return SqlQuery(self.db, Author)


class SqlBookSource:
    def __init__(self, db: AsyncSession):
        self.db = db

    def find_one(self, book_id: str) -> SqlQuery:
        return SqlQuery(self.db, Book, {"id": book_id}, single=True)


class SqlCopySource:
    def __init__(self, db: AsyncSession):
        self.db = db

    def find(self, book_id: str) -> SqlQuery:
        return SqlQuery(self.db, BookInstance, {"book_id": book_id})
