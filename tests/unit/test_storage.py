from unittest.mock import AsyncMock, Mock

import pytest
from sqlalchemy.dialects import postgresql

from storage import SqlAuthorSource, SqlBookSource, SqlCopySource


def compile_sql(query) -> str:
    return str(query.statement().compile(dialect=postgresql.dialect()))


def test_author_query_orders_by_family_name():
    query = SqlAuthorSource(db=None).find().with_sort([("family_name", "ascending")])

    assert "ORDER BY authors.family_name ASC" in compile_sql(query)


def test_descending_sort():
    query = SqlAuthorSource(db=None).find().with_sort([("family_name", "descending")])

    assert "ORDER BY authors.family_name DESC" in compile_sql(query)


def test_invalid_sort_direction_raises():
    with pytest.raises(ValueError, match="Invalid sort direction"):
        SqlAuthorSource(db=None).find().with_sort([("family_name", "sideways")])


def test_unknown_field_raises():
    with pytest.raises(ValueError, match="Unknown field"):
        SqlAuthorSource(db=None).find().with_sort([("nickname", "ascending")])


def test_copy_query_selects_only_requested_fields():
    sql = compile_sql(SqlCopySource(db=None).find("abc").with_select("imprint status"))

    assert sql.startswith("SELECT book_instances.imprint, book_instances.status")
    assert "WHERE book_instances.book_id =" in sql


def test_book_query_filters_by_id():
    sql = compile_sql(SqlBookSource(db=None).find_one("abc").with_related("author"))

    assert "WHERE books.id =" in sql


@pytest.mark.asyncio
async def test_select_resolves_to_dicts():
    result = Mock()
    result.mappings.return_value.all.return_value = [
        {"imprint": "First Edition", "status": "Available"}
    ]
    db = Mock()
    db.execute = AsyncMock(return_value=result)

    rows = await SqlCopySource(db).find("abc").with_select("imprint status").resolve()

    assert rows == [{"imprint": "First Edition", "status": "Available"}]


@pytest.mark.asyncio
async def test_find_one_resolves_to_none_when_missing():
    result = Mock()
    result.scalar_one_or_none.return_value = None
    db = Mock()
    db.execute = AsyncMock(return_value=result)

    assert await SqlBookSource(db).find_one("missing").resolve() is None
