from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Failure:
    cause: BaseException


Result = Ok[Any] | NotFound | Failure


async def retrieve(fetch: Callable[[], Awaitable[T]]) -> Result:
    """Run a storage lookup and tag its outcome.

    ``fetch`` builds and resolves the query, so errors raised while building
    the query chain are captured the same way as a rejected ``resolve()``.
    ``None`` means the record is absent; an empty list is a valid value.
    """
    try:
        value = await fetch()
    except Exception as exc:
        return Failure(exc)
    if value is None:
        return NotFound()
    return Ok(value)
