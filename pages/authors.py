import logging
from typing import List

from models import Author
from pages.safety import send_with_fallback
from results import Failure, Ok, retrieve
from storage import AuthorSource
from transmission import Transmitter

logger = logging.getLogger(__name__)

FETCH_AUTHORS_ERROR = "Error fetching authors:"
NO_AUTHORS = "No authors found"
AUTHOR_ORDER = [("family_name", "ascending")]


def format_author(author: Author) -> str:
    # e.g. "Austen, Jane : 1775 - 1817", or " : 1775 - 1817" without a first name
    return f"{author.name} : {author.lifespan}"


async def get_author_list(authors: AuthorSource, log: logging.Logger = logger) -> List[str]:
    result = await retrieve(lambda: authors.find().with_sort(AUTHOR_ORDER).resolve())
    if isinstance(result, Failure):
        log.error(f"{FETCH_AUTHORS_ERROR} %s", result.cause, exc_info=result.cause)
        return []
    if not isinstance(result, Ok):
        return []
    try:
        return [format_author(a) for a in result.value]
    except Exception as exc:
        log.error(f"{FETCH_AUTHORS_ERROR} %s", exc, exc_info=exc)
        return []


async def show_all_authors(
    res: Transmitter, authors: AuthorSource, log: logging.Logger = logger
) -> None:
    author_list = await get_author_list(authors, log)
    body = author_list if author_list else NO_AUTHORS
    await send_with_fallback(res, body, NO_AUTHORS, log)
