"""Book detail page: a book's title, its author's name and its copies.

Every outcome is written to the transmitter and nothing is raised to the
route, not even when the transmitter itself fails.

    found book + copies (possibly empty)  -> 200 {title, author, copies}
    unknown book or non-string id         -> 404 "Book <id> not found"
    copies resolve to None                -> 404 "Book details not found for book <id>"
    book or copy lookup raises            -> 500 "Error fetching book <id>"
"""
import logging
from typing import Any

from pages.safety import PROCESSING_ERROR, send_guarded
from results import Failure, Ok, retrieve
from schemas.book import BookDetailView
from storage import BookSource, CopySource
from transmission import Transmitter

logger = logging.getLogger(__name__)

FETCH_BOOK_ERROR = "Error fetching book:"


def build_detail_view(book: Any, copies: list) -> dict:
    # copies go out exactly as the copy query returned them
    view = BookDetailView(
        title=book.title,
        author=book.author.name,
        copies=copies,
    )
    return view.model_dump()


async def show_book_dtls(
    res: Transmitter,
    book_id: str | None,
    books: BookSource,
    copies: CopySource,
    log: logging.Logger = logger,
) -> None:
    fetch_error = f"Error fetching book {book_id}"

    if not isinstance(book_id, str):
        await send_guarded(res, f"Book {book_id} not found", log, status=404)
        return

    book_result = await retrieve(
        lambda: books.find_one(book_id).with_related("author").resolve()
    )
    if isinstance(book_result, Failure):
        log.error(f"{FETCH_BOOK_ERROR} %s", book_result.cause, exc_info=book_result.cause)
        await send_guarded(res, fetch_error, log, status=500)
        return
    if not isinstance(book_result, Ok):
        await send_guarded(res, f"Book {book_id} not found", log, status=404)
        return

    copies_result = await retrieve(
        lambda: copies.find(book_id).with_select("imprint status").resolve()
    )
    if isinstance(copies_result, Failure):
        log.error(f"{FETCH_BOOK_ERROR} %s", copies_result.cause, exc_info=copies_result.cause)
        await send_guarded(res, fetch_error, log, status=500)
        return
    if not isinstance(copies_result, Ok):
        await send_guarded(res, f"Book details not found for book {book_id}", log, status=404)
        return

    try:
        view = build_detail_view(book_result.value, copies_result.value)
    except Exception as exc:
        log.error(f"{FETCH_BOOK_ERROR} %s", exc, exc_info=exc)
        await send_guarded(res, fetch_error, log, status=500)
        return

    try:
        await res.send(view)
    except Exception as exc:
        log.error(f"{PROCESSING_ERROR} %s", exc, exc_info=exc)
        await send_guarded(res, fetch_error, log, status=500)
