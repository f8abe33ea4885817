import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from dependencies import get_book_source, get_copy_source, get_page_logger
from pages.book_details import show_book_dtls
from storage import BookSource, CopySource
from transmission import BufferedResponse

router = APIRouter(prefix="/books", tags=["books"])


@router.get("/{book_id}", response_class=Response)
async def get_book_router(
    book_id: str,
    books: BookSource = Depends(get_book_source),
    copies: CopySource = Depends(get_copy_source),
    log: logging.Logger = Depends(get_page_logger),
):
    res = BufferedResponse()
    await show_book_dtls(res, book_id, books, copies, log)
    return res.render()
