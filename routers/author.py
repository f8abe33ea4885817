import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from dependencies import get_author_source, get_page_logger
from pages.authors import show_all_authors
from storage import AuthorSource
from transmission import BufferedResponse

router = APIRouter(prefix="/authors", tags=["authors"])


@router.get("/", response_class=Response)
async def get_authors_router(
    authors: AuthorSource = Depends(get_author_source),
    log: logging.Logger = Depends(get_page_logger),
):
    res = BufferedResponse()
    await show_all_authors(res, authors, log)
    return res.render()
