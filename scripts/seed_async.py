"""
Async seeding script to populate the catalog with authors, genres, books and copies.

Usage:
    python -m scripts.seed_async --authors 20 --books 50 --copies-per-book 3

Writes straight to DATABASE_ASYNC_URL and creates the tables if they are missing.
"""

import argparse
import asyncio
import logging
import os
import random
import uuid
from datetime import date, timedelta

from database import AsyncSessionLocal, create_schema
from models import Author, Book, BookInstance, CopyStatus, Genre

logger = logging.getLogger("library_app.seed")

DEFAULT_AUTHORS = int(os.getenv("SEED_AUTHORS", "10"))
DEFAULT_BOOKS = int(os.getenv("SEED_BOOKS", "20"))

FIRST_NAMES = ["Jane", "Amitav", "Isaac", "Ursula", "Fyodor", "Chinua", "Toni", ""]
GENRES = ["Fantasy", "Science Fiction", "French Poetry", "Historical Fiction"]
IMPRINTS = ["First Edition", "Second Edition", "Paperback", "Gollancz, 2011"]


def _isbn() -> str:
    # Generate a 13-digit ISBN-like string
    return f"978{uuid.uuid4().int % 10**10:010d}"


def _lifespan() -> tuple[date, date | None]:
    born = date(random.randint(1700, 1980), random.randint(1, 12), random.randint(1, 28))
    if random.random() < 0.3:
        return born, None
    return born, born + timedelta(days=random.randint(30 * 365, 90 * 365))


def make_author(idx: int) -> Author:
    born, died = _lifespan()
    return Author(
        first_name=random.choice(FIRST_NAMES),
        family_name=f"Seed{idx}-{uuid.uuid4().hex[:6]}",
        date_of_birth=born,
        date_of_death=died,
    )


def make_copy(book: Book) -> BookInstance:
    status = random.choice(list(CopyStatus))
    due_back = None
    if status is not CopyStatus.available:
        due_back = date.today() + timedelta(days=random.randint(1, 30))
    return BookInstance(
        book=book,
        imprint=random.choice(IMPRINTS),
        status=status.value,
        due_back=due_back,
    )


async def seed(authors: int, books: int, copies_per_book: int):
    await create_schema()
    async with AsyncSessionLocal() as db:
        author_objs = [make_author(idx) for idx in range(authors)]
        db.add_all(author_objs)

        if not author_objs:
            logger.info("No authors created; skipping book creation.")
            await db.commit()
            return

        genre_objs = [Genre(name=f"{g} {uuid.uuid4().hex[:4]}") for g in GENRES]
        db.add_all(genre_objs)

        created_books: list[Book] = []
        for idx in range(books):
            suffix = uuid.uuid4().hex[:6]
            book = Book(
                title=f"Seed Book {idx}-{suffix}",
                summary="seeded via scripts/seed_async.py",
                isbn=_isbn(),
                author=random.choice(author_objs),
                genres=random.sample(genre_objs, k=random.randint(1, 2)),
            )
            db.add(book)
            db.add_all(make_copy(book) for _ in range(random.randint(0, copies_per_book)))
            created_books.append(book)

        await db.commit()

    logger.info(
        "Seeded %d authors and %d books", len(author_objs), len(created_books)
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Async seeder for the library catalog")
    parser.add_argument("--authors", type=int, default=DEFAULT_AUTHORS, help="Number of authors to create")
    parser.add_argument("--books", type=int, default=DEFAULT_BOOKS, help="Number of books to create")
    parser.add_argument(
        "--copies-per-book",
        type=int,
        default=3,
        help="Maximum copies to attach to a book",
    )
    return parser.parse_args()


def main():
    logging.basicConfig(level=logging.INFO)
    args = parse_args()
    asyncio.run(
        seed(
            authors=args.authors,
            books=args.books,
            copies_per_book=args.copies_per_book,
        )
    )


if __name__ == "__main__":
    main()
