import enum
import uuid
from datetime import date

from database import Base
from sqlalchemy import Column, Date, ForeignKey, String, Table, Text, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship


def _new_id() -> str:
    return uuid.uuid4().hex


class CopyStatus(str, enum.Enum):
    available = "Available"
    maintenance = "Maintenance"
    loaned = "Loaned"
    reserved = "Reserved"


class Author(Base):
    __tablename__ = "authors"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_id)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    family_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date)
    date_of_death: Mapped[date | None] = mapped_column(Date)

    books: Mapped[list["Book"]] = relationship("Book", back_populates="author")

    __table_args__ = (
        CheckConstraint(
            "date_of_death IS NULL OR date_of_birth IS NULL OR date_of_death >= date_of_birth",
            name="ck_authors_lifespan_order",
        ),
    )

    @property
    def name(self) -> str:
        # both parts or nothing
        if self.first_name and self.family_name:
            return f"{self.family_name}, {self.first_name}"
        return ""

    @property
    def lifespan(self) -> str:
        birth = self.date_of_birth.year if self.date_of_birth else ""
        death = self.date_of_death.year if self.date_of_death else ""
        return f"{birth} - {death}"


class Genre(Base):
    __tablename__ = "genres"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    books: Mapped[list["Book"]] = relationship(
        secondary="book_genre_relation",
        back_populates="genres",
    )

    __table_args__ = (
        CheckConstraint("char_length(name) >= 3", name="ck_genres_name_length"),
    )


class Book(Base):
    __tablename__ = "books"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_id)
    title: Mapped[str] = mapped_column(String(), nullable=False)
    summary: Mapped[str | None] = mapped_column(Text)
    isbn: Mapped[str | None] = mapped_column(String(14), index=True)
    author_id: Mapped[str] = mapped_column(
        ForeignKey("authors.id", ondelete="CASCADE"), nullable=False
    )

    author: Mapped["Author"] = relationship("Author", back_populates="books")
    copies: Mapped[list["BookInstance"]] = relationship(
        "BookInstance", back_populates="book", cascade="all, delete-orphan"
    )

    # many-to-many: books → genres
    genres: Mapped[list["Genre"]] = relationship(
        secondary="book_genre_relation",
        back_populates="books",
    )

    __table_args__ = (
        CheckConstraint(
            "isbn IS NULL OR char_length(isbn) IN (10, 13)",
            name="ck_book_isbn_length",
        ),
    )


class BookInstance(Base):
    __tablename__ = "book_instances"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_id)
    book_id: Mapped[str] = mapped_column(
        ForeignKey("books.id", ondelete="CASCADE"), nullable=False, index=True
    )
    imprint: Mapped[str] = mapped_column(String(200), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=CopyStatus.maintenance.value
    )
    due_back: Mapped[date | None] = mapped_column(Date)

    book: Mapped["Book"] = relationship("Book", back_populates="copies")

    __table_args__ = (
        CheckConstraint(
            "status IN ('Available', 'Maintenance', 'Loaned', 'Reserved')",
            name="ck_book_instances_status",
        ),
    )


book_genre_relation = Table(
    "book_genre_relation",
    Base.metadata,
    Column("book_id", ForeignKey("books.id", ondelete="CASCADE"), primary_key=True),
    Column("genre_id", ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True),
)
