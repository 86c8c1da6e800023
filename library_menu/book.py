from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Author:
    """Display name of a book's author, copied by value."""

    name: str

    def __str__(self) -> str:
        return self.name


class BookKind(str, Enum):
    PRINTED = "printed"
    EBOOK = "ebook"
    AUDIO = "audio"


# Per-kind dispatch tables: display tag, attribute name, coercion, formatting.
_TAGS: Dict[BookKind, str] = {
    BookKind.PRINTED: "Printed",
    BookKind.EBOOK: "EBook",
    BookKind.AUDIO: "Audio",
}

_DETAIL_FIELDS: Dict[BookKind, str] = {
    BookKind.PRINTED: "pages",
    BookKind.EBOOK: "size_mb",
    BookKind.AUDIO: "duration_hours",
}

_DETAIL_TYPES: Dict[BookKind, Callable] = {
    BookKind.PRINTED: int,
    BookKind.EBOOK: float,
    BookKind.AUDIO: float,
}

_DETAIL_FORMATS: Dict[BookKind, Callable[[Union[int, float]], str]] = {
    BookKind.PRINTED: lambda pages: f"{pages} pages",
    BookKind.EBOOK: lambda size: f"{size:.1f} MB",
    BookKind.AUDIO: lambda hours: f"{hours:.1f} hours",
}


class Book:
    """A single catalog item.

    The kind selects how the variant attribute (``detail``) is coerced,
    named and displayed; everything else is shared by all kinds.
    """

    def __init__(self, kind: BookKind, book_id: int, title: str, author: Union[Author, str],
                 year: int, genre: str, detail: Union[int, float], available: bool = True) -> None:
        self.kind = BookKind(kind)
        self._id = int(book_id)
        self.title = title
        self.author = author if isinstance(author, Author) else Author(author)
        self.year = int(year)
        self.genre = genre
        self.detail = _DETAIL_TYPES[self.kind](detail)
        self.available = available

    @property
    def id(self) -> int:
        return self._id

    @property
    def author_name(self) -> str:
        return self.author.name

    @property
    def tag(self) -> str:
        return _TAGS[self.kind]

    @property
    def detail_field(self) -> str:
        return _DETAIL_FIELDS[self.kind]

    @property
    def detail_text(self) -> str:
        return _DETAIL_FORMATS[self.kind](self.detail)

    def describe(self) -> str:
        status = "available" if self.available else "borrowed"
        return f"[{self.tag}] {self.title} ({self.year}), {self.author.name}, {self.detail_text}, {status}"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Book(kind={self.kind.value!r}, id={self.id!r}, title={self.title!r})"

    def borrow(self) -> bool:
        """Mark the book as lent out. Returns False if it already was."""
        if not self.available:
            logger.info("Book %d (%s) is already borrowed", self.id, self.title)
            return False
        self.available = False
        return True

    def return_book(self) -> None:
        self.available = True

    def clone(self) -> "Book":
        return Book(self.kind, self.id, self.title, self.author, self.year,
                    self.genre, self.detail, available=self.available)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.tag,
            "title": self.title,
            "author": self.author.name,
            "year": self.year,
            "genre": self.genre,
            self.detail_field: self.detail,
            "available": self.available,
        }


def PrintedBook(book_id: int, title: str, author: Union[Author, str], year: int, genre: str,
                pages: int) -> Book:
    return Book(BookKind.PRINTED, book_id, title, author, year, genre, pages)


def EBook(book_id: int, title: str, author: Union[Author, str], year: int, genre: str,
          size_mb: float) -> Book:
    return Book(BookKind.EBOOK, book_id, title, author, year, genre, size_mb)


def AudioBook(book_id: int, title: str, author: Union[Author, str], year: int, genre: str,
              duration_hours: float) -> Book:
    return Book(BookKind.AUDIO, book_id, title, author, year, genre, duration_hours)
