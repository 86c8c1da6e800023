import logging
from typing import Callable, Iterator, List, Optional

from library_menu.book import Book

logger = logging.getLogger(__name__)


class Catalog:
    """Owns the library's books. Stored books are copies of what callers pass in."""

    def __init__(self) -> None:
        self._books: List[Book] = []

    def add_book(self, book: Book) -> None:
        self._books.append(book.clone())
        logger.debug("Catalog stored book %d (%s)", book.id, book.title)

    def list_all(self) -> Iterator[str]:
        """Yield one description per stored book, in insertion order."""
        for book in self._books:
            yield book.describe()

    def search(self, predicate: Callable[[Book], bool]) -> List[Book]:
        """Return the stored books matching ``predicate``.

        The returned objects are the catalog's own, so borrowing or returning
        them changes the catalog.
        """
        return [book for book in self._books if predicate(book)]

    def find_by_id(self, book_id: int) -> Optional[Book]:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._books))

    def __len__(self) -> int:
        return len(self._books)
