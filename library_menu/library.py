import logging
from typing import Iterator, List

from library_menu.book import AudioBook, Author, EBook, PrintedBook
from library_menu.catalog import Catalog
from library_menu.user import Librarian, Student, User

logger = logging.getLogger(__name__)


class Library:
    """Owns the catalog, the registered users and the book id counter."""

    def __init__(self) -> None:
        self._catalog = Catalog()
        self.users: List[User] = []
        self._next_book_id = 1

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    # ------------------------- Books ------------------------- #
    def new_book_id(self) -> int:
        book_id = self._next_book_id
        self._next_book_id += 1
        return book_id

    def seed_demo_books(self) -> None:
        """Add the three sample titles the console starts with."""
        self._catalog.add_book(PrintedBook(self.new_book_id(), "Book1", Author("Author1"), 2020, "History", 200))
        self._catalog.add_book(EBook(self.new_book_id(), "Book2", Author("Author2"), 2021, "Poetry", 2.5))
        self._catalog.add_book(AudioBook(self.new_book_id(), "Book3", Author("Author3"), 2019, "Drama", 3.0))
        logger.debug("Seeded %d demo books", len(self._catalog))

    # ------------------------- Users ------------------------- #
    def add_student(self, name: str, faculty: str, year: int) -> User:
        student = Student(name, faculty, year)
        self.users.append(student)
        logger.debug("Registered student %s", name)
        return student

    def add_librarian(self, name: str, employee_id: str) -> User:
        librarian = Librarian(name, employee_id)
        self.users.append(librarian)
        logger.debug("Registered librarian %s", name)
        return librarian

    def list_users(self) -> Iterator[str]:
        for user in self.users:
            yield user.describe()
