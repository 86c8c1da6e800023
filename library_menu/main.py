from typing import Callable, Optional

import typer

from library_menu.book import AudioBook, Author, Book, BookKind, EBook, PrintedBook
from library_menu.config import configure_logging, settings
from library_menu.library import Library
from library_menu.ui_helpers import (
    get_output_mode,
    print_catalog_result,
    print_users_result,
    set_output_mode,
)
from library_menu.validators import NumberValidator

APP_NAME = settings.app_name

MENU_TEXT = (
    "\n=== Menu ===\n"
    "1. Add book\n"
    "2. List catalog\n"
    "3. Add student\n"
    "4. Add librarian\n"
    "5. List users\n"
    "0. Exit"
)


class LibraryManager:
    """Process-wide Library used by the menu and the commands."""

    _instance: Optional[Library] = None

    @classmethod
    def get_instance(cls) -> Library:
        if cls._instance is None:
            cls._instance = Library()
            if settings.seed_demo_books:
                cls._instance.seed_demo_books()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None


# --- Prompt helpers ---
def _ask(prompt: str) -> str:
    return input(prompt).strip()


def _ask_int(prompt: str) -> int:
    while True:
        value = NumberValidator.parse_int(input(prompt))
        if value is not None:
            return value
        print("Invalid number, try again.")


def _ask_float(prompt: str) -> float:
    while True:
        value = NumberValidator.parse_float(input(prompt))
        if value is not None:
            return value
        print("Invalid number, try again.")


# --- Menu actions ---
def add_book(lib: Library) -> Book:
    """Read the book fields and store a new book with the next id."""
    kind = _ask_int("Type (1-Printed,2-EBook,3-Audio): ")
    title = _ask("Title: ")
    author = Author(_ask("Author: "))
    year = _ask_int("Year: ")
    genre = _ask("Genre: ")
    book_id = lib.new_book_id()

    if kind == 1:
        book = PrintedBook(book_id, title, author, year, genre, _ask_int("Pages: "))
    elif kind == 2:
        book = EBook(book_id, title, author, year, genre, _ask_float("Size MB: "))
    else:
        book = AudioBook(book_id, title, author, year, genre, _ask_float("Duration hours: "))
    lib.catalog.add_book(book)
    return book


def list_catalog(lib: Library) -> None:
    if get_output_mode() == "plain":
        for line in lib.catalog.list_all():
            print(line)
    else:
        print_catalog_result(lib.catalog)


def add_student(lib: Library) -> None:
    name = _ask("Name: ")
    faculty = _ask("Faculty: ")
    year = _ask_int("Year: ")
    lib.add_student(name, faculty, year)


def add_librarian(lib: Library) -> None:
    name = _ask("Name: ")
    employee_id = _ask("Employee ID: ")
    lib.add_librarian(name, employee_id)


def list_users(lib: Library) -> None:
    if get_output_mode() == "plain":
        for line in lib.list_users():
            print(line)
    else:
        print_users_result(lib.users)


MENU_ACTIONS: dict = {
    1: add_book,
    2: list_catalog,
    3: add_student,
    4: add_librarian,
    5: list_users,
}


def run_menu(lib: Optional[Library] = None) -> None:
    """Line-oriented menu loop. Runs until '0' or end of input."""
    lib = lib or LibraryManager.get_instance()
    try:
        while True:
            print(MENU_TEXT)
            choice = NumberValidator.parse_int(input("Choice: "))
            if choice is None:
                # Malformed choice: drop the line and show the menu again
                continue
            if choice == 0:
                break
            action = MENU_ACTIONS.get(choice)
            if action is not None:
                action(lib)
    except EOFError:
        pass
    print("Exiting...")


def build_predicate(title: Optional[str] = None, author: Optional[str] = None,
                    genre: Optional[str] = None, kind: Optional[BookKind] = None,
                    available_only: bool = False) -> Callable[[Book], bool]:
    """Combine the given filters into one predicate for Catalog.search.

    Text filters are case-insensitive substring matches; unset filters match everything.
    """
    def matches(book: Book) -> bool:
        if title and title.lower() not in book.title.lower():
            return False
        if author and author.lower() not in book.author_name.lower():
            return False
        if genre and genre.lower() not in book.genre.lower():
            return False
        if kind is not None and book.kind is not kind:
            return False
        if available_only and not book.available:
            return False
        return True

    return matches


# --- Typer CLI application ---
app = typer.Typer(help=APP_NAME)


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
):
    """Global options. Without a command the interactive menu starts."""
    if output:
        set_output_mode(output)
    if ctx.invoked_subcommand is None:
        run_menu()


@app.command("menu")
def cli_menu():
    """Start the interactive menu."""
    run_menu()


@app.command("list")
def cli_list():
    """List the catalog."""
    lib = LibraryManager.get_instance()
    if not len(lib.catalog):
        print("No books in catalog.")
        return
    list_catalog(lib)


@app.command("search")
def cli_search(
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Filter by title"),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Filter by author"),
    genre: Optional[str] = typer.Option(None, "--genre", "-g", help="Filter by genre"),
    kind: Optional[str] = typer.Option(None, "--kind", "-k", help="printed | ebook | audio"),
    available: bool = typer.Option(False, "--available", help="Only books that are not borrowed"),
):
    """Search the catalog with optional filters."""
    book_kind = None
    if kind:
        try:
            book_kind = BookKind(kind.lower())
        except ValueError:
            raise typer.BadParameter(f"Unknown book type: {kind}", param_hint="--kind")

    lib = LibraryManager.get_instance()
    books = lib.catalog.search(build_predicate(title, author, genre, book_kind, available))
    if not books:
        print("No matching books.")
        return
    print_catalog_result(books, title="Search results")


def main() -> None:
    configure_logging()
    app()


if __name__ == "__main__":
    main()
