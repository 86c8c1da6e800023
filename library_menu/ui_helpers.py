import os
import json
from typing import Iterable, List
from rich.console import Console
from rich.table import Table
from rich.markup import escape

from library_menu.book import Book
from library_menu.user import User

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    # Unknown values are ignored and the current mode is kept
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()


def print_catalog_result(books: Iterable[Book], title: str = "Catalog") -> None:
    """Print books in the current output mode.
    - plain: one '[Type] title (year), author, detail, status' line per book
    - json: array of book payloads
    - rich: Rich table
    """
    books = list(books)
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=title, show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Type", style="cyan")
        table.add_column("Title", style="white")
        table.add_column("Year", justify="right")
        table.add_column("Author", style="white")
        table.add_column("Details")
        table.add_column("Status")
        for b in books:
            status = "[green]available[/]" if b.available else "[red]borrowed[/]"
            table.add_row(str(b.id), b.tag, escape(b.title), str(b.year), escape(b.author_name), b.detail_text, status)
        _console.print(table)
    else:
        for b in books:
            print(b.describe())


def print_users_result(users: List[User]) -> None:
    """Print users in the current output mode."""
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([u.to_dict() for u in users], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="Users", show_lines=True, header_style="bold cyan")
        table.add_column("Name", style="white")
        table.add_column("Role", style="cyan")
        table.add_column("Details")
        table.add_column("Borrowed", justify="right")
        table.add_column("Can borrow")
        for u in users:
            table.add_row(escape(u.name), u.role, escape(u.detail_text), str(u.borrowed), "yes" if u.can_borrow() else "no")
        _console.print(table)
    else:
        for u in users:
            print(u.describe())
