from library_menu.book import EBook, PrintedBook
from library_menu.catalog import Catalog


def _filled_catalog():
    catalog = Catalog()
    catalog.add_book(PrintedBook(1, "Book1", "Author1", 2020, "History", 200))
    catalog.add_book(EBook(2, "Book2", "Author2", 2021, "Poetry", 2.5))
    catalog.add_book(PrintedBook(3, "Book3", "Author1", 2018, "History", 90))
    return catalog


def test_list_all_scenario():
    catalog = Catalog()
    catalog.add_book(PrintedBook(1, "Book1", "Author1", 2020, "History", 200))
    assert list(catalog.list_all()) == ["[Printed] Book1 (2020), Author1, 200 pages, available"]


def test_list_all_is_restartable_and_ordered():
    catalog = _filled_catalog()
    first = list(catalog.list_all())
    second = list(catalog.list_all())
    assert first == second
    assert [line.split(" (")[0] for line in first] == ["[Printed] Book1", "[EBook] Book2", "[Printed] Book3"]


def test_list_all_on_empty_catalog():
    assert list(Catalog().list_all()) == []


def test_add_book_stores_a_copy():
    catalog = Catalog()
    book = PrintedBook(1, "Book1", "Author1", 2020, "History", 200)
    catalog.add_book(book)

    book.borrow()
    book.title = "Changed"

    assert list(catalog.list_all()) == ["[Printed] Book1 (2020), Author1, 200 pages, available"]


def test_search_all_and_none():
    catalog = _filled_catalog()
    assert [b.id for b in catalog.search(lambda b: True)] == [1, 2, 3]
    assert catalog.search(lambda b: False) == []


def test_search_by_attribute():
    catalog = _filled_catalog()
    found = catalog.search(lambda b: b.author_name == "Author1")
    assert [b.title for b in found] == ["Book1", "Book3"]


def test_search_returns_stored_books():
    catalog = _filled_catalog()
    found = catalog.search(lambda b: b.title == "Book2")
    assert found[0].borrow() is True

    assert catalog.find_by_id(2).available is False
    assert list(catalog.list_all())[1].endswith(", 2.5 MB, borrowed")


def test_find_by_id_and_len():
    catalog = _filled_catalog()
    assert len(catalog) == 3
    assert catalog.find_by_id(3).title == "Book3"
    assert catalog.find_by_id(42) is None
    assert [b.id for b in catalog] == [1, 2, 3]
