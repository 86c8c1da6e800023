import pytest

from library_menu.library import Library
from library_menu.main import LibraryManager
from library_menu.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture
def lib():
    # Fresh, unseeded library for each test
    return Library()


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    # Output mode lives in the environment; setenv makes pytest undo any change
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")
    LibraryManager.reset()
    yield
    LibraryManager.reset()
