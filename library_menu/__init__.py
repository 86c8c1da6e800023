"""Library Menu - Core Application Package

This package contains the core application modules including:
- Book and author models (book.py)
- Catalog of owned book copies (catalog.py)
- Students and librarians (user.py)
- Library aggregate (library.py)
- Settings and logging setup (config.py)
- Console menu and command line interface (main.py)
"""
