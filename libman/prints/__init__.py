"""
Print detail package.

Exposes the page-load endpoint for a single print: the print row with
its publisher, brand and series names, the people and links attached
to it and its table of contents, read from the collection's SQLite
database.
"""

from .router import router as prints_router  # noqa: F401
