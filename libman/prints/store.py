"""
Data access for the print detail page.

Each ``fetch_*`` function issues one parameterized query against an
open ``sqlite3.Connection`` and maps the rows into ``schemas`` models.
``get_print_detail`` runs them one after another on the same
connection and assembles the nested record. Nothing here opens or
closes connections; see ``libman.storage.open_database``.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from .schemas import Content, PrintDetail, RelatedLink, RelatedPerson, RelatedRef


logger = logging.getLogger(__name__)


PRINT_SQL = """
    SELECT p.id, p.title, p.originalTitle, p.printType,
           c.name AS publisherName, b.name AS brandName,
           p.publicationDate, p.issueNumber, s.title AS seriesName,
           p.description, p.ndl, p.ownedType
    FROM prints AS p
    LEFT JOIN publishers AS c ON c.id = p.publisherId
    LEFT JOIN brands AS b ON b.id = p.brandId
    LEFT JOIN series AS s ON s.id = p.seriesId
    WHERE p.id = ?
"""

RELATED_PERSONS_SQL = """
    SELECT r.orderNo, r.personId, p.name AS personName, r.role, r.description
    FROM related_persons AS r
    JOIN persons AS p ON p.id = r.personId
    WHERE r.relatedType = ? AND r.relatedId = ?
    ORDER BY r.orderNo
"""

RELATED_LINKS_SQL = """
    SELECT l.linkType, l.url, l.alt, l.description
    FROM related_links AS l
    WHERE l.relatedType = ? AND l.relatedId = ?
    ORDER BY l.id
"""

# A content entry pointing at a work shows the work's title, never its own.
CONTENTS_SQL = """
    SELECT c.orderNo, c.workId,
           CASE WHEN c.workId IS NULL THEN c.title ELSE w.title END AS title,
           c.subTitle, c.description, c.pageNo
    FROM contents AS c
    LEFT JOIN works AS w ON w.id = c.workId
    WHERE c.printId = ?
    ORDER BY c.orderNo
"""


def fetch_print(conn: sqlite3.Connection, print_id: int) -> Optional[PrintDetail]:
    """Fetch the print row with publisher, brand and series names resolved.

    Returns ``None`` when no print has the given id. The child lists of
    the returned record are empty; ``get_print_detail`` fills them.
    """
    row = conn.execute(PRINT_SQL, (print_id,)).fetchone()
    if row is None:
        return None
    return PrintDetail.model_validate(dict(row))


def fetch_related_persons(conn: sqlite3.Connection, ref: RelatedRef) -> List[RelatedPerson]:
    rows = conn.execute(RELATED_PERSONS_SQL, (ref.kind.value, ref.id)).fetchall()
    return [RelatedPerson.model_validate(dict(r)) for r in rows]


def fetch_related_links(conn: sqlite3.Connection, ref: RelatedRef) -> List[RelatedLink]:
    rows = conn.execute(RELATED_LINKS_SQL, (ref.kind.value, ref.id)).fetchall()
    return [RelatedLink.model_validate(dict(r)) for r in rows]


def fetch_contents(conn: sqlite3.Connection, print_id: int) -> List[Content]:
    """Table of contents for a print, ordered by ``orderNo``."""
    rows = conn.execute(CONTENTS_SQL, (print_id,)).fetchall()
    return [Content.model_validate(dict(r)) for r in rows]


def get_print_detail(conn: sqlite3.Connection, print_id: int) -> Optional[PrintDetail]:
    """Load a print and everything the detail page shows about it.

    Parameters
    ----------
    conn : sqlite3.Connection
        An open connection whose ``row_factory`` is ``sqlite3.Row``.
    print_id : int
        Primary key of the print.

    Returns
    -------
    Optional[PrintDetail]
        The assembled record, or ``None`` if the print does not exist.
        Database errors are not caught here.
    """
    detail = fetch_print(conn, print_id)
    if detail is None:
        logger.info("Print %s not found", print_id)
        return None

    ref = RelatedRef.to_print(detail.id)
    detail.related_persons = fetch_related_persons(conn, ref)
    detail.related_links = fetch_related_links(conn, ref)
    detail.contents = fetch_contents(conn, detail.id)
    logger.debug(
        "Loaded print %s: %d persons, %d links, %d contents",
        detail.id,
        len(detail.related_persons),
        len(detail.related_links),
        len(detail.contents),
    )
    return detail
