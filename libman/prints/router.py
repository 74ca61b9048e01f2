"""
Route definitions for the print detail page.

Endpoints:
- GET /prints/{print_id} : a print with its persons, links and contents
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..config import Settings, get_settings
from ..storage import open_database
from .schemas import PrintPage
from .store import get_print_detail


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prints", tags=["prints"])


@router.get("/{print_id}", response_model=PrintPage)
def load_print_page(print_id: str, settings: Settings = Depends(get_settings)) -> PrintPage:
    """
    Returns the data the print detail page renders.

    Every failure while opening the database, coercing the id or running
    the queries is reported the same way, as a 500 "Database Error". An
    id with no matching print is a 404.
    """
    try:
        with open_database(settings.db_path) as conn:
            detail = get_print_detail(conn, int(print_id))
    except Exception:
        logger.exception("Failed to load print %r", print_id)
        raise HTTPException(status_code=500, detail="Database Error")

    if detail is None:
        raise HTTPException(status_code=404, detail="Print not found")
    return PrintPage(prints=detail)
