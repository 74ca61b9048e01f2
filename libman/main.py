# libman/main.py
import logging

from fastapi import FastAPI

from .config import get_settings
from .prints import prints_router


logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


app = FastAPI(
    title="Libman prints",
    description=(
        "Read-only data service for the collection manager: loads a print "
        "with its publisher, brand, series, related persons, links and "
        "table of contents for the detail page."
    ),
    version="1.0.0",
)

app.include_router(prints_router)


# Liveness probe, does not touch the database
@app.get("/")
def health_check():
    return {"status": "ok", "message": "libman prints live"}
