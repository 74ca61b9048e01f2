"""Shared fixtures: a small collection database on disk and an API client."""

import sqlite3
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from libman.config import Settings, get_settings
from libman.main import app
from libman.storage import open_database


SCHEMA_SQL = """
CREATE TABLE publishers (id INTEGER PRIMARY KEY, name TEXT NOT NULL);
CREATE TABLE brands (id INTEGER PRIMARY KEY, name TEXT NOT NULL);
CREATE TABLE series (id INTEGER PRIMARY KEY, title TEXT NOT NULL);
CREATE TABLE persons (id INTEGER PRIMARY KEY, name TEXT NOT NULL);
CREATE TABLE works (id INTEGER PRIMARY KEY, title TEXT NOT NULL);

CREATE TABLE prints (
    id              INTEGER PRIMARY KEY,
    title           TEXT,
    originalTitle   TEXT,
    printType       TEXT,
    publisherId     INTEGER,
    brandId         INTEGER,
    publicationDate TEXT,
    issueNumber,
    seriesId        INTEGER,
    description     TEXT,
    ndl,
    ownedType       TEXT
);

CREATE TABLE related_persons (
    id          INTEGER PRIMARY KEY,
    relatedType TEXT NOT NULL,
    relatedId   INTEGER NOT NULL,
    orderNo     INTEGER NOT NULL,
    personId    INTEGER NOT NULL,
    role        TEXT,
    description TEXT
);

CREATE TABLE related_links (
    id          INTEGER PRIMARY KEY,
    relatedType TEXT NOT NULL,
    relatedId   INTEGER NOT NULL,
    linkType    TEXT NOT NULL,
    url         TEXT NOT NULL,
    alt         TEXT,
    description TEXT
);

CREATE TABLE contents (
    id          INTEGER PRIMARY KEY,
    printId     INTEGER NOT NULL,
    orderNo     INTEGER NOT NULL,
    workId      INTEGER,
    title       TEXT,
    subTitle    TEXT,
    description TEXT,
    pageNo      INTEGER
);
"""

SAMPLE_SQL = """
INSERT INTO publishers VALUES (1, 'Hayakawa Shobo');
INSERT INTO brands VALUES (1, 'Hayakawa SF Bunko');
INSERT INTO series VALUES (1, 'Foundation Trilogy');
INSERT INTO persons VALUES (1, 'Isaac Asimov'), (2, 'Okabe Hiroshi'), (3, 'Someone Else');
INSERT INTO works VALUES (1, 'The Encyclopedists');

INSERT INTO prints VALUES
    (1, 'Foundation', 'Foundation', 'BOOK', 1, 1, '1984-05-31', NULL, 1,
     'First volume of the trilogy.', '000001631254', 'OWNED'),
    (2, 'SF Magazine', NULL, 'MAGAZINE', NULL, NULL, '2023-05-25', '2023-06', NULL,
     NULL, NULL, 'WISHED'),
    (3, 'Orphan', NULL, 'BOOK', 99, 99, NULL, NULL, 99, NULL, NULL, NULL),
    (4, NULL, NULL, 'MAGAZINE', NULL, NULL, NULL, 12, NULL, NULL, 1234, NULL);

INSERT INTO related_persons (relatedType, relatedId, orderNo, personId, role, description) VALUES
    ('PRINT', 1, 2, 2, 'TRANSLATOR', NULL),
    ('PRINT', 1, 1, 1, 'AUTHOR', 'Original author'),
    ('WORK', 1, 1, 3, 'AUTHOR', NULL),
    ('PRINT', 2, 1, 3, 'EDITOR', NULL);

INSERT INTO related_links (id, relatedType, relatedId, linkType, url, alt, description) VALUES
    (1, 'PRINT', 1, 'IMAGE', 'https://example.com/covers/1.jpg', 'Cover', NULL),
    (2, 'PRINT', 1, 'HYPERLINK', 'https://ndlsearch.ndl.go.jp/books/000001631254', NULL, 'NDL'),
    (3, 'WORK', 1, 'HYPERLINK', 'https://example.com/works/1', NULL, NULL),
    (4, 'PRINT', 2, 'IMAGE', 'https://example.com/covers/2.jpg', NULL, NULL);

INSERT INTO contents (printId, orderNo, workId, title, subTitle, description, pageNo) VALUES
    (1, 3, NULL, 'Afterword', NULL, NULL, 300),
    (1, 1, 1, 'stored title', 'Part I', NULL, 5),
    (1, 2, NULL, 'The Mayors', 'Part II', 'Salvor Hardin', 60),
    (2, 1, NULL, 'Editorial', NULL, NULL, 2),
    (3, 1, 99, 'stored title', NULL, NULL, NULL);
"""


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Create the sample collection database and return its path."""
    path = tmp_path / "libman.db"
    conn = sqlite3.connect(path)
    try:
        conn.executescript(SCHEMA_SQL + SAMPLE_SQL)
        conn.commit()
    finally:
        conn.close()
    return path


@pytest.fixture
def conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    with open_database(str(db_path)) as connection:
        yield connection


@pytest.fixture
def client(db_path: Path) -> Iterator[TestClient]:
    """API client whose settings point at the sample database."""
    app.dependency_overrides[get_settings] = lambda: Settings(db_path=str(db_path))
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
