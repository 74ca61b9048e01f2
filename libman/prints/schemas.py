"""
Pydantic schema definitions for the print detail page.

Attribute names are snake_case; the JSON the rendering layer receives
uses the camelCase column names of the collection database
(``originalTitle``, ``relatedPersons`` ...). The same aliases let the
store build models straight from ``sqlite3.Row`` mappings.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class RelatedKind(str, Enum):
    """Entity kinds that can own related persons and links."""

    PRINT = "PRINT"
    WORK = "WORK"


class RelatedRef(BaseModel):
    """Tagged reference to the owner of a related person or link.

    Stored in the database as the ``(relatedType, relatedId)`` column
    pair.
    """

    model_config = ConfigDict(frozen=True)

    kind: RelatedKind
    id: int

    @classmethod
    def to_print(cls, print_id: int) -> "RelatedRef":
        return cls(kind=RelatedKind.PRINT, id=print_id)


class LinkType(str, Enum):
    IMAGE = "IMAGE"
    HYPERLINK = "HYPERLINK"


class RelatedPerson(_CamelModel):
    """A person attached to a print with a role (author, editor ...)."""

    order_no: int
    person_id: int
    person_name: Optional[str] = None
    role: Optional[str] = None
    description: Optional[str] = None


class RelatedLink(_CamelModel):
    link_type: LinkType
    url: str
    alt: Optional[str] = None
    description: Optional[str] = None


class Content(_CamelModel):
    """A table-of-contents entry.

    ``title`` is the referenced work's title when ``work_id`` is set and
    the entry's own title otherwise.
    """

    order_no: int
    work_id: Optional[int] = None
    title: Optional[str] = None
    sub_title: Optional[str] = None
    description: Optional[str] = None
    page_no: Optional[int] = None


class PrintDetail(_CamelModel):
    """A print with its lookup names resolved and its child records.

    ``publisher_name``, ``brand_name`` and ``series_name`` are ``None``
    when the print has no such relation.
    """

    id: int
    title: Optional[str] = None
    original_title: Optional[str] = None
    print_type: Optional[str] = None
    publisher_name: Optional[str] = None
    brand_name: Optional[str] = None
    publication_date: Optional[str] = None
    issue_number: Optional[str] = None
    series_name: Optional[str] = None
    description: Optional[str] = None
    ndl: Optional[str] = None
    owned_type: Optional[str] = None
    related_persons: List[RelatedPerson] = Field(default_factory=list)
    related_links: List[RelatedLink] = Field(default_factory=list)
    contents: List[Content] = Field(default_factory=list)


class PrintPage(BaseModel):
    """Payload returned to the print detail page."""

    prints: PrintDetail
