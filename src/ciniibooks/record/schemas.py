"""Schemas for CiNii Books RDF records.

A record is a sequence of rdf:Description blocks. The first carries the
bibliographic data; later blocks may carry author or holding-library
details. Each block is tagged with a DescriptionRole at decode time.
"""

from collections.abc import Iterator
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..identifiers import (
    author_id_from_uri,
    isbn_from_urn,
    library_id_from_uri,
    local_id,
    ncid_from_uri,
)
from ..render import format_name, format_text_fields, split_reading


class DescriptionRole(str, Enum):
    """What an rdf:Description block describes."""

    BIBLIOGRAPHIC = "bibliographic"
    AUTHOR_BLOCK = "author_block"
    HOLDING_BLOCK = "holding_block"


# ============================================================================
# Shared Shapes
# ============================================================================


class TextField(BaseModel):
    """Text with an optional xml:lang tag (the tagged entry is the reading)."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    lang: str = ""


class ResourceField(BaseModel):
    """A reference carrying an rdf:resource URI and a dc:title attribute."""

    model_config = ConfigDict(frozen=True)

    resource: str = ""
    title: str = ""


class NameField(BaseModel):
    """An identified name (person or organization) with an optional reading."""

    model_config = ConfigDict(frozen=True)

    about: str = ""
    name: tuple[TextField, ...] = ()
    see_also: str = Field("", description="Back-link, e.g. the library OPAC page")

    @property
    def local_id(self) -> str:
        """Identifier with the CiNii URI prefix and #entity marker stripped."""
        return local_id(self.about) if self.about else ""

    def __str__(self) -> str:
        name, reading = split_reading(self.name)
        return format_name(name, reading, self.local_id)


class Author(BaseModel):
    """foaf:maker / foaf:Person."""

    model_config = ConfigDict(frozen=True)

    author: NameField

    def __str__(self) -> str:
        return str(self.author)


class Holding(BaseModel):
    """bibo:owner / foaf:Organization."""

    model_config = ConfigDict(frozen=True)

    holding: NameField

    def __str__(self) -> str:
        return str(self.holding)


# ============================================================================
# Description / Record
# ============================================================================


class Description(BaseModel):
    """One rdf:Description block."""

    model_config = ConfigDict(frozen=True)

    about: str = ""
    type: str = ""
    is_primary_topic_of: str = ""

    # Bibliographic
    title: tuple[TextField, ...] = ()
    alternative: tuple[str, ...] = ()
    creator: str = ""
    publisher: tuple[str, ...] = ()
    language: str = ""
    date: str = ""
    topics: tuple[ResourceField, ...] = ()
    ncid: str = ""
    edition: str = ""
    is_part_of: tuple[ResourceField, ...] = ()
    has_part: tuple[ResourceField, ...] = ()
    content_of_works: tuple[str, ...] = ()
    medium: str = ""
    owner_count: int = Field(0, ge=0)
    lccn: tuple[str, ...] = ()
    see_also: tuple[str, ...] = ()

    # Author / holding blocks
    authors: tuple[Author, ...] = ()
    holdings: tuple[Holding, ...] = ()

    role: DescriptionRole = DescriptionRole.BIBLIOGRAPHIC

    @staticmethod
    def role_for(authors: tuple[Author, ...], holdings: tuple[Holding, ...]) -> DescriptionRole:
        """Role implied by which collections a block populates.

        A block with both authors and holdings is an author block.
        """
        if authors:
            return DescriptionRole.AUTHOR_BLOCK
        if holdings:
            return DescriptionRole.HOLDING_BLOCK
        return DescriptionRole.BIBLIOGRAPHIC

    def __str__(self) -> str:
        return format_text_fields(self.title)


class Record(BaseModel):
    """A decoded RDF record with accessors for common fields.

    Accessors return None when the section is absent from the record.
    """

    model_config = ConfigDict(frozen=True)

    descriptions: tuple[Description, ...] = ()

    @property
    def bibliographic(self) -> Description:
        """The first Description, which holds the bibliographic record."""
        if not self.descriptions:
            return Description()
        return self.descriptions[0]

    def blocks(self, role: DescriptionRole) -> Iterator[Description]:
        """Iterate over descriptions with the given role."""
        return (d for d in self.descriptions if d.role == role)

    def title(self) -> tuple[str, str]:
        """Return ``(title, reading)``; reading is empty when not provided."""
        return split_reading(self.bibliographic.title)

    def parents(self) -> Optional[tuple[tuple[str, str], ...]]:
        """Return ``(parent title, parent NCID)`` pairs."""
        parts = self.bibliographic.is_part_of
        if not parts:
            return None
        return tuple((p.title, ncid_from_uri(p.resource)) for p in parts)

    def volumes(self) -> Optional[tuple[tuple[str, str], ...]]:
        """Return ``(part label, ISBN)`` pairs for child works."""
        parts = self.bibliographic.has_part
        if not parts:
            return None
        return tuple((p.title, isbn_from_urn(p.resource)) for p in parts)

    def topics(self) -> Optional[tuple[str, ...]]:
        """Return subject headings."""
        topics = self.bibliographic.topics
        if not topics:
            return None
        return tuple(t.title for t in topics)

    def authors(self) -> Optional[tuple[tuple[str, str, str], ...]]:
        """Return ``(name, reading, author id)`` rows from the author block."""
        block = self._first_block(DescriptionRole.AUTHOR_BLOCK)
        if block is None:
            return None

        rows = []
        for author in block.authors:
            name, reading = split_reading(author.author.name)
            rows.append((name, reading, author_id_from_uri(author.author.about)))
        return tuple(rows)

    def holdings(self) -> Optional[tuple[tuple[str, str, str], ...]]:
        """Return ``(library name, library id, OPAC URL)`` rows."""
        block = self._first_block(DescriptionRole.HOLDING_BLOCK)
        if block is None:
            return None

        rows = []
        for holding in block.holdings:
            name, _ = split_reading(holding.holding.name)
            rows.append(
                (
                    name,
                    library_id_from_uri(holding.holding.about),
                    holding.holding.see_also,
                )
            )
        return tuple(rows)

    def _first_block(self, role: DescriptionRole) -> Optional[Description]:
        # A record with only the bibliographic block has no detail blocks
        if len(self.descriptions) < 2:
            return None
        return next(self.blocks(role), None)
