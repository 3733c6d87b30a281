"""Schemas for OpenSearch (Atom 1.0) search results."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..identifiers import ncid_from_uri


class ParentWork(BaseModel):
    """A parent (series) reference on a search entry."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    link: str = ""

    @property
    def ncid(self) -> str:
        """Local NCID of the parent work."""
        return ncid_from_uri(self.link)


class Entry(BaseModel):
    """A single bibliographic hit in a search feed."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    id: str = Field("", description="Record URL")
    authors: tuple[str, ...] = ()
    publisher: str = ""
    publication_date: str = ""
    is_part_of: tuple[ParentWork, ...] = ()
    has_part: tuple[str, ...] = ()
    owner_count: int = Field(0, ge=0, description="Number of holding libraries")

    @property
    def ncid(self) -> str:
        """Local NCID taken from the entry id."""
        return ncid_from_uri(self.id)


class SearchResult(BaseModel):
    """One page of OpenSearch results."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    link: Optional[str] = None
    id: str = ""
    updated: str = ""

    total_results: int = 0
    start_index: int = 0
    items_per_page: int = 0

    entries: tuple[Entry, ...] = ()
