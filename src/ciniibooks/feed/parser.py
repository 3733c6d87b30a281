"""Decode OpenSearch Atom responses into SearchResult."""

import logging
from typing import Optional
from xml.etree import ElementTree as ET

from pydantic import ValidationError

from ..errors import ParseError
from ..namespaces import NS, attr, integer, parse_document, text, texts
from .schemas import Entry, ParentWork, SearchResult

logger = logging.getLogger(__name__)


def parse_atom_feed(body: bytes | str) -> SearchResult:
    """Parse an Atom 1.0 feed returned by the search endpoint.

    Args:
        body: Raw response body

    Returns:
        SearchResult with entries in document order

    Raises:
        ParseError: If the body is malformed or not an Atom feed
    """
    root = parse_document(body, "atom:feed")

    try:
        result = SearchResult(
            title=text(root, "atom:title"),
            link=_self_link(root),
            id=text(root, "atom:id"),
            updated=text(root, "atom:updated"),
            total_results=integer(root, "opensearch:totalResults"),
            start_index=integer(root, "opensearch:startIndex"),
            items_per_page=integer(root, "opensearch:itemsPerPage"),
            entries=tuple(_parse_entry(e) for e in root.findall("atom:entry", NS)),
        )
    except ValidationError as e:
        raise ParseError(f"Unexpected feed content: {e}") from e

    logger.debug(
        "Parsed feed with %d of %d results", len(result.entries), result.total_results
    )
    return result


def _self_link(root: ET.Element) -> Optional[str]:
    """Href of the rel="self" link, falling back to the first link."""
    links = root.findall("atom:link", NS)
    for link in links:
        if link.get("rel") == "self":
            return link.get("href")
    if links:
        return links[0].get("href")
    return None


def _parse_entry(entry: ET.Element) -> Entry:
    """Convert an atom:entry element to Entry."""
    authors = tuple(
        name for name in texts(entry, "atom:author/atom:name") if name
    )

    parents = tuple(
        ParentWork(title=_parent_title(p), link=(p.text or "").strip())
        for p in entry.findall("dcterms:isPartOf", NS)
    )

    return Entry(
        title=text(entry, "atom:title"),
        id=text(entry, "atom:id"),
        authors=authors,
        publisher=text(entry, "dc:publisher"),
        publication_date=text(entry, "prism:publicationDate"),
        is_part_of=parents,
        has_part=texts(entry, "dcterms:hasPart"),
        owner_count=integer(entry, "cinii:ownerCount"),
    )


def _parent_title(element: ET.Element) -> str:
    """Title attribute of dcterms:isPartOf, plain or dc:title."""
    title = (element.get("title") or "").strip()
    return title or attr(element, "dc:title")
