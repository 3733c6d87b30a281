"""Decode RDF/XML record responses into Record."""

import logging
from xml.etree import ElementTree as ET

from pydantic import ValidationError

from ..errors import ParseError
from ..namespaces import NS, attr, integer, parse_document, qname, text, texts
from .schemas import (
    Author,
    Description,
    Holding,
    NameField,
    Record,
    ResourceField,
    TextField,
)

logger = logging.getLogger(__name__)

XML_LANG = qname("xml:lang")


def parse_record(body: bytes | str) -> Record:
    """Parse an RDF/XML document returned by the retrieve endpoint.

    Args:
        body: Raw response body

    Returns:
        Record with one Description per rdf:Description block

    Raises:
        ParseError: If the body is malformed or not an rdf:RDF document
    """
    root = parse_document(body, "rdf:RDF")

    try:
        record = Record(
            descriptions=tuple(
                _parse_description(d) for d in root.findall("rdf:Description", NS)
            )
        )
    except ValidationError as e:
        raise ParseError(f"Unexpected record content: {e}") from e

    logger.debug("Parsed record with %d descriptions", len(record.descriptions))
    return record


def _text_fields(element: ET.Element, path: str) -> tuple[TextField, ...]:
    return tuple(
        TextField(text=(e.text or "").strip(), lang=e.get(XML_LANG, ""))
        for e in element.findall(path, NS)
    )


def _resource_fields(element: ET.Element, path: str) -> tuple[ResourceField, ...]:
    return tuple(
        ResourceField(resource=attr(e, "rdf:resource"), title=attr(e, "dc:title"))
        for e in element.findall(path, NS)
    )


def _name_field(element: ET.Element) -> NameField:
    """foaf:Person or foaf:Organization."""
    return NameField(
        about=attr(element, "rdf:about"),
        name=_text_fields(element, "foaf:name"),
        see_also=attr(element.find("rdfs:seeAlso", NS), "rdf:resource"),
    )


def _parse_description(element: ET.Element) -> Description:
    authors = tuple(
        Author(author=_name_field(p)) for p in element.findall("foaf:maker/foaf:Person", NS)
    )
    holdings = tuple(
        Holding(holding=_name_field(o))
        for o in element.findall("bibo:owner/foaf:Organization", NS)
    )

    return Description(
        about=attr(element, "rdf:about"),
        type=attr(element.find("rdf:type", NS), "rdf:resource"),
        is_primary_topic_of=attr(element.find("foaf:isPrimaryTopicOf", NS), "rdf:resource"),
        title=_text_fields(element, "dc:title"),
        alternative=texts(element, "dcterms:alternative"),
        creator=text(element, "dc:creator"),
        publisher=texts(element, "dc:publisher"),
        language=text(element, "dc:language"),
        date=text(element, "dc:date"),
        topics=_resource_fields(element, "foaf:topic"),
        ncid=text(element, "cinii:ncid"),
        edition=text(element, "prism:edition"),
        is_part_of=_resource_fields(element, "dcterms:isPartOf"),
        has_part=_resource_fields(element, "dcterms:hasPart"),
        content_of_works=texts(element, "cinii:contentOfWorks"),
        medium=attr(element.find("dcterms:medium", NS), "dc:title"),
        owner_count=integer(element, "cinii:ownerCount"),
        lccn=tuple(v for v in texts(element, "bibo:lccn") if v),
        see_also=tuple(
            attr(e, "rdf:resource") for e in element.findall("rdfs:seeAlso", NS)
        ),
        authors=authors,
        holdings=holdings,
        role=Description.role_for(authors, holdings),
    )
