"""XML namespaces used by CiNii Books responses, and small ElementTree helpers."""

import logging
from typing import Optional
from xml.etree import ElementTree as ET

from .errors import ParseError

logger = logging.getLogger(__name__)

# Atom feed (search)
ATOM_NS = {
    "atom": "http://www.w3.org/2005/Atom",
    "opensearch": "http://a9.com/-/spec/opensearch/1.1/",
}

# RDF record (retrieve)
RDF_NS = {
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
    "foaf": "http://xmlns.com/foaf/0.1/",
    "bibo": "http://purl.org/ontology/bibo/",
}

# Shared by both payloads
COMMON_NS = {
    "dc": "http://purl.org/dc/elements/1.1/",
    "dcterms": "http://purl.org/dc/terms/",
    "prism": "http://prismstandard.org/namespaces/basic/2.0/",
    "cinii": "http://ci.nii.ac.jp/ns/1.0/",
    "xml": "http://www.w3.org/XML/1998/namespace",
}

NS = {**ATOM_NS, **RDF_NS, **COMMON_NS}


def qname(prefixed: str) -> str:
    """Expand ``rdf:about`` to ElementTree's ``{uri}about`` form."""
    prefix, _, local = prefixed.partition(":")
    return f"{{{NS[prefix]}}}{local}"


def parse_document(body: bytes | str, root_tag: str) -> ET.Element:
    """Parse a response body and check its root element.

    Args:
        body: Raw response body
        root_tag: Expected root, prefixed (``atom:feed``)

    Returns:
        The root element

    Raises:
        ParseError: If the body is not well-formed XML or the root differs
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        logger.warning("Malformed XML response: %s", e)
        raise ParseError(f"Malformed XML: {e}") from e

    if root.tag != qname(root_tag):
        logger.warning("Unexpected root element %s", root.tag)
        raise ParseError(f"Expected <{root_tag}> root element, got {root.tag}")

    return root


def text(element: ET.Element, path: str) -> str:
    """Stripped text of the first match of ``path``, or empty string."""
    return (element.findtext(path, default="", namespaces=NS) or "").strip()


def texts(element: ET.Element, path: str) -> tuple[str, ...]:
    """Stripped text of every match of ``path``, in document order."""
    return tuple((e.text or "").strip() for e in element.findall(path, NS))


def integer(element: ET.Element, path: str) -> int:
    """Integer value of ``path``; missing or empty elements decode to 0.

    Raises:
        ParseError: If the element holds non-integer text
    """
    value = text(element, path)
    if not value:
        return 0
    try:
        return int(value)
    except ValueError as e:
        raise ParseError(f"Expected an integer in <{path}>, got {value!r}") from e


def attr(element: Optional[ET.Element], name: str) -> str:
    """Namespaced attribute value, or empty string when missing."""
    if element is None:
        return ""
    return (element.get(qname(name)) or "").strip()
