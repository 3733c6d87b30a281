"""Identifier and URL helpers for CiNii Books.

CiNii embeds local identifiers (NCID, author ALID, library FAID, ISBN) in
URIs with a small, fixed set of prefixes. These helpers strip them and
build request URLs for the two API endpoints.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode

SEARCH_ENDPOINT = "http://ci.nii.ac.jp/books/opensearch/search"
RETRIEVE_ENDPOINT = "http://ci.nii.ac.jp/ncid"

ENTITY_MARKER = "#entity"
RDF_SUFFIX = ".rdf"

NCID_PREFIXES = (
    "http://ci.nii.ac.jp/ncid/",
    "https://ci.nii.ac.jp/ncid/",
)
AUTHOR_PREFIXES = (
    "http://ci.nii.ac.jp/author/",
    "https://ci.nii.ac.jp/author/",
)
LIBRARY_PREFIXES = (
    "http://ci.nii.ac.jp/library/",
    "https://ci.nii.ac.jp/library/",
)
ISBN_PREFIXES = ("urn:isbn:",)

KNOWN_PREFIXES = NCID_PREFIXES + AUTHOR_PREFIXES + LIBRARY_PREFIXES + ISBN_PREFIXES


def strip_identifier(uri: str, prefixes: Iterable[str] = KNOWN_PREFIXES) -> str:
    """Strip the first matching prefix and the ``#entity`` marker from a URI.

    Args:
        uri: URI such as ``http://ci.nii.ac.jp/author/DA12345#entity``
        prefixes: Prefixes to try, in order

    Returns:
        The local identifier (``DA12345``). Unknown URIs are returned
        unchanged apart from the marker.
    """
    value = uri.strip()
    for prefix in prefixes:
        if value.startswith(prefix):
            value = value[len(prefix):]
            break
    if value.endswith(ENTITY_MARKER):
        value = value[: -len(ENTITY_MARKER)]
    return value


def local_id(uri: str) -> str:
    """Strip any known CiNii prefix from a URI."""
    return strip_identifier(uri, KNOWN_PREFIXES)


def ncid_from_uri(uri: str) -> str:
    """``http://ci.nii.ac.jp/ncid/BA1111#entity`` -> ``BA1111``."""
    return strip_identifier(uri, NCID_PREFIXES)


def author_id_from_uri(uri: str) -> str:
    """``http://ci.nii.ac.jp/author/DA123#entity`` -> ``DA123`` (ALID)."""
    return strip_identifier(uri, AUTHOR_PREFIXES)


def library_id_from_uri(uri: str) -> str:
    """``http://ci.nii.ac.jp/library/FA123#entity`` -> ``FA123`` (FAID)."""
    return strip_identifier(uri, LIBRARY_PREFIXES)


def isbn_from_urn(urn: str) -> str:
    """``urn:isbn:9784000000000`` -> ``9784000000000``."""
    return strip_identifier(urn, ISBN_PREFIXES)


def build_search_url(params: Mapping[str, Any]) -> str:
    """Build the OpenSearch request URL.

    Keys are sorted and sequence values expanded into repeated parameters,
    so the same mapping always yields the same URL.
    """
    query = urlencode(sorted(params.items()), doseq=True)
    return f"{SEARCH_ENDPOINT}?{query}" if query else SEARCH_ENDPOINT


def build_record_url(identifier: str, appid: Optional[str] = None) -> str:
    """Normalize an NCID or record URL to the canonical RDF request URL.

    The endpoint prefix and ``.rdf`` suffix are added when missing, and the
    appid always goes on the final URL. Applying this to its own output
    returns the same URL.

    Args:
        identifier: Bare NCID (``BB19132110``) or full record URL
        appid: API key to attach; replaces any appid already on the URL

    Returns:
        URL such as ``http://ci.nii.ac.jp/ncid/BB19132110.rdf?appid=KEY``
    """
    base, _, query = identifier.strip().partition("?")

    if not base.startswith(NCID_PREFIXES):
        base = f"{RETRIEVE_ENDPOINT}/{base.lstrip('/')}"
    if base.endswith(ENTITY_MARKER):
        base = base[: -len(ENTITY_MARKER)]
    if not base.endswith(RDF_SUFFIX):
        base += RDF_SUFFIX

    params = parse_qsl(query, keep_blank_values=True)
    if appid:
        params = [(k, v) for k, v in params if k != "appid"]
        params.append(("appid", appid))

    if not params:
        return base
    return f"{base}?{urlencode(params)}"
