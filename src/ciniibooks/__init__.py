"""Client library for the CiNii Books web API.

Provides OpenSearch (Atom) search and RDF record retrieval with typed,
read-only results.
"""

import logging

from .api import CiNiiClient, get, search
from .config import Config, get_config, reset_config
from .errors import CiNiiError, ConfigurationError, NetworkError, ParseError
from .feed import Entry, ParentWork, SearchResult, parse_atom_feed
from .record import (
    Author,
    Description,
    DescriptionRole,
    Holding,
    NameField,
    Record,
    ResourceField,
    TextField,
    parse_record,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CiNiiClient",
    "search",
    "get",
    "Config",
    "get_config",
    "reset_config",
    "CiNiiError",
    "ConfigurationError",
    "NetworkError",
    "ParseError",
    "SearchResult",
    "Entry",
    "ParentWork",
    "parse_atom_feed",
    "Record",
    "Description",
    "DescriptionRole",
    "Author",
    "Holding",
    "NameField",
    "ResourceField",
    "TextField",
    "parse_record",
]
