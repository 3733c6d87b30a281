"""RDF record retrieval module."""

from .parser import parse_record
from .schemas import (
    Author,
    Description,
    DescriptionRole,
    Holding,
    NameField,
    Record,
    ResourceField,
    TextField,
)

__all__ = [
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
