"""Search results (Atom feed) module."""

from .parser import parse_atom_feed
from .schemas import Entry, ParentWork, SearchResult

__all__ = [
    "SearchResult",
    "Entry",
    "ParentWork",
    "parse_atom_feed",
]
