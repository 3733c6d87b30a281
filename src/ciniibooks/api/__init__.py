"""API module for the CiNii Books endpoints.

Provides the HTTP client and one-shot search/get helpers.
"""

from .client import CiNiiClient, get, search

__all__ = [
    "CiNiiClient",
    "search",
    "get",
]
