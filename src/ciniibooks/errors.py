"""Exceptions raised by the CiNii Books client."""

from typing import Optional


class CiNiiError(Exception):
    """Base exception for CiNii Books API errors."""

    pass


class ConfigurationError(CiNiiError):
    """Raised when a required setting (the appid) is missing."""

    pass


class NetworkError(CiNiiError):
    """Raised when the remote endpoint cannot be reached.

    Also raised for non-2xx responses, with ``status_code`` set.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(CiNiiError):
    """Raised when a response body does not decode into the expected XML shape."""

    pass
