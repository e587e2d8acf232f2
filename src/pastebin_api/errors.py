"""
Exception hierarchy shared by the client and the option schemas.

Transport failures raised by ``requests`` are not wrapped; they reach the
caller as ``requests.RequestException`` subclasses.
"""

from typing import Optional


class PastebinError(Exception):
    """Base exception for Pastebin client errors."""
    pass


class PastebinValidationError(PastebinError, ValueError):
    """Missing or malformed input, raised before any request is made."""
    pass


class PastebinAPIError(PastebinError):
    """The API answered with a ``Bad API request`` message."""

    def __init__(self, response_body: str, status_code: Optional[int] = None):
        self.response_body = response_body
        self.status_code = status_code
        super().__init__(response_body)


class PastebinResponseError(PastebinError):
    """The API answered with a body that could not be parsed."""

    def __init__(self, message: str, response_body: Optional[str] = None):
        self.message = message
        self.response_body = response_body
        super().__init__(message)
