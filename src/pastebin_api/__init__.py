"""
Typed client for the Pastebin API.

Create, list, delete and fetch pastes and log in, over the form-encoded POST
endpoints of pastebin.com or a reverse proxy in front of it.
"""

from .client import (
    PasteClient,
    PastebinAPIError,
    PastebinError,
    PastebinResponseError,
    PastebinValidationError,
    extract_paste_key,
)
from .schemas import (
    ClientOptions,
    CreateOptions,
    DeletePasteOptions,
    ExpireDate,
    GetPastesOptions,
    GetRawPasteOptions,
    LoginOptions,
    ParsedPaste,
    PasteFormat,
    Publicity,
)

__version__ = "0.1.0"

__all__ = [
    "ClientOptions",
    "CreateOptions",
    "DeletePasteOptions",
    "ExpireDate",
    "GetPastesOptions",
    "GetRawPasteOptions",
    "LoginOptions",
    "ParsedPaste",
    "PasteClient",
    "PasteFormat",
    "PastebinAPIError",
    "PastebinError",
    "PastebinResponseError",
    "PastebinValidationError",
    "Publicity",
    "extract_paste_key",
]
