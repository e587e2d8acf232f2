"""
Pastebin API Client.

Provides:
- Create a paste (guest or user-owned, with format/publicity/expiry)
- List a user's pastes as ParsedPaste records
- Delete a user's paste by key
- Fetch raw paste content
- Log in to obtain a user key

Supports an alternate domain for reverse proxies.
"""

from ..errors import (
    PastebinAPIError,
    PastebinError,
    PastebinResponseError,
    PastebinValidationError,
)
from .client import PasteClient, encode, extract_paste_key, parse_paste_list

__all__ = [
    "PasteClient",
    "PastebinAPIError",
    "PastebinError",
    "PastebinResponseError",
    "PastebinValidationError",
    "encode",
    "extract_paste_key",
    "parse_paste_list",
]
