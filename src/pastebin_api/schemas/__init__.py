"""
Typed schemas for Pastebin API requests and responses.
"""

from .options import (
    DEFAULT_DOMAIN,
    DEFAULT_PASTE_NAME,
    MAX_PASTE_NAME_LENGTH,
    MAX_RESULTS_LIMIT,
    MIN_RESULTS_LIMIT,
    ClientOptions,
    CreateOptions,
    DeletePasteOptions,
    ExpireDate,
    GetPastesOptions,
    GetRawPasteOptions,
    LoginOptions,
    Publicity,
    coerce_expire_date,
    coerce_format,
    coerce_publicity,
)
from .parsed_paste import ParsedPaste
from .paste_format import PasteFormat

__all__ = [
    "DEFAULT_DOMAIN",
    "DEFAULT_PASTE_NAME",
    "MAX_PASTE_NAME_LENGTH",
    "MAX_RESULTS_LIMIT",
    "MIN_RESULTS_LIMIT",
    "ClientOptions",
    "CreateOptions",
    "DeletePasteOptions",
    "ExpireDate",
    "GetPastesOptions",
    "GetRawPasteOptions",
    "LoginOptions",
    "ParsedPaste",
    "PasteFormat",
    "Publicity",
    "coerce_expire_date",
    "coerce_format",
    "coerce_publicity",
]
