"""
Request option schemas for the Pastebin client.

One dataclass per client operation. Enum-valued fields accept either the
enum member or its raw wire value and are coerced on construction, so an
unsupported value is rejected before a request is built.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from ..errors import PastebinValidationError
from .paste_format import PasteFormat

DEFAULT_DOMAIN = "pastebin.com"
DEFAULT_PASTE_NAME = "Untitled"
MAX_PASTE_NAME_LENGTH = 100
MIN_RESULTS_LIMIT = 1
MAX_RESULTS_LIMIT = 1000


class Publicity(IntEnum):
    """Visibility of a paste (``api_paste_private``)."""

    PUBLIC = 0
    UNLISTED = 1
    PRIVATE = 2


class ExpireDate(str, Enum):
    """Time-to-live codes (``api_paste_expire_date``)."""

    NEVER = "N"
    TEN_MINUTES = "10M"
    ONE_HOUR = "1H"
    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    TWO_WEEKS = "2W"
    ONE_MONTH = "1M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"


def coerce_format(value) -> PasteFormat:
    try:
        return PasteFormat.parse(value)
    except ValueError:
        raise PastebinValidationError(f"Unsupported paste format: {value!r}") from None


def coerce_publicity(value) -> Publicity:
    try:
        return Publicity(int(value))
    except (TypeError, ValueError):
        raise PastebinValidationError(
            f"Publicity must be one of 0 (public), 1 (unlisted), 2 (private), got {value!r}"
        ) from None


def coerce_expire_date(value) -> ExpireDate:
    if isinstance(value, ExpireDate):
        return value
    try:
        return ExpireDate(str(value).strip().upper())
    except ValueError:
        valid = ", ".join(e.value for e in ExpireDate)
        raise PastebinValidationError(
            f"Unsupported expire date {value!r} (expected one of {valid})"
        ) from None


@dataclass(frozen=True)
class ClientOptions:
    """Client configuration: the dev key and an optional proxy domain."""

    api_key: str
    # Domain of a reverse proxy in front of the API, if any
    domain: str = DEFAULT_DOMAIN


@dataclass
class CreateOptions:
    """Options for ``PasteClient.create_paste``."""

    code: str
    name: Optional[str] = None
    format: PasteFormat = PasteFormat.JAVASCRIPT
    publicity: Publicity = Publicity.PUBLIC
    expire_date: ExpireDate = ExpireDate.NEVER
    # User token from login; without it the paste is created as a guest
    api_user_key: Optional[str] = None
    folder_key: Optional[str] = None

    def __post_init__(self):
        self.format = coerce_format(self.format)
        self.publicity = coerce_publicity(self.publicity)
        self.expire_date = coerce_expire_date(self.expire_date)


@dataclass
class GetPastesOptions:
    """Options for ``PasteClient.get_pastes_by_user``."""

    user_key: str
    limit: Optional[int] = None


@dataclass
class DeletePasteOptions:
    """Options for ``PasteClient.delete_paste_by_key``."""

    user_key: str
    paste_key: str


@dataclass
class GetRawPasteOptions:
    """Options for ``PasteClient.get_raw_paste_by_key``.

    ``user_key`` is only needed to read the caller's own private pastes.
    """

    paste_key: str
    user_key: Optional[str] = None


@dataclass
class LoginOptions:
    """Options for ``PasteClient.login``."""

    name: str
    password: str
