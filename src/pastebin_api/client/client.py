"""
Pastebin API client implementation.
"""

from enum import Enum
from typing import Any, Optional, Union
from urllib.parse import quote
from xml.etree import ElementTree as ET
import logging

import requests

from ..errors import (
    PastebinAPIError,
    PastebinResponseError,
    PastebinValidationError,
)
from ..schemas import (
    DEFAULT_DOMAIN,
    DEFAULT_PASTE_NAME,
    MAX_PASTE_NAME_LENGTH,
    MAX_RESULTS_LIMIT,
    MIN_RESULTS_LIMIT,
    ClientOptions,
    CreateOptions,
    DeletePasteOptions,
    GetPastesOptions,
    GetRawPasteOptions,
    LoginOptions,
    ParsedPaste,
)

logger = logging.getLogger(__name__)

BAD_REQUEST_PREFIX = "bad api request"
NO_PASTES_PREFIX = "no pastes found"
PASTE_REMOVED_PREFIX = "paste removed"

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"


def encode(data: dict[str, Any]) -> str:
    """
    Encode fields as an ``application/x-www-form-urlencoded`` body.

    Fields with a falsy value ("", 0, None) are left out entirely.
    Enum members are sent as their value.
    """
    pairs = []
    for key, value in data.items():
        if not value:
            continue
        if isinstance(value, Enum):
            value = value.value
        pairs.append(f"{quote(key, safe=_URI_COMPONENT_SAFE)}={quote(str(value), safe=_URI_COMPONENT_SAFE)}")
    return "&".join(pairs)


def extract_paste_key(paste_url: Optional[str]) -> Optional[str]:
    """Get the paste key from a paste URL such as ``https://pastebin.com/0b42rwhf``."""
    if not paste_url:
        return None
    return paste_url.rstrip("/").split("/")[-1]


def _is_bad_request(text: str) -> bool:
    return text.lower().startswith(BAD_REQUEST_PREFIX)


def parse_paste_list(data: str) -> list[ParsedPaste]:
    """
    Parse the XML body of a ``list`` response.

    The service returns a bare sequence of ``<paste>`` elements with no
    enclosing root, so the body is wrapped before parsing. A single match
    and many matches both come back as a list, in document order.
    """
    try:
        root = ET.fromstring(f"<pastes>{data}</pastes>")
    except ET.ParseError as e:
        raise PastebinResponseError(f"Failed to parse paste list: {e}", response_body=data) from e

    return [ParsedPaste.from_xml_element(element) for element in root.findall("paste")]


class PasteClient:
    """
    Client for the Pastebin API.

    Features:
    - Create pastes (as guest or as a logged-in user)
    - List and delete a user's pastes
    - Fetch raw paste content
    - Log in to obtain a user key

    The API key and domain are fixed at construction. User keys are passed
    per call and never stored.
    """

    def __init__(
        self,
        options: Union[str, ClientOptions],
        timeout: Optional[float] = None,
    ):
        """
        Initialize Pastebin client.

        Args:
            options: The API dev key, or a ClientOptions with the key and
                an optional reverse-proxy domain
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        if not options:
            raise PastebinValidationError(
                "'options' must be an API key string or a ClientOptions (PasteClient)"
            )

        if isinstance(options, str):
            options = ClientOptions(api_key=options)
        elif not isinstance(options, ClientOptions):
            raise PastebinValidationError(
                f"'options' must be an API key string or a ClientOptions, got {type(options).__name__} (PasteClient)"
            )

        self._api_key = options.api_key
        self._domain = options.domain or DEFAULT_DOMAIN
        self.timeout = timeout

        self.session = requests.Session()
        self.session.headers.update({
            "Content-Type": "application/x-www-form-urlencoded",
        })

    @classmethod
    def from_config(cls, config) -> "PasteClient":
        """Build a client from a loaded ``Config``."""
        return cls(
            ClientOptions(api_key=config.pastebin.api_key, domain=config.pastebin.domain),
            timeout=config.pastebin.timeout_seconds,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def post_url(self) -> str:
        return f"https://{self._domain}/api/api_post.php"

    @property
    def login_url(self) -> str:
        return f"https://{self._domain}/api/api_login.php"

    @property
    def raw_url(self) -> str:
        return f"https://{self._domain}/api/api_raw.php"

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "PasteClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _post(self, url: str, fields: dict[str, Any]) -> str:
        """POST form fields and return the response text.

        Raises PastebinAPIError for "Bad API request" answers. Transport
        errors from requests propagate unchanged.
        """
        logger.debug(f"POST {url} ({', '.join(k for k, v in fields.items() if v)})")

        response = self.session.post(url, data=encode(fields), timeout=self.timeout)
        # requests assumes ISO-8859-1 for text/* without a charset; pastes are UTF-8
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        text = response.text

        if _is_bad_request(text):
            logger.warning(f"Pastebin rejected request to {url}: {text}")
            raise PastebinAPIError(text, status_code=response.status_code)

        response.raise_for_status()
        return text

    def create_paste(self, options: CreateOptions) -> str:
        """
        Create a paste.

        Args:
            options: Paste content and settings

        Returns:
            The URL of the created paste

        See https://pastebin.com/doc_api#2
        """
        if options.name and len(options.name) > MAX_PASTE_NAME_LENGTH:
            raise PastebinValidationError(
                f"Name of paste cannot be longer than {MAX_PASTE_NAME_LENGTH} characters"
                " (PasteClient.create_paste)"
            )

        return self._post(self.post_url, {
            "api_dev_key": self._api_key,
            "api_option": "paste",
            "api_paste_name": options.name or DEFAULT_PASTE_NAME,
            "api_paste_code": options.code,
            "api_paste_format": options.format,
            # Sent as text so that 0 (public) is not dropped as falsy
            "api_paste_private": str(int(options.publicity)),
            "api_paste_expire_date": options.expire_date,
            "api_user_key": options.api_user_key or "",
            "api_folder_key": options.folder_key or "",
        })

    def get_pastes_by_user(self, options: GetPastesOptions) -> list[ParsedPaste]:
        """
        List the pastes of a logged-in user.

        Args:
            options: User key and an optional result limit (1-1000)

        Returns:
            ParsedPaste objects in the order the API lists them; empty
            when the user has no pastes

        See https://pastebin.com/doc_api#10
        """
        limit = options.limit
        if limit is not None:
            try:
                limit = int(limit)
            except (TypeError, ValueError):
                raise PastebinValidationError(
                    f"Limit must be an integer, got {options.limit!r} (PasteClient.get_pastes_by_user)"
                ) from None

        if limit is not None and not (MIN_RESULTS_LIMIT <= limit <= MAX_RESULTS_LIMIT):
            raise PastebinValidationError(
                f"Limit cannot be lower than {MIN_RESULTS_LIMIT} or higher than"
                f" {MAX_RESULTS_LIMIT} (PasteClient.get_pastes_by_user)"
            )

        if not options.user_key:
            raise PastebinValidationError(
                "'user_key' must be provided (PasteClient.get_pastes_by_user)"
            )

        data = self._post(self.post_url, {
            "api_dev_key": self._api_key,
            "api_user_key": options.user_key,
            "api_results_limit": limit,
            "api_option": "list",
        })

        if data.lower().startswith(NO_PASTES_PREFIX):
            return []

        pastes = parse_paste_list(data)
        logger.debug(f"Listed {len(pastes)} paste(s)")
        return pastes

    def delete_paste_by_key(self, options: DeletePasteOptions) -> bool:
        """
        Delete one of the user's pastes.

        Returns:
            True if the paste was removed. Any other non-error answer
            from the API (for example "Paste not found") gives False.

        See https://pastebin.com/doc_api#11
        """
        if not options.user_key:
            raise PastebinValidationError(
                "'user_key' must be provided (PasteClient.delete_paste_by_key)"
            )

        if not options.paste_key:
            raise PastebinValidationError(
                "'paste_key' must be provided (PasteClient.delete_paste_by_key)"
            )

        data = self._post(self.post_url, {
            "api_dev_key": self._api_key,
            "api_option": "delete",
            "api_paste_key": options.paste_key,
            "api_user_key": options.user_key,
        })

        return data.lower().startswith(PASTE_REMOVED_PREFIX)

    def get_raw_paste_by_key(self, options: GetRawPasteOptions) -> str:
        """
        Get the raw content of a paste.

        See https://pastebin.com/doc_api#14
        """
        if not options.paste_key:
            raise PastebinValidationError(
                "'paste_key' must be provided (PasteClient.get_raw_paste_by_key)"
            )

        return self._post(self.raw_url, {
            "api_option": "show_paste",
            "api_dev_key": self._api_key,
            "api_user_key": options.user_key or "",
            "api_paste_key": options.paste_key,
        })

    def login(self, options: LoginOptions) -> str:
        """
        Log in to get a user key for the user-scoped operations.

        Returns:
            The user key

        See https://pastebin.com/doc_api#9
        """
        return self._post(self.login_url, {
            "api_dev_key": self._api_key,
            "api_user_name": options.name,
            "api_user_password": options.password,
        })
