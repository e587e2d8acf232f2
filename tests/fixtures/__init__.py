"""
Test fixtures for Pastebin API responses.

This module provides sample response bodies:
- list_two_pastes.xml: api_option=list answer with two pastes
- list_one_paste.xml: api_option=list answer with a single paste
"""

from pathlib import Path
from urllib.parse import parse_qs

FIXTURES_DIR = Path(__file__).parent

API_KEY = "test-dev-key-12345"
USER_KEY = "test-user-key-67890"


def load_fixture(name: str) -> str:
    """Load a fixture file as string."""
    filepath = FIXTURES_DIR / name
    return filepath.read_text(encoding="utf-8")


def get_two_paste_listing() -> str:
    """Get a listing with two pastes."""
    return load_fixture("list_two_pastes.xml")


def get_one_paste_listing() -> str:
    """Get a listing with exactly one paste."""
    return load_fixture("list_one_paste.xml")


def form_fields(request) -> dict[str, str]:
    """Decode the form body of a captured request into a flat dict."""
    body = request.body
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    return {key: values[0] for key, values in parse_qs(body or "", keep_blank_values=True).items()}
