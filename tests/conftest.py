"""Test fixtures and utilities."""

from pathlib import Path

import pytest

from fixtures import API_KEY, USER_KEY, get_one_paste_listing, get_two_paste_listing


@pytest.fixture(autouse=True)
def clean_pastebin_env(monkeypatch):
    """Keep PASTEBIN_* variables from the developer's shell out of tests."""
    for name in (
        "PASTEBIN_API_KEY",
        "PASTEBIN_DOMAIN",
        "PASTEBIN_TIMEOUT",
        "PASTEBIN_USERNAME",
        "PASTEBIN_PASSWORD",
        "PASTEBIN_USER_KEY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_list_xml() -> str:
    """Listing with two pastes."""
    return get_two_paste_listing()


@pytest.fixture
def sample_single_xml() -> str:
    """Listing with exactly one paste."""
    return get_one_paste_listing()


@pytest.fixture
def config_file(tmp_path) -> Path:
    """Config file with an API key and a stored user key."""
    path = tmp_path / "pastebin.yaml"
    path.write_text(
        f"""
pastebin:
  api_key: "{API_KEY}"
  domain: "pastebin.com"
  timeout_seconds: 5
account:
  user_key: "{USER_KEY}"
"""
    )
    return path
