"""
Configuration management.

Configuration for the command line and for ``PasteClient.from_config``.
The client itself only needs an API key and a domain; everything else here
serves the CLI.

Key invariants:
- Environment variables override values from the YAML file
- The user key is read, never written back: nothing here persists tokens
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .schemas import (
    DEFAULT_DOMAIN,
    ExpireDate,
    PasteFormat,
    Publicity,
)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class PastebinConfig:
    """API endpoint configuration.

    - api_key: Developer key from https://pastebin.com/doc_api
    - domain: Host serving /api/*.php (pastebin.com, or a reverse proxy)
    """

    api_key: str = ""
    domain: str = DEFAULT_DOMAIN
    # Request timeout (seconds)
    timeout_seconds: float = 30


@dataclass
class AccountConfig:
    """Credentials for user-scoped commands.

    If user_key is set it is used directly; otherwise the CLI logs in with
    username/password for the duration of one command.
    """

    username: str | None = None
    password: str | None = None
    user_key: str | None = None

    def has_credentials(self) -> bool:
        return bool(self.user_key or (self.username and self.password))


@dataclass
class PasteDefaults:
    """Defaults applied by the ``create`` command."""

    format: str = PasteFormat.JAVASCRIPT.value
    publicity: int = Publicity.PUBLIC.value
    expire_date: str = ExpireDate.NEVER.value


@dataclass
class Config:
    """Application configuration."""

    pastebin: PastebinConfig = field(default_factory=PastebinConfig)
    account: AccountConfig = field(default_factory=AccountConfig)
    defaults: PasteDefaults = field(default_factory=PasteDefaults)

    def validate(self) -> list[str]:
        """Validate configuration completeness and consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors: list[str] = []

        if not self.pastebin.api_key:
            errors.append("pastebin.api_key is required")
        if not self.pastebin.domain:
            errors.append("pastebin.domain must not be empty")
        timeout = self.pastebin.timeout_seconds
        if timeout is not None and not isinstance(timeout, (int, float)):
            errors.append(f"pastebin.timeout_seconds must be a number, got {timeout!r}")
        elif timeout is not None and timeout <= 0:
            errors.append("pastebin.timeout_seconds must be positive")

        try:
            PasteFormat.parse(self.defaults.format)
        except ValueError:
            errors.append(f"defaults.format '{self.defaults.format}' is not a known paste format")
        if self.defaults.publicity not in {p.value for p in Publicity}:
            errors.append("defaults.publicity must be 0, 1 or 2")
        if str(self.defaults.expire_date).upper() not in {e.value for e in ExpireDate}:
            errors.append(f"defaults.expire_date '{self.defaults.expire_date}' is not a known expire code")

        return errors


def load_config(config_path: Path) -> Config:
    """
    Load configuration from YAML file.

    Environment variables can override config values:
    - PASTEBIN_API_KEY
    - PASTEBIN_DOMAIN
    - PASTEBIN_TIMEOUT (request timeout in seconds)
    - PASTEBIN_USERNAME
    - PASTEBIN_PASSWORD
    - PASTEBIN_USER_KEY
    """
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    else:
        data = {}

    # API config
    pastebin_data = data.get("pastebin", {})
    timeout = pastebin_data.get("timeout_seconds", 30)
    if isinstance(timeout, str):
        try:
            timeout = float(timeout)
        except ValueError:
            pass  # Reported by validate()
    timeout_env = os.environ.get("PASTEBIN_TIMEOUT", "")
    if timeout_env:
        try:
            timeout = float(timeout_env)
        except ValueError:
            pass  # Keep file value

    pastebin = PastebinConfig(
        api_key=os.environ.get("PASTEBIN_API_KEY", pastebin_data.get("api_key", "")),
        domain=os.environ.get("PASTEBIN_DOMAIN", pastebin_data.get("domain", DEFAULT_DOMAIN)),
        timeout_seconds=timeout,
    )

    # Account config
    account_data = data.get("account", {})
    account = AccountConfig(
        username=os.environ.get("PASTEBIN_USERNAME", account_data.get("username")),
        password=os.environ.get("PASTEBIN_PASSWORD", account_data.get("password")),
        user_key=os.environ.get("PASTEBIN_USER_KEY", account_data.get("user_key")),
    )

    # Paste defaults
    defaults_data = data.get("defaults", {})
    defaults = PasteDefaults(
        format=defaults_data.get("format", PasteFormat.JAVASCRIPT.value),
        publicity=defaults_data.get("publicity", Publicity.PUBLIC.value),
        expire_date=defaults_data.get("expire_date", ExpireDate.NEVER.value),
    )

    return Config(pastebin=pastebin, account=account, defaults=defaults)


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    default_config = """# Pastebin API client configuration
#
# Environment variables override these values:
#   PASTEBIN_API_KEY, PASTEBIN_DOMAIN, PASTEBIN_TIMEOUT,
#   PASTEBIN_USERNAME, PASTEBIN_PASSWORD, PASTEBIN_USER_KEY

pastebin:
  api_key: "YOUR_API_DEV_KEY"           # https://pastebin.com/doc_api
  domain: "pastebin.com"                # Set to your reverse proxy host if any
  timeout_seconds: 30

# Needed for list/delete and for pastes owned by your account.
# Either a user_key from `pastebin-api login`, or username + password.
account:
  username: null
  password: null
  user_key: null

# Defaults for `pastebin-api create`
defaults:
  format: "javascript"                  # Any api_paste_format token
  publicity: 0                          # 0 = public, 1 = unlisted, 2 = private
  expire_date: "N"                      # N, 10M, 1H, 1D, 1W, 2W, 1M, 6M, 1Y
"""

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        f.write(default_config)
