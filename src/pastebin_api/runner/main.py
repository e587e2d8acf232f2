"""
CLI main entry point.
"""

import argparse
import logging
import sys
from pathlib import Path

import requests

from ..client import PasteClient, PastebinError, extract_paste_key
from ..config import Config, ConfigValidationError, create_default_config, load_config
from ..schemas import (
    CreateOptions,
    DeletePasteOptions,
    GetPastesOptions,
    GetRawPasteOptions,
    LoginOptions,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_cli() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pastebin-api",
        description="Create, list, delete and fetch Pastebin pastes",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("pastebin.yaml"),
        help="Path to config file (default: pastebin.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # create command
    create_parser = subparsers.add_parser("create", help="Create a paste from a file or stdin")
    create_parser.add_argument(
        "file",
        type=Path,
        nargs="?",
        help="File to paste (default: read stdin)",
    )
    create_parser.add_argument("--name", type=str, help="Paste title (max 100 characters)")
    create_parser.add_argument("--format", type=str, help="Syntax highlighting format")
    create_parser.add_argument(
        "--publicity",
        type=int,
        choices=[0, 1, 2],
        help="0 = public, 1 = unlisted, 2 = private",
    )
    create_parser.add_argument("--expire", type=str, help="Expire code (N, 10M, 1H, 1D, ...)")
    create_parser.add_argument("--folder", type=str, help="Folder key")
    create_parser.add_argument(
        "--guest",
        action="store_true",
        help="Create the paste without logging in",
    )

    # list command
    list_parser = subparsers.add_parser("list", help="List your pastes")
    list_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum pastes to list, 1-1000 (default: API default of 50)",
    )

    # delete command
    delete_parser = subparsers.add_parser("delete", help="Delete one of your pastes")
    delete_parser.add_argument("paste", type=str, help="Paste key or URL")

    # raw command
    raw_parser = subparsers.add_parser("raw", help="Print the raw content of a paste")
    raw_parser.add_argument("paste", type=str, help="Paste key or URL")

    subparsers.add_parser("login", help="Log in and print the user key")
    subparsers.add_parser("init-config", help="Write a default config file")

    return parser


def resolve_user_key(client: PasteClient, config: Config) -> str:
    """Get a user key from config, logging in with the configured credentials if needed."""
    if config.account.user_key:
        return config.account.user_key
    if not (config.account.username and config.account.password):
        raise ConfigValidationError(
            "account.user_key or account.username/account.password is required"
        )
    logger.debug(f"Logging in as {config.account.username}")
    return client.login(LoginOptions(name=config.account.username, password=config.account.password))


def cmd_create(
    config: Config,
    file: Path | None,
    name: str | None,
    paste_format: str | None,
    publicity: int | None,
    expire: str | None,
    folder: str | None,
    guest: bool,
) -> int:
    """Create a paste."""
    try:
        code = file.read_text(encoding="utf-8") if file else sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"❌ Cannot read {file or 'stdin'}: {e}")
        return 1
    if not code:
        print("❌ Nothing to paste")
        return 1

    with PasteClient.from_config(config) as client:
        user_key = None
        if not guest and config.account.has_credentials():
            user_key = resolve_user_key(client, config)

        options = CreateOptions(
            code=code,
            name=name or (file.name if file else None),
            format=paste_format or config.defaults.format,
            publicity=publicity if publicity is not None else config.defaults.publicity,
            expire_date=expire or config.defaults.expire_date,
            api_user_key=user_key,
            folder_key=folder,
        )
        url = client.create_paste(options)

    print(url)
    return 0


def cmd_list(config: Config, limit: int | None) -> int:
    """List the user's pastes."""
    with PasteClient.from_config(config) as client:
        user_key = resolve_user_key(client, config)
        pastes = client.get_pastes_by_user(GetPastesOptions(user_key=user_key, limit=limit))

    if not pastes:
        print("No pastes found")
        return 0

    for paste in pastes:
        fmt = getattr(paste.format_short, "value", paste.format_short)
        print(f"  📄 [{paste.key}] {paste.title or '(untitled)'}  {fmt}  {paste.hits} hits  {paste.url}")

    print(f"\n✓ Found {len(pastes)} paste(s)")
    return 0


def cmd_delete(config: Config, paste: str) -> int:
    """Delete a paste."""
    paste_key = extract_paste_key(paste)
    with PasteClient.from_config(config) as client:
        user_key = resolve_user_key(client, config)
        removed = client.delete_paste_by_key(
            DeletePasteOptions(user_key=user_key, paste_key=paste_key)
        )

    if removed:
        print(f"✓ Removed paste {paste_key}")
        return 0
    print(f"❌ Paste {paste_key} was not removed")
    return 1


def cmd_raw(config: Config, paste: str) -> int:
    """Print raw paste content."""
    paste_key = extract_paste_key(paste)
    with PasteClient.from_config(config) as client:
        user_key = resolve_user_key(client, config) if config.account.has_credentials() else None
        content = client.get_raw_paste_by_key(
            GetRawPasteOptions(paste_key=paste_key, user_key=user_key)
        )

    sys.stdout.write(content)
    return 0


def cmd_login(config: Config) -> int:
    """Log in and print the user key."""
    if not (config.account.username and config.account.password):
        print("❌ account.username and account.password are required")
        return 1

    with PasteClient.from_config(config) as client:
        user_key = client.login(
            LoginOptions(name=config.account.username, password=config.account.password)
        )

    print(user_key)
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_cli()
    parsed = parser.parse_args(args)

    setup_logging(parsed.verbose)

    if not parsed.command:
        parser.print_help()
        return 1

    if parsed.command == "init-config":
        if parsed.config.exists():
            print(f"❌ {parsed.config} already exists")
            return 1
        create_default_config(parsed.config)
        print(f"✓ Wrote {parsed.config}")
        return 0

    # Load config
    try:
        config = load_config(parsed.config)
    except Exception as e:
        print(f"❌ Failed to load config: {e}")
        return 1

    errors = config.validate()
    if errors:
        print("❌ Invalid configuration:")
        for error in errors:
            print(f"   - {error}")
        return 1

    # Route to command
    try:
        if parsed.command == "create":
            return cmd_create(
                config,
                file=parsed.file,
                name=parsed.name,
                paste_format=parsed.format,
                publicity=parsed.publicity,
                expire=parsed.expire,
                folder=parsed.folder,
                guest=parsed.guest,
            )
        elif parsed.command == "list":
            return cmd_list(config, parsed.limit)
        elif parsed.command == "delete":
            return cmd_delete(config, parsed.paste)
        elif parsed.command == "raw":
            return cmd_raw(config, parsed.paste)
        elif parsed.command == "login":
            return cmd_login(config)
        else:
            parser.print_help()
            return 1
    except (PastebinError, ConfigValidationError) as e:
        print(f"❌ {e}")
        return 1
    except requests.RequestException as e:
        logger.debug("Request failed", exc_info=True)
        print(f"❌ Request failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
