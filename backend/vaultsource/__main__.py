"""Command line access to a file vault.

Usage:
    python -m vaultsource --vault PATH [--password PW] COMMAND [args]

Commands:
    save HISTORY_JSON                          Encrypt a JSON history file into the vault
    load                                       Decrypt the vault and print its history as JSON
    attach-put VAULT_ID ATTACHMENT_ID FILE     Store a file as an attachment
    attach-get VAULT_ID ATTACHMENT_ID OUT      Write an attachment to OUT
    attach-info VAULT_ID ATTACHMENT_ID         Print attachment details as JSON
    attach-rm VAULT_ID ATTACHMENT_ID           Delete an attachment

The password may also be given via BCUP_PASSWORD. attach-put and attach-get
accept --raw to skip encryption and decryption.
"""

import argparse
import asyncio
import json
import os
import sys
from pathlib import Path
from typing import Optional

from .config import get_settings
from .credentials import Credentials
from .datasources import FileDatasource
from .errors import DatasourceError
from .logging import get_logger, setup_logging

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vaultsource", description="Encrypted file vault tool")
    parser.add_argument("--vault", required=True, help="Vault file path")
    parser.add_argument("--password", default="", help="Master password (default: BCUP_PASSWORD)")

    commands = parser.add_subparsers(dest="command", required=True)

    save = commands.add_parser("save", help="Encrypt a JSON history file into the vault")
    save.add_argument("history", help="JSON file holding the history")

    commands.add_parser("load", help="Print the decrypted history as JSON")

    put = commands.add_parser("attach-put", help="Store an attachment")
    put.add_argument("vault_id")
    put.add_argument("attachment_id")
    put.add_argument("file")
    put.add_argument("--raw", action="store_true", help="Store the file as-is, without encrypting")

    get = commands.add_parser("attach-get", help="Fetch an attachment")
    get.add_argument("vault_id")
    get.add_argument("attachment_id")
    get.add_argument("out")
    get.add_argument("--raw", action="store_true", help="Write the stored bytes without decrypting")

    for name, help_text in (("attach-info", "Show attachment details"), ("attach-rm", "Delete an attachment")):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("vault_id")
        sub.add_argument("attachment_id")

    return parser


async def run(args: argparse.Namespace) -> Optional[str]:
    """Execute one command. Returns text to print, if any."""
    password = args.password or os.getenv("BCUP_PASSWORD", "")
    credentials = Credentials.from_datasource({"type": "file", "path": args.vault}, password or None)
    try:
        datasource = FileDatasource(credentials)
        needs_key = credentials if not getattr(args, "raw", False) else None

        if args.command == "save":
            history = json.loads(Path(args.history).read_text(encoding="utf-8"))
            await datasource.save(history, credentials)
            logger.info(f"Vault saved to {datasource.path}")
            return None

        elif args.command == "load":
            history = await datasource.load(credentials)
            return json.dumps(history, indent=2)

        elif args.command == "attach-put":
            data = Path(args.file).read_bytes()
            await datasource.put_attachment(args.vault_id, args.attachment_id, data, needs_key)
            return None

        elif args.command == "attach-get":
            data = await datasource.get_attachment(args.vault_id, args.attachment_id, needs_key)
            Path(args.out).write_bytes(data)
            return None

        elif args.command == "attach-info":
            details = await datasource.get_attachment_details(args.vault_id, args.attachment_id)
            return json.dumps(details.to_dict(), indent=2)

        elif args.command == "attach-rm":
            await datasource.remove_attachment(args.vault_id, args.attachment_id)
            return None

        raise ValueError(f"Unknown command: {args.command}")
    finally:
        credentials.dispose()


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    if settings.log_dir:
        setup_logging(settings.log_dir)

    try:
        output = asyncio.run(run(args))
    except DatasourceError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if output is not None:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
