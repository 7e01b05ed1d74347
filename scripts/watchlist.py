#!/usr/bin/env python3
"""Manage the symbols tracked by the hodlit backend."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Sequence

import requests

from hodlit.client import HodlClient
from hodlit.config import AppSettings
from hodlit.errors import ApiError
from hodlit.schemas import SymbolEntry


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="Show tracked symbols.")
    add = commands.add_parser("add", help="Track a symbol (e.g. BTCUSDT).")
    add.add_argument("symbol")
    remove = commands.add_parser("remove", help="Stop tracking a symbol.")
    remove.add_argument("symbol")
    return parser.parse_args(argv)


def format_entry(entry: SymbolEntry) -> str:
    created = datetime.fromtimestamp(entry.create_ts, tz=timezone.utc).strftime(
        "%Y-%m-%d %H:%M") if entry.create_ts else "-"
    state = "valid" if entry.is_valid else "invalid"
    return f"{entry.symbol.upper():<16}{state:<10}{created}"


def run(args: argparse.Namespace, client: HodlClient) -> None:
    watchlist = client.watchlist()
    if args.command == "list":
        entries = watchlist.refresh()
        if not entries:
            print("No symbols tracked.")
        for entry in entries:
            print(format_entry(entry))
    elif args.command == "add":
        watchlist.add(args.symbol)
        print(f"Added {args.symbol.upper()}; tracking {len(watchlist)} symbols.")
    elif args.command == "remove":
        response = watchlist.remove(args.symbol)
        print(json.dumps(response, indent=2, ensure_ascii=False))


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = AppSettings()
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    with HodlClient.from_settings(settings) as client:
        try:
            run(args, client)
        except ApiError as exc:
            print(f"{exc.kind.value}: {exc.message}", file=sys.stderr)
            if exc.payload is not None:
                print(json.dumps(exc.payload, indent=2, ensure_ascii=False), file=sys.stderr)
            return 1
        except requests.RequestException as exc:
            print(f"network error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
